import io
import tarfile

import pytest

from wasmpack.cache import Cache, Download, get_wasm_pack_cache


def _make_tarball(path, files):
    with tarfile.open(path, "w:gz") as tar:
        for name, content in files.items():
            data = content.encode()
            info = tarfile.TarInfo(name)
            info.size = len(data)
            info.mode = 0o755
            tar.addfile(info, io.BytesIO(data))


@pytest.fixture
def bindgen_tarball(tmp_path):
    archive = tmp_path / "wasm-bindgen-0.2.37.tar.gz"
    _make_tarball(
        archive,
        {
            "wasm-bindgen-0.2.37/wasm-bindgen": "bindgen",
            "wasm-bindgen-0.2.37/wasm-bindgen-test-runner": "runner",
            "wasm-bindgen-0.2.37/README.md": "readme",
        },
    )
    return archive


def test_join_is_inside_destination(tmp_path):
    cache = Cache.at(tmp_path)
    assert cache.join("tool") == tmp_path / "tool"


def test_download_binary_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="binary does not exist"):
        Download.at(tmp_path).binary("wasm-bindgen")


def test_download_extracts_only_requested_binaries(tmp_path, bindgen_tarball):
    cache = Cache.at(tmp_path / "cache")
    binaries = ["wasm-bindgen", "wasm-bindgen-test-runner"]
    dl = cache.download(True, "wasm-bindgen", binaries, bindgen_tarball.as_uri())
    assert dl.binary("wasm-bindgen").read_text() == "bindgen"
    assert dl.binary("wasm-bindgen-test-runner").read_text() == "runner"
    assert not (dl.root / "README.md").exists()


def test_download_reuses_existing_without_permission(tmp_path, bindgen_tarball):
    cache = Cache.at(tmp_path / "cache")
    url = bindgen_tarball.as_uri()
    first = cache.download(True, "wasm-bindgen", ["wasm-bindgen"], url)
    second = cache.download(False, "wasm-bindgen", ["wasm-bindgen"], url)
    assert second == first


def test_download_not_permitted_returns_none(tmp_path, bindgen_tarball):
    cache = Cache.at(tmp_path / "cache")
    url = bindgen_tarball.as_uri()
    assert cache.download(False, "wasm-bindgen", ["wasm-bindgen"], url) is None


def test_download_missing_binary_raises(tmp_path, bindgen_tarball):
    cache = Cache.at(tmp_path / "cache")
    with pytest.raises(RuntimeError, match="missing expected executables"):
        cache.download(True, "x", ["cargo-generate"], bindgen_tarball.as_uri())
    assert list((tmp_path / "cache").iterdir()) == []


def test_get_wasm_pack_cache_honours_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("WASM_PACK_CACHE", str(tmp_path))
    assert get_wasm_pack_cache().destination == tmp_path


def test_get_wasm_pack_cache_default_name(monkeypatch):
    monkeypatch.delenv("WASM_PACK_CACHE", raising=False)
    assert get_wasm_pack_cache().destination.name == ".wasm-pack"