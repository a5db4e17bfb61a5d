from pathlib import Path

from wasmpack import utils


def test_get_crate_path_explicit_is_kept():
    assert utils.get_crate_path("some/crate") == Path("some/crate")


def test_get_crate_path_searches_upward(tmp_path, monkeypatch):
    (tmp_path / "Cargo.toml").write_text("[package]\n")
    nested = tmp_path / "src" / "deep"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    assert utils.get_crate_path(None).resolve() == tmp_path.resolve()


def test_create_pkg_dir_writes_gitignore(tmp_path):
    out = tmp_path / "custom" / "out"
    utils.create_pkg_dir(out)
    assert (out / ".gitignore").read_text() == "*"


def test_create_pkg_dir_is_idempotent(tmp_path):
    out = tmp_path / "pkg"
    utils.create_pkg_dir(out)
    utils.create_pkg_dir(out)
    assert sorted(p.name for p in out.iterdir()) == [".gitignore"]


def test_find_pkg_directory_itself(tmp_path):
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    assert utils.find_pkg_directory(pkg) == pkg


def test_find_pkg_directory_in_child(tmp_path):
    pkg = tmp_path / "a" / "pkg"
    pkg.mkdir(parents=True)
    assert utils.find_pkg_directory(tmp_path) == pkg


def test_find_pkg_directory_ignores_files(tmp_path):
    (tmp_path / "pkg").write_text("not a directory")
    assert utils.find_pkg_directory(tmp_path) is None


def test_elapsed_under_a_minute():
    assert utils.elapsed(1.5) == "1.50s"


def test_elapsed_over_a_minute():
    assert utils.elapsed(125) == "2m 05s"