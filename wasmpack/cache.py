"""The binary cache where downloaded tools are kept."""

from __future__ import annotations

import hashlib
import io
import os
import shutil
import sys
import tarfile
import urllib.error
import urllib.request
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterable

import platformdirs


def _exe_name(name: str) -> str:
    return f"{name}.exe" if sys.platform == "win32" else name


@dataclass(frozen=True)
class Download:
    """A directory holding binaries that were downloaded or installed."""

    root: Path

    @classmethod
    def at(cls, path: str | os.PathLike) -> "Download":
        """A download rooted at ``path``."""
        return cls(Path(path))

    def binary(self, name: str) -> Path:
        """Path to the named executable; raise if it is not there."""
        path = self.root / _exe_name(name)
        if not path.is_file():
            raise FileNotFoundError(f"{path} binary does not exist")
        return path


@dataclass(frozen=True)
class Cache:
    """A directory in which downloaded tools are stored."""

    destination: Path

    @classmethod
    def at(cls, path: str | os.PathLike) -> "Cache":
        """A cache stored at ``path``."""
        return cls(Path(path))

    @classmethod
    def for_app(cls, name: str) -> "Cache":
        """The cache for application ``name`` in the user cache directory."""
        return cls(Path(platformdirs.user_cache_dir()) / f".{name}")

    def join(self, name: str) -> Path:
        """A path inside the cache."""
        return self.destination / name

    def download(
        self,
        install_permitted: bool,
        name: str,
        binaries: Iterable[str],
        url: str,
    ) -> Download | None:
        """Fetch and unpack the archive at ``url``, keeping only ``binaries``.

        A previous download of the same URL is reused. When nothing is cached
        and installing is not permitted, ``None`` is returned.
        """
        wanted = list(binaries)
        dirname = f"{name}-{_hashed_dirname(url, name)}"
        destination = self.destination / dirname
        if destination.exists():
            return Download(destination)
        if not install_permitted:
            return None

        data = _fetch(url)
        self.destination.mkdir(parents=True, exist_ok=True)
        tmp = self.destination / f".{dirname}"
        shutil.rmtree(tmp, ignore_errors=True)
        tmp.mkdir(parents=True)
        try:
            unpack = _unpack_zip if url.endswith(".zip") else _unpack_tar
            found = unpack(data, set(wanted), tmp)
            missing = [b for b in wanted if b not in found]
            if missing:
                raise RuntimeError(
                    f"the archive at {url} was missing expected executables: "
                    + ", ".join(missing)
                )
            tmp.rename(destination)
        except BaseException:
            shutil.rmtree(tmp, ignore_errors=True)
            raise
        return Download(destination)


def _hashed_dirname(url: str, name: str) -> str:
    digest = hashlib.sha256(f"{name}\0{url}".encode()).hexdigest()
    return digest[:16]


def _fetch(url: str) -> bytes:
    try:
        with urllib.request.urlopen(url) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        raise RuntimeError(
            f"failed to download from {url}: received a {exc.code} status code"
        ) from exc
    except urllib.error.URLError as exc:
        raise RuntimeError(f"failed to download from {url}: {exc.reason}") from exc


def _match(member_name: str, wanted: set[str]) -> str | None:
    filename = PurePosixPath(member_name.replace("\\", "/")).name
    stem = PurePosixPath(filename).stem if filename.endswith(".exe") else filename
    return filename if stem in wanted else None


def _unpack_tar(data: bytes, wanted: set[str], into: Path) -> set[str]:
    found: set[str] = set()
    with tarfile.open(fileobj=io.BytesIO(data), mode="r:*") as tar:
        for member in tar:
            if not member.isfile():
                continue
            filename = _match(member.name, wanted)
            source = tar.extractfile(member) if filename else None
            if source is None:
                continue
            target = into / filename
            with source, open(target, "wb") as out:
                shutil.copyfileobj(source, out)
            target.chmod(member.mode | 0o700)
            found.add(filename.removesuffix(".exe"))
    return found


def _unpack_zip(data: bytes, wanted: set[str], into: Path) -> set[str]:
    found: set[str] = set()
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            filename = _match(info.filename, wanted)
            if not filename:
                continue
            target = into / filename
            with archive.open(info) as source, open(target, "wb") as out:
                shutil.copyfileobj(source, out)
            mode = (info.external_attr >> 16) & 0o7777
            target.chmod((mode or 0o755) | 0o700)
            found.add(filename.removesuffix(".exe"))
    return found


def get_wasm_pack_cache() -> Cache:
    """The cache named by ``WASM_PACK_CACHE``, or the default one."""
    path = os.environ.get("WASM_PACK_CACHE")
    if path is not None:
        return Cache.at(path)
    return Cache.for_app("wasm-pack")