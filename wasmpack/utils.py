"""Helpers shared by the commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator


def get_crate_path(path: str | os.PathLike | None = None) -> Path:
    """Return ``path``, or search upward from the cwd for a crate."""
    if path is not None:
        return Path(path)
    return _find_manifest_from_cwd()


def _find_manifest_from_cwd() -> Path:
    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        if (directory / "Cargo.toml").is_file():
            return directory
    return Path(".")


def create_pkg_dir(out_dir: str | os.PathLike) -> None:
    """Create the output directory and a ``.gitignore`` ignoring everything."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    (out / ".gitignore").write_text("*")


def find_pkg_directory(path: str | os.PathLike) -> Path | None:
    """Find a directory named ``pkg`` at or below ``path``."""
    root = Path(path)
    if _is_pkg_directory(root):
        return root
    return next((p for p in _walk(root) if _is_pkg_directory(p)), None)


def _walk(root: Path) -> Iterator[Path]:
    yield root
    if not root.is_dir() or root.is_symlink():
        return
    try:
        entries = sorted(root.iterdir())
    except OSError:
        return
    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            yield from _walk(entry)
        else:
            yield entry


def _is_pkg_directory(path: Path) -> bool:
    return path.is_dir() and path.name == "pkg"


def elapsed(seconds: float) -> str:
    """Render a duration in seconds for display on a console."""
    nanos = round(seconds * 1_000_000_000)
    secs, subsec = divmod(nanos, 1_000_000_000)
    if secs >= 60:
        return f"{secs // 60}m {secs % 60:02}s"
    return f"{secs}.{subsec // 10_000_000:02}s"