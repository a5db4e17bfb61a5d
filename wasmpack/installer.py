"""Producing the versioned installer pages from their templates."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def read_manifest_version(manifest: str) -> str:
    """The quoted value of the first ``version =`` line of a manifest."""
    line = next(
        (line for line in manifest.splitlines() if line.startswith("version =")),
        None,
    )
    if line is None or line.count('"') < 2:
        raise ValueError("manifest has no version line")
    return line[line.index('"') + 1 : line.rindex('"')]


def fixup(text: str, version: str) -> str:
    """Replace every ``$VERSION`` placeholder with ``v<version>``."""
    return text.replace("$VERSION", f"v{version}")


def build_installer(root: str | os.PathLike = ".") -> None:
    """Write ``docs/installer`` from the templates in ``docs/_installer``."""
    base = Path(root)
    source = base / "docs" / "_installer"
    output = base / "docs" / "installer"
    version = read_manifest_version((base / "Cargo.toml").read_text())

    output.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source / "wasm-pack.js", output / "wasm-pack.js")
    for name in ("index.html", "init.sh"):
        text = (source / name).read_text()
        (output / name).write_text(fixup(text, version))