"""Locating, downloading or building the CLI tools the build depends on."""

from __future__ import annotations

import logging
import os
import platform
import shutil
import subprocess
import sys
from pathlib import Path

from wasmpack import child, emoji
from wasmpack.cache import Cache, Download
from wasmpack.krate import Krate
from wasmpack.tool import Tool

logger = logging.getLogger(__name__)


class InstallError(RuntimeError):
    """A tool could not be found, downloaded or installed."""


_HOST_TARGETS = {
    "Linux": "x86_64-unknown-linux-musl",
    "Darwin": "x86_64-apple-darwin",
    "Windows": "x86_64-pc-windows-msvc",
}

_BINARIES = {
    Tool.WASM_BINDGEN: ("wasm-bindgen", "wasm-bindgen-test-runner"),
    Tool.CARGO_GENERATE: ("cargo-generate",),
}

_CRATE_NAMES = {
    Tool.WASM_BINDGEN: "wasm-bindgen-cli",
    Tool.CARGO_GENERATE: "cargo-generate",
}


def _exe_name(name: str) -> str:
    return f"{name}.exe" if sys.platform == "win32" else name


def download_prebuilt_or_cargo_install(
    tool: Tool, cache: Cache, version: str, install_permitted: bool
) -> Download:
    """Provide ``tool`` at ``version``.

    A global install on ``PATH`` with the right version is preferred, then a
    prebuilt release archive, and finally ``cargo install``.
    """
    found = shutil.which(str(tool))
    if found is not None:
        path = Path(found)
        logger.debug("found global %s binary at: %s", tool, path)
        if check_version(tool, path, version):
            return Download.at(path.parent)

    print(f"{emoji.DOWN_ARROW}Installing {tool}...", file=sys.stderr)

    try:
        return download_prebuilt(tool, cache, version, install_permitted)
    except Exception as exc:  # any failure falls back to building from source
        logger.warning(
            "could not download pre-built `%s`: %s. Falling back to `cargo install`.",
            tool,
            exc,
        )

    return cargo_install(tool, cache, version, install_permitted)


def check_version(tool: Tool, path: str | os.PathLike, expected_version: str) -> bool:
    """Whether the tool at ``path`` reports ``expected_version``.

    ``latest`` stands for the newest version published on the registry.
    """
    if expected_version == "latest":
        expected_version = Krate.fetch(tool).max_version
    actual = get_cli_version(tool, path)
    logger.info(
        "Checking installed `%s` version == expected version: %s == %s",
        tool,
        actual,
        expected_version,
    )
    return actual == expected_version


def get_cli_version(tool: Tool, path: str | os.PathLike) -> str:
    """The version a CLI tool prints for ``--version``."""
    stdout = child.run_capture_stdout([str(path), "--version"], tool)
    words = stdout.split()
    if len(words) < 2:
        raise InstallError(
            "Something went wrong! We couldn't determine your version of the "
            "wasm-bindgen CLI. We were supposed to set that up for you, so it's "
            "likely not your fault! You should file an issue."
        )
    return words[1]


def download_prebuilt(
    tool: Tool, cache: Cache, version: str, install_permitted: bool
) -> Download:
    """Download a precompiled copy of ``tool`` into ``cache``."""
    try:
        url = prebuilt_url(tool, version)
    except Exception as exc:
        raise InstallError(
            f"no prebuilt {tool} binaries are available for this platform: {exc}"
        ) from exc
    download = cache.download(install_permitted, str(tool), _BINARIES[tool], url)
    if download is None:
        raise InstallError(f"{tool} v{version} is not installed!")
    return download


def host_target() -> str:
    """The target triple of prebuilt binaries for this host."""
    triple = _HOST_TARGETS.get(platform.system())
    if triple is None or platform.machine().lower() not in ("x86_64", "amd64"):
        raise InstallError("Unrecognized target!")
    return triple


def prebuilt_url(tool: Tool, version: str) -> str:
    """The URL of a precompiled release of ``tool`` for this host."""
    target = host_target()
    if tool is Tool.WASM_BINDGEN:
        return (
            "https://github.com/rustwasm/wasm-bindgen/releases/download/"
            f"{version}/wasm-bindgen-{version}-{target}.tar.gz"
        )
    latest = Krate.fetch(Tool.CARGO_GENERATE).max_version
    return (
        "https://github.com/cargo-generate/cargo-generate/releases/download/"
        f"v{latest}/cargo-generate-v{latest}-{target}.tar.gz"
    )


def cargo_install(
    tool: Tool, cache: Cache, version: str, install_permitted: bool
) -> Download:
    """Build ``tool`` with ``cargo install`` into the cache."""
    logger.debug("Attempting to use a `cargo install`ed version of `%s=%s`", tool, version)

    dirname = f"{tool}-cargo-install-{version}"
    destination = cache.join(dirname)
    if destination.exists():
        logger.debug(
            "`cargo install`ed `%s=%s` already exists at %s", tool, version, destination
        )
        return Download.at(destination)

    if not install_permitted:
        raise InstallError(f"{tool} v{version} is not installed!")

    # Install to a temporary location first so that an interrupted install
    # never leaves stale files where a finished one is expected.
    tmp = cache.join(f".{dirname}")
    shutil.rmtree(tmp, ignore_errors=True)
    logger.debug("cargo installing %s to tempdir: %s", tool, tmp)
    try:
        tmp.mkdir(parents=True)
    except OSError as exc:
        raise InstallError(
            f"failed to create temp dir for `cargo install {tool}`: {exc}"
        ) from exc

    command = [
        "cargo",
        "install",
        "--force",
        _CRATE_NAMES[tool],
        "--version",
        version,
        "--root",
        str(tmp),
    ]
    try:
        child.run(command, "cargo install")
    except (child.CommandError, OSError, subprocess.SubprocessError) as exc:
        raise InstallError(f"Installing {tool} with cargo: {exc}") from exc

    # `cargo install` puts binaries in `$root/bin`; the rest of the code
    # expects them directly in the root, as in the release archives.
    for name in _BINARIES[tool]:
        source = tmp / "bin" / _exe_name(name)
        target = tmp / source.name
        try:
            source.rename(target)
        except OSError as exc:
            raise InstallError(
                f"failed to move {source} to {target} for `cargo install`ed `{name}`: {exc}"
            ) from exc

    tmp.rename(destination)
    return Download.at(destination)