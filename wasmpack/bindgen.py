"""Running the wasm-bindgen CLI over a compiled crate."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

import semver

from wasmpack import child
from wasmpack.cache import Download
from wasmpack.install import get_cli_version
from wasmpack.target import BuildProfile, Target
from wasmpack.tool import Tool

logger = logging.getLogger(__name__)

_LEGACY_TARGET_ARGS = {
    Target.NODEJS: "--nodejs",
    Target.NO_MODULES: "--no-modules",
    Target.WEB: "--web",
    Target.BUNDLER: "--browser",
}


def wasm_path_for(
    target_directory: str | os.PathLike, crate_name: str, profile: BuildProfile
) -> Path:
    """Where cargo puts the ``.wasm`` file of a crate for ``profile``."""
    return (
        Path(target_directory)
        / "wasm32-unknown-unknown"
        / profile.output_dir_name()
        / crate_name
    ).with_suffix(".wasm")


def _cli_version(cli_path: str | os.PathLike) -> semver.Version:
    return semver.Version.parse(get_cli_version(Tool.WASM_BINDGEN, cli_path))


def supports_web_target(cli_path: str | os.PathLike) -> bool:
    """Whether the CLI is new enough for the web target."""
    return _cli_version(cli_path) >= semver.Version.parse("0.2.39")


def supports_dash_dash_target(cli_path: str | os.PathLike) -> bool:
    """Whether the CLI accepts the ``--target`` flag."""
    return _cli_version(cli_path) >= semver.Version.parse("0.2.40")


def build_target_arg(target: Target, cli_path: str | os.PathLike) -> str:
    """The value that selects ``target`` for this CLI version."""
    if not supports_dash_dash_target(cli_path):
        return build_target_arg_legacy(target, cli_path)
    return str(target)


def build_target_arg_legacy(target: Target, cli_path: str | os.PathLike) -> str:
    """The stand-alone flag that selects ``target`` on old CLI versions."""
    logger.info(
        "Your version of wasm-bindgen is out of date. You should consider "
        "updating your Cargo.toml to a version >= 0.2.40."
    )
    if target is Target.WEB and not supports_web_target(cli_path):
        raise RuntimeError(
            "Your current version of wasm-bindgen does not support the 'web' "
            "target. Please update your project to wasm-bindgen version >= 0.2.39."
        )
    return _LEGACY_TARGET_ARGS[target]


def wasm_bindgen_build(
    wasm_path: str | os.PathLike,
    bindgen: Download,
    out_dir: str | os.PathLike,
    out_name: str | None,
    disable_dts: bool,
    target: Target,
    debug_js_glue: bool,
    demangle_name_section: bool,
    keep_debug: bool,
) -> None:
    """Generate JavaScript bindings for ``wasm_path`` into ``out_dir``."""
    bindgen_path = bindgen.binary("wasm-bindgen")
    command = [
        str(bindgen_path),
        str(wasm_path),
        "--out-dir",
        str(out_dir),
        "--no-typescript" if disable_dts else "--typescript",
    ]

    target_arg = build_target_arg(target, bindgen_path)
    if supports_dash_dash_target(bindgen_path):
        command += ["--target", target_arg]
    else:
        command.append(target_arg)

    if out_name is not None:
        command += ["--out-name", out_name]
    if debug_js_glue:
        command.append("--debug")
    if not demangle_name_section:
        command.append("--no-demangle")
    if keep_debug:
        command.append("--keep-debug")

    try:
        child.run(command, "wasm-bindgen")
    except (child.CommandError, OSError, subprocess.SubprocessError) as exc:
        raise RuntimeError(f"Running the wasm-bindgen CLI: {exc}") from exc