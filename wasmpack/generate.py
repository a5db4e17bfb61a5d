"""Creating a new project from a template with cargo-generate."""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from typing import Sequence

from wasmpack import child, emoji
from wasmpack.cache import Download, get_wasm_pack_cache
from wasmpack.install import download_prebuilt_or_cargo_install
from wasmpack.mode import InstallMode
from wasmpack.tool import Tool

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "https://github.com/rustwasm/wasm-pack-template"


def generate(template: str, name: str, download: Download) -> None:
    """Run ``cargo generate`` in the current directory."""
    bin_path = download.binary("cargo-generate")
    command = [str(bin_path), "generate", "--git", template, "--name", name]
    print(f"{emoji.SHEEP} Generating a new rustwasm project with name '{name}'...")
    try:
        child.run(command, "cargo-generate")
    except (child.CommandError, OSError, subprocess.SubprocessError) as exc:
        raise RuntimeError(f"Running cargo-generate: {exc}") from exc


def new_project(template: str, name: str, install_permitted: bool) -> None:
    """Obtain cargo-generate and create project ``name`` from ``template``."""
    logger.info("Generating a new rustwasm project...")
    download = download_prebuilt_or_cargo_install(
        Tool.CARGO_GENERATE, get_wasm_pack_cache(), "latest", install_permitted
    )
    generate(template, name, download)
    print(f"\U0001f411 Generated new project at /{name}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: create a new project from a template."""
    parser = argparse.ArgumentParser(
        prog="wasm-pack new", description="create a new project with a template"
    )
    parser.add_argument("name", help="the name of the project")
    parser.add_argument(
        "--template", "--temp", default=DEFAULT_TEMPLATE, help="the URL of the template"
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=InstallMode.parse,
        default=InstallMode.NORMAL,
        help="whether tools may be installed [no-install, normal, force]",
    )
    args = parser.parse_args(argv)
    logger.info("Template: %r", args.template)
    logger.info("Name: %r", args.name)
    try:
        new_project(args.template, args.name, args.mode.install_permitted())
    except (RuntimeError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())