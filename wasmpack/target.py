"""Build targets, profiles and the options of the build command."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from wasmpack.mode import InstallMode


class Target(Enum):
    """The JavaScript environment the generated bindings are meant for."""

    BUNDLER = "bundler"
    WEB = "web"
    NODEJS = "nodejs"
    NO_MODULES = "no-modules"

    @classmethod
    def parse(cls, text: str) -> "Target":
        """Parse a ``--target`` value; ``browser`` is an alias of bundler."""
        if text == "browser":
            return cls.BUNDLER
        for target in cls:
            if target.value == text:
                return target
        raise ValueError(f"Unknown target: {text}")

    def __str__(self) -> str:
        return self.value


class BuildProfile(Enum):
    """Whether optimisations, debug info and assertions are enabled."""

    DEV = "dev"
    RELEASE = "release"
    PROFILING = "profiling"

    @classmethod
    def from_flags(
        cls, dev: bool, debug: bool, release: bool, profiling: bool
    ) -> "BuildProfile":
        """Pick the profile from the command-line flags."""
        dev = dev or debug
        chosen = [
            profile
            for profile, flag in ((cls.DEV, dev), (cls.RELEASE, release), (cls.PROFILING, profiling))
            if flag
        ]
        if len(chosen) > 1:
            raise ValueError(
                "Can only supply one of the --dev, --release, or --profiling flags"
            )
        return chosen[0] if chosen else cls.RELEASE

    def output_dir_name(self) -> str:
        """The cargo output directory used for this profile."""
        return "debug" if self is BuildProfile.DEV else "release"


@dataclass
class BuildOptions:
    """Everything given to the build command."""

    path: Path | None = None
    scope: str | None = None
    mode: InstallMode = InstallMode.NORMAL
    disable_dts: bool = False
    target: Target = Target.BUNDLER
    debug: bool = False
    dev: bool = False
    release: bool = False
    profiling: bool = False
    out_dir: str = "pkg"
    out_name: str | None = None
    extra_options: list[str] = field(default_factory=list)

    def profile(self) -> BuildProfile:
        """The build profile that the flags select."""
        return BuildProfile.from_flags(self.dev, self.debug, self.release, self.profiling)

    def resolved_out_dir(self, crate_path: str | os.PathLike) -> Path:
        """The output directory, relative to the crate."""
        return Path(crate_path) / self.out_dir