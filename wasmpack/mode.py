"""Install modes that decide which setup steps run."""

from __future__ import annotations

from enum import Enum


class InstallMode(Enum):
    """Which mode of initialisation is running."""

    NORMAL = "normal"
    NOINSTALL = "no-install"
    FORCE = "force"

    @classmethod
    def parse(cls, text: str) -> "InstallMode":
        """Parse a ``--mode`` value."""
        for mode in cls:
            if mode.value == text:
                return mode
        raise ValueError(f"Unknown build mode: {text}")

    def install_permitted(self) -> bool:
        """Whether tools may be installed in this mode."""
        return self is not InstallMode.NOINSTALL

    def __str__(self) -> str:
        return self.value