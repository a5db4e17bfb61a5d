"""Access level of a package being published to npm."""

from __future__ import annotations

from enum import Enum


class Access(Enum):
    """Who may install the published package."""

    PUBLIC = "public"
    RESTRICTED = "restricted"

    @classmethod
    def parse(cls, text: str) -> "Access":
        """Parse an ``--access`` value; ``private`` means restricted."""
        if text == "public":
            return cls.PUBLIC
        if text in ("restricted", "private"):
            return cls.RESTRICTED
        raise ValueError(
            f"{text} is not a supported access level. See the npm documentation "
            "for more information on npm package access levels."
        )

    def __str__(self) -> str:
        return f"--access={self.value}"