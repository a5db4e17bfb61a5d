"""Emoji used in console messages, with plain-text fallbacks."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Emoji:
    """An emoji together with the text shown where it cannot be printed."""

    unicode: str
    fallback: str

    def render(self, unicode_supported: bool) -> str:
        """Return the emoji, or its fallback when unicode is not supported."""
        return self.unicode if unicode_supported else self.fallback

    def __str__(self) -> str:
        return self.render(_stdout_can_encode(self.unicode))


def _stdout_can_encode(text: str) -> bool:
    encoding = getattr(sys.stdout, "encoding", None) or "ascii"
    try:
        text.encode(encoding)
    except (LookupError, UnicodeEncodeError):
        return False
    return True


TARGET = Emoji("\U0001f3af  ", "")
CYCLONE = Emoji("\U0001f300  ", "")
FOLDER = Emoji("\U0001f4c2  ", "")
MEMO = Emoji("\U0001f4dd  ", "")
DOWN_ARROW = Emoji("\u2b07\ufe0f  ", "")
RUNNER = Emoji("\U0001f3c3\u200d\u2640\ufe0f  ", "")
SPARKLE = Emoji("\u2728  ", ":-)")
PACKAGE = Emoji("\U0001f4e6  ", ":-)")
WARN = Emoji("\u26a0\ufe0f  ", ":-)")
DANCERS = Emoji("\U0001f46f  ", "")
ERROR = Emoji("\u26d4  ", "")
INFO = Emoji("\u2139\ufe0f  ", "")
WRENCH = Emoji("\U0001f527  ", "")
CRAB = Emoji("\U0001f980  ", "")
SHEEP = Emoji("\U0001f411 ", "")