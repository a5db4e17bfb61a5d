"""The external command-line tools that the build drives."""

from __future__ import annotations

from enum import Enum


class Tool(Enum):
    """A CLI tool that may be located or installed on demand."""

    CARGO_GENERATE = "cargo-generate"
    WASM_BINDGEN = "wasm-bindgen"

    def __str__(self) -> str:
        return self.value