"""Looking up crate metadata from the crates.io registry."""

from __future__ import annotations

import json
import urllib.request
from dataclasses import dataclass

_CRATES_API = "https://crates.io/api/v1/crates/{}"


@dataclass(frozen=True)
class Krate:
    """The registry's view of a crate: its newest published version."""

    max_version: str

    @classmethod
    def from_json(cls, text: str | bytes) -> "Krate":
        """Build from a crates.io API response body."""
        try:
            data = json.loads(text)
            return cls(max_version=str(data["crate"]["max_version"]))
        except (json.JSONDecodeError, KeyError, TypeError) as exc:
            raise ValueError(f"malformed crate metadata: {exc}") from exc

    @classmethod
    def fetch(cls, tool: object) -> "Krate":
        """Fetch the metadata of the crate named after ``tool``."""
        request = urllib.request.Request(
            _CRATES_API.format(tool), headers={"User-Agent": "wasmpack"}
        )
        with urllib.request.urlopen(request) as response:
            body = response.read()
        return cls.from_json(body)