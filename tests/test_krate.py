from unittest import mock

import pytest

from wasmpack.krate import Krate
from wasmpack.tool import Tool


def test_from_json_reads_max_version():
    krate = Krate.from_json('{"crate": {"max_version": "0.2.37", "name": "x"}}')
    assert krate.max_version == "0.2.37"


def test_from_json_missing_field_raises():
    with pytest.raises(ValueError):
        Krate.from_json('{"crate": {}}')


def test_from_json_invalid_json_raises():
    with pytest.raises(ValueError):
        Krate.from_json("not json")


def test_fetch_queries_registry_for_tool():
    with mock.patch("urllib.request.urlopen") as urlopen:
        response = urlopen.return_value.__enter__.return_value
        response.read.return_value = b'{"crate": {"max_version": "0.5.0"}}'
        krate = Krate.fetch(Tool.CARGO_GENERATE)
    assert krate.max_version == "0.5.0"
    request = urlopen.call_args[0][0]
    assert request.full_url.endswith("/crates/cargo-generate")