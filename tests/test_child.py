import sys
from unittest import mock

import pytest

from wasmpack import child
from wasmpack.child import CommandError
from wasmpack.tool import Tool


def test_new_command_on_windows_uses_cmd():
    with mock.patch("sys.platform", "win32"):
        assert child.new_command("npm") == ["cmd", "/c", "npm"]


def test_new_command_elsewhere_is_plain():
    with mock.patch("sys.platform", "linux"):
        assert child.new_command("npm") == ["npm"]


def test_run_success_returns_none():
    assert child.run([sys.executable, "-c", "pass"], "python") is None


def test_run_failure_raises_with_name():
    with pytest.raises(CommandError) as info:
        child.run([sys.executable, "-c", "import sys; sys.exit(3)"], "python-check")
    assert "failed to execute `python-check`" in str(info.value)
    assert info.value.returncode == 3


def test_run_capture_stdout_returns_output():
    out = child.run_capture_stdout(
        [sys.executable, "-c", "print('wasm-bindgen 0.2.37')"], Tool.WASM_BINDGEN
    )
    assert out.split() == ["wasm-bindgen", "0.2.37"]


def test_run_capture_stdout_failure_names_tool():
    with pytest.raises(CommandError) as info:
        child.run_capture_stdout(
            [sys.executable, "-c", "import sys; sys.exit(1)"], Tool.WASM_BINDGEN
        )
    assert "`wasm-bindgen`" in str(info.value)