"""Running child processes with logging and uniform error reporting."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Sequence

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """A child process exited unsuccessfully."""

    def __init__(self, command_name: str, returncode: int, command: Sequence[str]):
        self.command_name = command_name
        self.returncode = returncode
        self.command = list(command)
        super().__init__(
            f"failed to execute `{command_name}`: exited with "
            f"{_describe_status(returncode)}\n  full command: {self.command!r}"
        )


def _describe_status(returncode: int) -> str:
    if returncode < 0:
        return f"signal: {-returncode}"
    return f"exit code: {returncode}"


def new_command(program: str) -> list[str]:
    """Return the argument list that launches ``program``.

    On Windows the program is started through ``cmd /c`` so that batch
    wrappers such as ``npm`` resolve correctly.
    """
    if sys.platform == "win32":
        return ["cmd", "/c", program]
    return [program]


def run(command: Sequence[str], command_name: str) -> None:
    """Run ``command``; raise :class:`CommandError` if it fails."""
    args = [str(arg) for arg in command]
    logger.info("Running %r", args)
    completed = subprocess.run(args)
    if completed.returncode != 0:
        raise CommandError(str(command_name), completed.returncode, args)


def run_capture_stdout(command: Sequence[str], command_name: object) -> str:
    """Run ``command`` and return its standard output as text."""
    args = [str(arg) for arg in command]
    logger.info("Running %r", args)
    completed = subprocess.run(args, stdout=subprocess.PIPE)
    if completed.returncode != 0:
        raise CommandError(str(command_name), completed.returncode, args)
    return completed.stdout.decode("utf-8", errors="replace")