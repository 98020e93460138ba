"""Command execution with Result-based error handling.

The release steps only care whether a command succeeded, so the executor
contract is a single ``run(command) -> Result[None, ProcessError]``. Output
is not captured: git writes its progress straight to the terminal.

Usage:
    executor = SubprocessExecutor(cwd=Path("."))
    match executor.run(["git", "fetch", "--tags"]):
        case Ok(_):
            ...
        case Err(error):
            print(f"error: {error}")
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from pkgrel.core.result import Err, Ok, Result

__all__ = [
    "CommandExecutor",
    "ProcessError",
    "RecordingExecutor",
    "SubprocessExecutor",
    "format_command",
]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed command.

    Attributes:
        command: The command that was executed.
        returncode: Exit status, -1 if the process could not be started.
        detail: OS error text when the process could not be started.
    """

    command: tuple[str, ...]
    returncode: int
    detail: str = ""

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        if self.returncode == -1 and self.detail:
            return f"{cmd_str} could not start: {self.detail}"
        return f"{cmd_str} failed (exit {self.returncode})"


def format_command(command: Sequence[str]) -> str:
    """Render an argument vector as a copy-pasteable shell line."""
    return shlex.join(command)


class CommandExecutor(Protocol):
    """Runs one external command and reports success or failure."""

    def run(self, command: Sequence[str]) -> Result[None, ProcessError]: ...


class SubprocessExecutor:
    """Executor backed by ``subprocess.run``.

    Blocks until the command exits; stdout and stderr are inherited so the
    user sees git's own output.
    """

    def __init__(self, cwd: Path, env: dict[str, str] | None = None) -> None:
        self.cwd = cwd
        self.env = env

    def run(self, command: Sequence[str]) -> Result[None, ProcessError]:
        cmd = list(command)
        try:
            proc = subprocess.run(cmd, cwd=str(self.cwd), env=self.env, check=False)
        except OSError as e:
            return Err(ProcessError(command=tuple(cmd), returncode=-1, detail=str(e)))

        if proc.returncode != 0:
            return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode))
        return Ok(None)


def _empty_calls() -> list[tuple[str, ...]]:
    return []


@dataclass
class RecordingExecutor:
    """Executor that records commands instead of running them.

    Used for ``--dry-run`` and in tests. When ``fail_at`` is set, the
    command with that zero-based call index returns ``Err`` with
    ``returncode``; every other call succeeds.
    """

    fail_at: int | None = None
    returncode: int = 1
    calls: list[tuple[str, ...]] = field(default_factory=_empty_calls)

    def run(self, command: Sequence[str]) -> Result[None, ProcessError]:
        cmd = tuple(command)
        index = len(self.calls)
        self.calls.append(cmd)
        if self.fail_at is not None and index == self.fail_at:
            return Err(ProcessError(command=cmd, returncode=self.returncode))
        return Ok(None)
