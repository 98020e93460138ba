"""Platform abstraction layer (external command execution)."""

from .process import (
    CommandExecutor,
    ProcessError,
    RecordingExecutor,
    SubprocessExecutor,
    format_command,
)

__all__ = [
    "CommandExecutor",
    "ProcessError",
    "RecordingExecutor",
    "SubprocessExecutor",
    "format_command",
]
