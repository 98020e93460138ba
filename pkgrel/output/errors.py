"""Error presentation: message formatting and exit code mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pkgrel.core.errors import ErrorCode
from pkgrel.output.console import Style
from pkgrel.release.errors import ReleaseError

if TYPE_CHECKING:
    from pkgrel.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    match error:
        case ReleaseError(kind="invalid_input", message=message):
            console.error(message)
        case ReleaseError(kind="command_failed", message=message, step=step):
            console.error(f"step {step} failed: {message}")
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    match error.kind:
        case "invalid_input":
            return int(ErrorCode.USER_ERROR)
        case "command_failed":
            return int(ErrorCode.COMMAND_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.COMMAND_ERROR)
