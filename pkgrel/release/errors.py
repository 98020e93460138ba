"""Error types for a release run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal["invalid_input", "command_failed"]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Why a release run stopped.

    ``step`` is the 1-based number of the failed step, ``returncode`` the exit
    status of its command (``None`` for validation failures).
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
    step: int | None = None
    returncode: int | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
