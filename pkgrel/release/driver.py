"""Release driver: run the plan step by step, stop at the first failure.

There is no retry and no rollback. If a step fails, later steps (including
the reset and remote removal at the end) do not run, and the error carries a
hint describing the manual cleanup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pkgrel.core.config import Config
from pkgrel.core.result import Err, Ok, Result
from pkgrel.output.console import Style
from pkgrel.platform.process import CommandExecutor, format_command
from pkgrel.release.errors import ReleaseError
from pkgrel.release.model import ReleaseTarget, resolve_target
from pkgrel.release.steps import ReleaseStep, plan_release, recovery_hint

if TYPE_CHECKING:
    from pkgrel.output.console import ConsoleProtocol

__all__ = ["ReleaseReport", "execute_plan", "release_package"]


@dataclass(frozen=True, slots=True)
class ReleaseReport:
    target: ReleaseTarget
    steps: tuple[ReleaseStep, ...]

    @property
    def commands(self) -> tuple[tuple[str, ...], ...]:
        return tuple(s.command for s in self.steps if s.runs_command)


def execute_plan(
    target: ReleaseTarget,
    steps: tuple[ReleaseStep, ...],
    *,
    executor: CommandExecutor,
    console: ConsoleProtocol,
    config: Config | None = None,
) -> Result[ReleaseReport, ReleaseError]:
    """Run ``steps`` in order through ``executor``.

    Validation steps are reported as done without running anything. The
    first command that exits non-zero ends the run with
    ``Err(ReleaseError(kind="command_failed"))``.
    """
    total = len(steps)
    for step in steps:
        console.header(f"[{step.number}/{total}] {step.title}")
        if not step.runs_command:
            continue

        console.print(f"$ {format_command(step.command)}", Style.DIM)
        match executor.run(step.command):
            case Err(e):
                return Err(
                    ReleaseError(
                        kind="command_failed",
                        message=f"{step.failure} ({e})",
                        hint=recovery_hint(step, config),
                        step=step.number,
                        returncode=e.returncode,
                    )
                )
            case Ok(_):
                pass

    return Ok(ReleaseReport(target=target, steps=steps))


def release_package(
    package_name: str | None,
    tag_version: str | None,
    *,
    executor: CommandExecutor,
    console: ConsoleProtocol,
    config: Config | None = None,
) -> Result[ReleaseReport, ReleaseError]:
    """Validate the inputs, then run the full release.

    Nothing is executed when validation fails.
    """
    match resolve_target(package_name, tag_version, config):
        case Err(e):
            return Err(e)
        case Ok(target):
            pass

    steps = plan_release(target, config)
    return execute_plan(target, steps, executor=executor, console=console, config=config)
