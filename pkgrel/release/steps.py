"""The fixed release plan.

A release is twelve ordered steps. The first two validate the inputs and
run nothing; each of the remaining ten issues exactly one git command. The
plan is pure data so it can be printed, dry-run or executed.
"""

from __future__ import annotations

from dataclasses import dataclass

from pkgrel import git
from pkgrel.core.config import Config
from pkgrel.release.model import ReleaseTarget


# Steps after this one run on a rewritten branch; a failure there leaves the
# local repository needing manual cleanup.
HISTORY_REWRITE_STEP = 5


@dataclass(frozen=True, slots=True)
class ReleaseStep:
    """One step of the release.

    Attributes:
        number: 1-based position in the plan.
        title: Short human description shown as progress.
        command: git argument vector, empty for validation steps.
        failure: Message reported when the command exits non-zero.
    """

    number: int
    title: str
    command: tuple[str, ...] = ()
    failure: str = ""

    @property
    def runs_command(self) -> bool:
        return bool(self.command)


def plan_release(target: ReleaseTarget, config: Config | None = None) -> tuple[ReleaseStep, ...]:
    """Build the ordered steps for ``target``."""
    cfg = config or Config()
    remote = cfg.package_remote
    branch = cfg.branch

    def step(number: int, title: str, command: list[str], failure: str) -> ReleaseStep:
        return ReleaseStep(number=number, title=title, command=tuple(command), failure=failure)

    return (
        ReleaseStep(number=1, title=f"Validate package name '{target.package}'"),
        ReleaseStep(number=2, title=f"Validate tag version '{target.version}'"),
        step(
            3,
            f"Tag {target.monorepo_tag} in the main repository",
            git.tag_annotated(target.monorepo_tag, target.monorepo_tag),
            "Could not tag the new package version in the main repository.",
        ),
        step(
            4,
            f"Push {target.monorepo_tag} to {cfg.origin_remote}",
            git.push_ref(cfg.origin_remote, target.monorepo_tag),
            "Could not push the new package version tag to the main repository.",
        ),
        step(
            5,
            f"Filter {branch} down to {target.subdirectory}",
            git.filter_subdirectory(target.subdirectory, branch),
            "Could not filter the branch to the package contents.",
        ),
        step(
            6,
            f"Add remote {remote} ({target.remote_url})",
            git.add_remote(remote, target.remote_url),
            "Could not add the new package repository remote.",
        ),
        step(
            7,
            f"Force-push {branch} to {remote}",
            git.force_push_branch(remote, branch),
            "Could not push to the new package repository.",
        ),
        step(
            8,
            f"Fetch existing tags from {remote}",
            git.fetch_tags(remote),
            "Could not fetch the existing tags of the package.",
        ),
        step(
            9,
            f"Tag {target.package_tag} in the package repository",
            git.tag_annotated(target.package_tag, target.package_tag_message),
            "Could not tag the new version in the package repository.",
        ),
        step(
            10,
            f"Push {target.package_tag} to {remote}",
            git.push_ref(remote, target.package_tag),
            "Could not push the new version tag to the package repository.",
        ),
        step(
            11,
            f"Reset {branch} to its original state",
            git.reset_hard(git.original_ref(branch)),
            "Could not reset the repository to its original state.",
        ),
        step(
            12,
            f"Remove remote {remote}",
            git.remove_remote(remote),
            "Could not clean up the package repository remote.",
        ),
    )


def recovery_hint(failed: ReleaseStep, config: Config | None = None) -> str | None:
    """Manual cleanup advice for a failure after the history rewrite."""
    if failed.number <= HISTORY_REWRITE_STEP:
        return None
    cfg = config or Config()
    parts: list[str] = []
    if failed.number <= 11:
        parts.append(f"git reset --hard {git.original_ref(cfg.branch)}")
    if failed.number > 6:
        parts.append(f"git remote rm {cfg.package_remote}")
    return "local repository left mid-release; restore it with: " + " && ".join(parts)
