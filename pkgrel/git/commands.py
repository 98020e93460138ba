"""Argument vectors for the git operations a release needs.

Each builder returns a ``list[str]`` ready for a ``CommandExecutor``.
Arguments are passed without a shell, so tag names and URLs need no quoting.
"""

from __future__ import annotations

__all__ = [
    "ORIGINAL_REFS_PREFIX",
    "add_remote",
    "fetch_tags",
    "filter_subdirectory",
    "force_push_branch",
    "original_ref",
    "push_ref",
    "remove_remote",
    "reset_hard",
    "tag_annotated",
]

# filter-branch keeps the pre-rewrite refs under this namespace.
ORIGINAL_REFS_PREFIX = "refs/original/refs/heads/"


def tag_annotated(name: str, message: str) -> list[str]:
    """Create an annotated tag at HEAD."""
    return ["git", "tag", "-a", name, "-m", message]


def push_ref(remote: str, ref: str) -> list[str]:
    return ["git", "push", remote, ref]


def filter_subdirectory(subdirectory: str, branch: str) -> list[str]:
    """Rewrite ``branch`` so that ``subdirectory`` becomes the project root.

    Commits that end up empty are pruned. ``-f`` discards a backup left by a
    previous rewrite so that the new one can be stored.
    """
    return [
        "git",
        "filter-branch",
        "-f",
        "--prune-empty",
        "--subdirectory-filter",
        subdirectory,
        branch,
    ]


def add_remote(name: str, url: str) -> list[str]:
    return ["git", "remote", "add", name, url]


def force_push_branch(remote: str, branch: str) -> list[str]:
    return ["git", "push", remote, branch, "--force"]


def fetch_tags(remote: str) -> list[str]:
    return ["git", "fetch", remote, "--tags"]


def reset_hard(ref: str) -> list[str]:
    return ["git", "reset", "--hard", ref]


def original_ref(branch: str) -> str:
    """Backup ref of ``branch`` as written by filter-branch."""
    return f"{ORIGINAL_REFS_PREFIX}{branch}"


def remove_remote(name: str) -> list[str]:
    return ["git", "remote", "rm", name]
