"""Git command builders.

Usage:
    from pkgrel.git import tag_annotated

    executor.run(tag_annotated("v1.2.3", "Version 1.2.3"))
"""

from pkgrel.git.commands import (
    ORIGINAL_REFS_PREFIX,
    add_remote,
    fetch_tags,
    filter_subdirectory,
    force_push_branch,
    original_ref,
    push_ref,
    remove_remote,
    reset_hard,
    tag_annotated,
)

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
