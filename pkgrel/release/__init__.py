"""Monorepo package release: validation, plan and driver."""

from pkgrel.release.driver import ReleaseReport, execute_plan, release_package
from pkgrel.release.errors import ReleaseError
from pkgrel.release.model import (
    PackageName,
    ReleaseTarget,
    TagVersion,
    build_target,
    package_remote_url,
    parse_package_name,
    parse_tag_version,
    resolve_target,
)
from pkgrel.release.steps import ReleaseStep, plan_release

__all__ = [
    "PackageName",
    "ReleaseError",
    "ReleaseReport",
    "ReleaseStep",
    "ReleaseTarget",
    "TagVersion",
    "build_target",
    "execute_plan",
    "package_remote_url",
    "parse_package_name",
    "parse_tag_version",
    "plan_release",
    "release_package",
    "resolve_target",
]
