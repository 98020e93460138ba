from __future__ import annotations

import re
from dataclasses import dataclass

from pkgrel.core.config import Config
from pkgrel.core.result import Err, Ok, Result
from pkgrel.release.errors import ReleaseError


_PACKAGE_NAME_RE = re.compile(r"^[A-Za-z0-9-]+$")
_TAG_VERSION_RE = re.compile(r"^[0-9.]+$")


@dataclass(frozen=True, slots=True)
class PackageName:
    """Name of a package directory, also the suffix of its repository name."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TagVersion:
    """Release version such as ``1.2.3``."""

    value: str

    def __str__(self) -> str:
        return self.value


def parse_package_name(raw: str | None) -> Result[PackageName, ReleaseError]:
    if not raw:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message="Package name has not been specified.",
                step=1,
            )
        )
    # fullmatch: "$" alone would accept a trailing newline.
    if _PACKAGE_NAME_RE.fullmatch(raw) is None:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message="Package name is incorrect.",
                hint="use only letters, digits and dashes (example: example-package)",
                step=1,
            )
        )
    return Ok(PackageName(raw))


def parse_tag_version(raw: str | None) -> Result[TagVersion, ReleaseError]:
    if not raw:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message="Tag name (version) has not been specified.",
                step=2,
            )
        )
    if _TAG_VERSION_RE.fullmatch(raw) is None:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message="Tag name (version) is incorrect.",
                hint="use only digits and dots (example: 1.2.3)",
                step=2,
            )
        )
    return Ok(TagVersion(raw))


@dataclass(frozen=True, slots=True)
class ReleaseTarget:
    """Everything a release run derives from the package name and version."""

    package: PackageName
    version: TagVersion
    monorepo_tag: str
    package_tag: str
    package_tag_message: str
    subdirectory: str
    remote_url: str


def build_target(
    package: PackageName,
    version: TagVersion,
    config: Config | None = None,
) -> ReleaseTarget:
    cfg = config or Config()
    return ReleaseTarget(
        package=package,
        version=version,
        monorepo_tag=f"{cfg.tag_prefix}{package}@{version}",
        package_tag=f"v{version}",
        package_tag_message=f"Version {version}",
        subdirectory=f"{cfg.packages_dir}/{package}",
        remote_url=package_remote_url(package, cfg),
    )


def package_remote_url(package: PackageName, config: Config | None = None) -> str:
    cfg = config or Config()
    return cfg.remote_url_template.format(package=package.value)


def resolve_target(
    package_name: str | None,
    tag_version: str | None,
    config: Config | None = None,
) -> Result[ReleaseTarget, ReleaseError]:
    """Validate both inputs (package name first) and derive the target."""
    match parse_package_name(package_name):
        case Err(e):
            return Err(e)
        case Ok(package):
            pass

    match parse_tag_version(tag_version):
        case Err(e):
            return Err(e)
        case Ok(version):
            pass

    return Ok(build_target(package, version, config))
