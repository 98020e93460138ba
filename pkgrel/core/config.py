"""Typed release configuration.

The defaults reproduce the fixed Jetpack topology: an ``origin`` monorepo
remote, one ``package`` remote per package under
``github.com/Automattic/jetpack-<name>``, and packages living in
``packages/<name>`` on ``master``. A ``pkgrel.toml`` file can override any of
them under a ``[release]`` table.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "DEFAULT_REMOTE_URL_TEMPLATE",
    "find_config",
    "load_config",
]

CONFIG_FILENAME = "pkgrel.toml"

DEFAULT_ORIGIN_REMOTE = "origin"
DEFAULT_PACKAGE_REMOTE = "package"
DEFAULT_BRANCH = "master"
DEFAULT_PACKAGES_DIR = "packages"
DEFAULT_REMOTE_URL_TEMPLATE = "https://github.com/Automattic/jetpack-{package}.git"
DEFAULT_TAG_PREFIX = "automattic/jetpack-"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Release settings.

    Attributes:
        origin_remote: Remote of the monorepo, receives the namespaced tag.
        package_remote: Name of the temporary remote for the package repository.
        branch: Branch whose history is rewritten and force-pushed.
        packages_dir: Monorepo directory holding one subdirectory per package.
        remote_url_template: Package repository URL, ``{package}`` is substituted.
        tag_prefix: Prefix of the monorepo tag, followed by ``<name>@<version>``.
    """

    origin_remote: str = DEFAULT_ORIGIN_REMOTE
    package_remote: str = DEFAULT_PACKAGE_REMOTE
    branch: str = DEFAULT_BRANCH
    packages_dir: str = DEFAULT_PACKAGES_DIR
    remote_url_template: str = DEFAULT_REMOTE_URL_TEMPLATE
    tag_prefix: str = DEFAULT_TAG_PREFIX

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        release: StrDict = get_table(data, "release") or {}

        return cls(
            origin_remote=get_str(release, "origin_remote") or DEFAULT_ORIGIN_REMOTE,
            package_remote=get_str(release, "package_remote") or DEFAULT_PACKAGE_REMOTE,
            branch=get_str(release, "branch") or DEFAULT_BRANCH,
            packages_dir=(get_str(release, "packages_dir") or "").strip("/") or DEFAULT_PACKAGES_DIR,
            remote_url_template=get_str(release, "remote_url_template")
            or DEFAULT_REMOTE_URL_TEMPLATE,
            tag_prefix=get_str(release, "tag_prefix") or DEFAULT_TAG_PREFIX,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load release settings from a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure.
    """
    match _parse_toml(path):
        case Err(e):
            return Err(e)
        case Ok(data):
            pass

    config = Config.from_dict(data)
    template = config.remote_url_template
    if "{package}" not in template:
        return Err(
            ConfigError("remote_url_template must contain a {package} placeholder", path=path)
        )
    try:
        template.format(package="x")
    except (KeyError, IndexError, ValueError) as e:
        return Err(ConfigError(f"Invalid remote_url_template {template!r}: {e!r}", path=path))
    return Ok(config)


def find_config(repo_root: Path) -> Path | None:
    """Return ``<repo_root>/pkgrel.toml`` if it exists."""
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None
