"""Tests for pkgrel.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgrel.core.config import (
    CONFIG_FILENAME,
    DEFAULT_REMOTE_URL_TEMPLATE,
    Config,
    find_config,
    load_config,
)
from pkgrel.core.result import Err, Ok


class TestConfigDefaults:
    def test_defaults_match_jetpack_topology(self) -> None:
        config = Config()
        assert config.origin_remote == "origin"
        assert config.package_remote == "package"
        assert config.branch == "master"
        assert config.packages_dir == "packages"
        assert config.remote_url_template == "https://github.com/Automattic/jetpack-{package}.git"
        assert config.tag_prefix == "automattic/jetpack-"

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.branch = "main"  # type: ignore[misc]


class TestConfigFromDict:
    def test_empty_uses_defaults(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_overrides(self) -> None:
        config = Config.from_dict(
            {"release": {"branch": "trunk", "packages_dir": "projects/packages/"}}
        )
        assert config.branch == "trunk"
        assert config.packages_dir == "projects/packages"
        assert config.origin_remote == "origin"

    def test_blank_and_wrong_types_fall_back(self) -> None:
        config = Config.from_dict({"release": {"branch": "  ", "origin_remote": 3}})
        assert config.branch == "master"
        assert config.origin_remote == "origin"


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[release]\nbranch = "main"\npackage_remote = "split"\n')

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.branch == "main"
        assert result.value.package_remote == "split"
        assert result.value.remote_url_template == DEFAULT_REMOTE_URL_TEMPLATE

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "nope.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[release\n")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_template_without_placeholder(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[release]\nremote_url_template = "https://example.com/repo.git"\n')

        result = load_config(path)

        assert isinstance(result, Err)
        assert "{package}" in result.error.message


class TestFindConfig:
    def test_found(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) == tmp_path / CONFIG_FILENAME

    def test_absent(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None


class TestLoadConfigRejects:
    @pytest.mark.parametrize(
        "template",
        [
            "https://github.com/{org}/jetpack-{package}.git",
            "https://github.com/{}/jetpack-{package}.git",
            "https://github.com/{/jetpack-{package}.git",
        ],
    )
    def test_template_with_unknown_fields(self, tmp_path: Path, template: str) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text(f'[release]\nremote_url_template = "{template}"\n')

        result = load_config(path)

        assert isinstance(result, Err)
        assert "remote_url_template" in result.error.message
        assert result.error.path == path

    def test_directory_instead_of_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path)

        assert isinstance(result, Err)
        assert "Error reading config" in result.error.message
        assert result.error.path == tmp_path

    def test_root_packages_dir_falls_back(self) -> None:
        config = Config.from_dict({"release": {"packages_dir": "/"}})

        assert config.packages_dir == "packages"
