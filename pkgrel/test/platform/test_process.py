"""Tests for pkgrel.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from pkgrel.core.result import Err, Ok
from pkgrel.platform.process import (
    ProcessError,
    RecordingExecutor,
    SubprocessExecutor,
    format_command,
)


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(command=("git", "fetch"), returncode=128)
        assert str(error) == "git fetch failed (exit 128)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(command=("git", "push", "package", "master", "--force"), returncode=1)
        assert str(error) == "git push package ... failed (exit 1)"

    def test_str_not_started(self) -> None:
        error = ProcessError(command=("git",), returncode=-1, detail="No such file")
        assert str(error) == "git could not start: No such file"

    def test_frozen(self) -> None:
        error = ProcessError(("git",), 1)
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestFormatCommand:
    def test_quotes_spaces(self) -> None:
        assert format_command(["git", "tag", "-m", "Version 1.2.3"]) == "git tag -m 'Version 1.2.3'"

    def test_plain(self) -> None:
        assert format_command(["git", "fetch", "package", "--tags"]) == "git fetch package --tags"


class TestSubprocessExecutor:
    def test_success(self, tmp_path: Path) -> None:
        result = SubprocessExecutor(cwd=tmp_path).run([sys.executable, "-c", "pass"])

        assert isinstance(result, Ok)
        assert result.value is None

    def test_failure_keeps_returncode(self, tmp_path: Path) -> None:
        cmd = [sys.executable, "-c", "import sys; sys.exit(42)"]
        result = SubprocessExecutor(cwd=tmp_path).run(cmd)

        assert isinstance(result, Err)
        assert result.error.returncode == 42
        assert result.error.command == tuple(cmd)

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = SubprocessExecutor(cwd=tmp_path).run(["nonexistent_command_12345"])

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert len(result.error.detail) > 0

    def test_runs_in_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "marker.txt").write_text("x")
        cmd = [sys.executable, "-c", "import os, sys; sys.exit(0 if os.path.exists('marker.txt') else 1)"]

        assert isinstance(SubprocessExecutor(cwd=tmp_path).run(cmd), Ok)


class TestRecordingExecutor:
    def test_records_in_order(self) -> None:
        executor = RecordingExecutor()
        executor.run(["git", "fetch"])
        executor.run(["git", "push"])

        assert executor.calls == [("git", "fetch"), ("git", "push")]

    def test_injected_failure(self) -> None:
        executor = RecordingExecutor(fail_at=1, returncode=128)

        assert isinstance(executor.run(["git", "a"]), Ok)
        failed = executor.run(["git", "b"])
        assert isinstance(failed, Err)
        assert failed.error.returncode == 128
        assert isinstance(executor.run(["git", "c"]), Ok)
