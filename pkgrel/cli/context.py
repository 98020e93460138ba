from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from pkgrel.core.config import Config, find_config, load_config
from pkgrel.core.errors import ErrorCode
from pkgrel.core.result import Err
from pkgrel.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    repo_root: Path
    config: Config
    console: ConsoleProtocol


def build_context(
    repo: Path | None = None,
    config_path: Path | None = None,
    console: ConsoleProtocol | None = None,
) -> CLIContext:
    out = console or RichConsole()
    try:
        root = (repo or Path.cwd()).expanduser().resolve()
    except OSError as e:
        out.error(f"invalid --repo: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not root.is_dir():
        out.error(f"repository path '{root}' is not a directory")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    path = config_path.expanduser() if config_path is not None else find_config(root)
    config = Config()
    if path is not None:
        config_result = load_config(path)
        if isinstance(config_result, Err):
            out.error(config_result.error.message)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = config_result.value

    return CLIContext(repo_root=root, config=config, console=out)
