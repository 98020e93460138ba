from __future__ import annotations

from pathlib import Path

import typer

from pkgrel import __version__
from pkgrel.cli.context import build_context
from pkgrel.core.result import Err
from pkgrel.output.console import Style
from pkgrel.output.errors import print_release_error, release_error_exit_code
from pkgrel.platform.process import CommandExecutor, RecordingExecutor, SubprocessExecutor
from pkgrel.release.driver import release_package


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def release(
    package_name: str | None = typer.Argument(
        None,
        metavar="PACKAGE",
        help="Package directory under packages/ (letters, digits, dashes).",
    ),
    tag_version: str | None = typer.Argument(
        None,
        metavar="VERSION",
        help="Version to tag, e.g. 1.2.3.",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the commands, run nothing."),
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Monorepo checkout to release from (default: current directory).",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="TOML settings file (default: <repo>/pkgrel.toml if present).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Release a monorepo package to its own repository.

    Tags the main repository with automattic/jetpack-PACKAGE@VERSION, pushes
    the history of packages/PACKAGE to github.com/Automattic/jetpack-PACKAGE
    and tags it there as vVERSION.
    """
    ctx = build_context(repo, config_path)

    executor: CommandExecutor
    if dry_run:
        executor = RecordingExecutor()
        ctx.console.print("dry run: commands are printed, not executed", Style.DIM)
    else:
        executor = SubprocessExecutor(cwd=ctx.repo_root)

    result = release_package(
        package_name,
        tag_version,
        executor=executor,
        console=ctx.console,
        config=ctx.config,
    )
    if isinstance(result, Err):
        print_release_error(result.error, ctx.console)
        raise typer.Exit(code=release_error_exit_code(result.error))

    report = result.value
    target = report.target
    if dry_run:
        ctx.console.info(f"dry run: {len(report.commands)} commands planned, none executed")
    else:
        ctx.console.success(
            f"released {target.package} {target.version} "
            f"({target.monorepo_tag}, {target.package_tag})"
        )


def main() -> None:
    app()
