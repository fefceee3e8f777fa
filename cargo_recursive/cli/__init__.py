"""
Click-based CLI for cargo-recursive.

Provides the ``cargo recursive`` command. Cargo runs external subcommands
as ``cargo-recursive recursive <args>``, so main() drops that leading
token before handing the arguments to Click.

Usage:
    from cargo_recursive.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn

import click

from ..core.exceptions import CargoRecursiveError, EmptyCommandError, format_chain
from ..core.interfaces.presenter import IPresenter
from ..core.models.command import CommandSpec
from ..core.models.traversal import TraversalOptions
from ..presenters.console import ConsolePresenter
from ..services.execution import CommandExecutor
from ..services.traversal import TraversalEngine
from .context import RecursiveContext

# Version is loaded from package metadata
try:
    __version__ = version("cargo-recursive")
except PackageNotFoundError:
    __version__ = "0.3.0"

PROG_NAME = "cargo recursive"
SUBCOMMAND_NAME = "recursive"


@click.command(
    "recursive",
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.option("--depth", "depth", metavar="N", help="Max depth to search into [default: 64]")
@click.option(
    "-p",
    "--path",
    "path",
    type=click.Path(file_okay=False, path_type=Path),
    help="Target directory [default: current directory]",
)
@click.option(
    "-d",
    "--dry-run",
    is_flag=True,
    help="Only display matched directories, don't actually run the commands",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option(
    "-s",
    "--suppress-output",
    is_flag=True,
    default=None,
    help="Don't print the output of the executed commands",
)
@click.option(
    "-e",
    "--exit",
    "exit_on_error",
    is_flag=True,
    default=None,
    help="Stop if any executed command returns with a nonzero exit code",
)
@click.option(
    "-x", "--external", is_flag=True, help="Run any command instead of a cargo command"
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Use this config file instead of searching for one",
)
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
def cli(
    depth: str | None,
    path: Path | None,
    dry_run: bool,
    verbose: bool,
    suppress_output: bool | None,
    exit_on_error: bool | None,
    external: bool,
    config_path: Path | None,
    command: tuple[str, ...],
) -> None:
    """Run a command in every directory below PATH that contains a Cargo.toml.

    Options placed after the command are passed to it unchanged.

    \b
    Examples:
        cargo recursive build --release
        cargo recursive --depth 2 -e test
        cargo recursive -x git status --short
        cargo recursive -d check         # list matching crates only
    """
    if not command:
        _fail(ConsolePresenter(), EmptyCommandError("No command specified"))

    try:
        ctx = RecursiveContext.create(path=path, config_path=config_path)
    except CargoRecursiveError as e:
        _fail(ConsolePresenter(), e)

    settings = ctx.settings
    try:
        spec = CommandSpec.from_tokens(
            command,
            external=external,
            tool=settings.command.default_binary,
            forward_output=not (suppress_output or settings.output.suppress),
            exit_on_error=bool(exit_on_error or settings.command.exit_on_error),
        )
        options = TraversalOptions(
            depth=ctx.resolve_depth(depth),
            manifest=settings.traversal.manifest,
            dry_run=dry_run,
            verbose=verbose,
        )

        engine = TraversalEngine(
            CommandExecutor(presenter=ctx.presenter, logger=ctx.logger),
            options,
            presenter=ctx.presenter,
            logger=ctx.logger,
        )
        engine.run(ctx.root, spec)
    except CargoRecursiveError as e:
        ctx.logger.error("%s", " <- ".join(format_chain(e)))
        _fail(ctx.presenter, e)


def _fail(presenter: IPresenter, error: CargoRecursiveError) -> NoReturn:
    """Print a fatal error with its causal chain and exit."""
    chain = format_chain(error)
    presenter.print_error(chain[0], chain[1:])
    raise SystemExit(error.exit_code)


def strip_subcommand_name(args: Sequence[str]) -> list[str]:
    """Drop the subcommand name cargo inserts when running external commands."""
    args = list(args)
    if args and args[0] == SUBCOMMAND_NAME:
        args.pop(0)
    return args


def main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI with cargo's subcommand name removed."""
    args = strip_subcommand_name(sys.argv[1:] if argv is None else argv)
    cli.main(args=args, prog_name=PROG_NAME)


__all__ = [
    "RecursiveContext",
    "__version__",
    "cli",
    "main",
    "strip_subcommand_name",
]
