"""Main CLI application entry point.

Defines the Typer application: a single command that sweeps a tree
for directories with the target name and removes them.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from cachesweep import __version__
from cachesweep.core.config import DEFAULT_DIRNAME, ConfigError, build_config, load_defaults
from cachesweep.sweep.engine import run
from cachesweep.sweep.errors import SweepError
from cachesweep.sweep.models import MatchedDirectory
from cachesweep.utils.formatting import err_console, print_error, print_removal, print_root

app = typer.Typer(
    name="cachesweep",
    help="Recursively remove cache directories such as __pycache__.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"cachesweep version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _report(match: MatchedDirectory) -> None:
    print_removal(match.path)


@app.command()
def main(
    loc: Annotated[
        Path | None,
        typer.Option(
            "--loc",
            "-l",
            help="Runs the program starting from other path than the current dir.",
        ),
    ] = None,
    max_depth: Annotated[
        int | None,
        typer.Option(
            "-n",
            help="Maximum traversal depth (inclusive).",
        ),
    ] = None,
    dry: Annotated[
        bool,
        typer.Option("--dry", help="Makes it dry run: report matches, delete nothing."),
    ] = False,
    dirname: Annotated[
        str | None,
        typer.Option(
            "--dirname",
            "-d",
            help="Directory name to remove, compared case-insensitively.",
            show_default=DEFAULT_DIRNAME,
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Read defaults from this TOML file instead of the XDG config.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Remove every directory named DIRNAME below the start directory.

    Symlinked directories are never followed or removed, and matched
    directories are removed whole without being searched further.
    """
    _configure_logging(verbose)

    try:
        defaults = load_defaults(config_path)
        config = build_config(
            root=loc,
            dirname=dirname,
            max_depth=max_depth,
            dry_run=dry,
            defaults=defaults,
        )
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        run(config, report=_report, on_root=print_root)
    except SweepError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
