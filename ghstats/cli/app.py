from __future__ import annotations

import sys
from pathlib import Path

import typer

from ghstats import __version__
from ghstats.core.config import ColorMode, load_config_or_default
from ghstats.core.result import Err
from ghstats.output.console import RichConsole
from ghstats.output.errors import error_exit_code, print_error
from ghstats.services.stats import StatsService

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def stats(
    color: ColorMode | None = typer.Option(
        None,
        "--color",
        case_sensitive=False,
        help="Whether to use color: always, auto or never. [default: auto]",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: $GHSTATS_CONFIG or ~/.config/ghstats/config.toml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print resolution details."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Show release download counts for the GitHub project in the current directory."""
    console = RichConsole(verbose=verbose, no_color=True if color is ColorMode.NEVER else None)

    loaded = load_config_or_default(config_path)
    if isinstance(loaded, Err):
        print_error(loaded.error, console)
        raise typer.Exit(code=error_exit_code(loaded.error))
    config = loaded.value

    service = StatsService(config=config, console=console)
    result = service.show(Path.cwd(), sys.stdout, color or config.output.color)
    if isinstance(result, Err):
        print_error(result.error, console)
        raise typer.Exit(code=error_exit_code(result.error))


def main() -> None:
    app()
