"""Typer CLI application."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from dice_ev import __version__

app = typer.Typer(
    name="ev",
    help="Compute the minimum, maximum and expected value of dice rolls (XdY, XdY+Z, XdY-Z).",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ev {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_stdin_tokens() -> list[str]:
    return sys.stdin.read().split()


@app.command()
def main(
    rolls: Optional[list[str]] = typer.Argument(
        None, help="Rolls such as 1d6, 2d4+1, 3d8-1. Read from stdin when omitted.",
    ),
    single_line: bool = typer.Option(False, "--single-line", "-s", help="One line per roll: roll min max ev"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file (TOML)"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging on stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=_version_callback, is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Print min, max and expected value for each roll."""
    from dice_ev.cli.display import Display
    from dice_ev.config import ConfigError, load_config
    from dice_ev.mechanics.dice import ParseError
    from dice_ev.mechanics.statistics import evaluate_all

    _setup_logging(verbose)

    try:
        settings = load_config(config)
    except ConfigError as exc:
        Display().show_error(str(exc))
        raise typer.Exit(code=2)

    display = Display(indent=settings.output.indent)
    tokens = rolls if rolls else _read_stdin_tokens()
    logger.debug("Evaluating %d roll(s)", len(tokens))

    try:
        results = evaluate_all(tokens, settings.limits.to_limits())
    except ParseError as exc:
        display.show_error(str(exc))
        raise typer.Exit(code=1)

    display.show_results(results, single_line=single_line or settings.output.style == "single")


if __name__ == "__main__":
    app()
