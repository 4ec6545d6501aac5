#!/usr/bin/env python3
"""Turn-taking A* search on the 3×3 sliding puzzle.

Usage::

    python main.py                      # type both grids, plain output
    python main.py -f rich              # Rich terminal output
    python main.py -i grids.txt         # read both grids from a file
    python main.py --log-level DEBUG    # search diagnostics on stderr
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.cli.input_handler import GridFormatError, non_blank, read_board  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    # stdout carries the search trace, so records go to stderr.
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_grids(source: Optional[Path]):
    if source is not None:
        with source.open(encoding="utf-8") as f:
            lines = non_blank(f)
            return read_board(lines), read_board(lines)

    lines = iter(sys.stdin)
    typer.echo("Enter the initial state (3x3 grid, rows separated by spaces):")
    initial = read_board(lines)
    typer.echo("Enter the goal state (3x3 grid, rows separated by spaces):")
    goal = read_board(lines)
    return initial, goal


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="TILE_ASTAR_FRONTEND",
        help="How to print the search trace.",
    ),
    source: Optional[Path] = typer.Option(
        None, "-i", "--input",
        exists=True, dir_okay=False, readable=True,
        help="File holding the initial and goal grids. Omit to type them.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        envvar="TILE_ASTAR_LOG_LEVEL",
        case_sensitive=False,
        help="Level for diagnostics written to stderr.",
    ),
) -> None:
    """Turn-taking A* search on the 3×3 sliding puzzle."""
    _configure_logging(log_level)

    try:
        initial, goal = _read_grids(source)
    except GridFormatError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    logger.debug("Initial %s, goal %s", initial.key, goal.key)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(initial=initial, goal=goal)


if __name__ == "__main__":
    app()
