"""Numeric 8 Puzzle.

Usage::

    eightpuzzle                      # Rich terminal, one shuffle move
    eightpuzzle -f vanilla -n 20     # plain terminal, 20 shuffle moves
    eightpuzzle --seed 7             # reproducible shuffle
    python -m eightpuzzle --log-level DEBUG
"""

from __future__ import annotations

import importlib
import sys
from typing import Optional

import typer
from loguru import logger

from eightpuzzle.config import Frontend, LogLevel, Settings

# -- frontend registry -------------------------------------------------------

_RUNNERS = {
    Frontend.vanilla: "eightpuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "eightpuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.value)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Terminal frontend to launch.",
    ),
    shuffle_depth: int = typer.Option(
        1, "-n", "--shuffle-depth",
        min=1,
        help="Number of random moves applied to the solved board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle's random generator.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        case_sensitive=False,
        help="Minimum level written to stderr.",
    ),
) -> None:
    """Numeric 8 Puzzle."""
    settings = Settings(
        frontend=frontend,
        shuffle_depth=shuffle_depth,
        seed=seed,
        log_level=log_level,
    )
    _configure_logging(settings.log_level)
    logger.info("Starting {}", settings)

    mod = importlib.import_module(_RUNNERS[settings.frontend])
    mod.run(settings)


if __name__ == "__main__":
    app()
