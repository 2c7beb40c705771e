"""Vanilla terminal frontend: plain print/input rendering.

Uses only ``print``/``input`` and a few ANSI codes.  Each turn prints the
board and a numbered list of the legal moves plus ``Exit``.
"""

from __future__ import annotations

from loguru import logger

from eightpuzzle.backend.engine.gameplay import GamePlay
from eightpuzzle.backend.models.board import Move
from eightpuzzle.config import Settings
from eightpuzzle.frontend.cli.options import (
    BANNER,
    EXIT_MESSAGE,
    PROMPT,
    RETRY_MESSAGE,
    SUCCESS_MESSAGE,
    SelectionError,
    build_options,
    format_time,
    framed_board,
    resolve_choice,
)

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


# -- screens ------------------------------------------------------------------


def _stats_line(game: GamePlay) -> str:
    """Return the formatted Moves + Time string (no newline)."""
    return (
        f"Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Time: {_Y}{format_time(game.state.elapsed_time)}{_R}"
    )


def _show_turn(game: GamePlay, moves: list[Move]) -> None:
    print(f"{_BOLD}{BANNER}{_R}")
    print(framed_board(game.board))
    print(_stats_line(game))
    print("Please select an option:")
    for i, label in enumerate(build_options(moves), 1):
        print(f"  {_C}{i}{_R}. {label}")


def _ask(moves: list[Move]) -> Move | None:
    """Prompt until the answer names an option; ``None`` means exit."""
    while True:
        try:
            raw = input(f"{PROMPT} ")
            return resolve_choice(raw, moves)
        except (SelectionError, KeyboardInterrupt) as exc:
            logger.debug("Selection failed: {!r}", exc)
            print(f"{_Y}{RETRY_MESSAGE}{_R}")


# -- game loop ----------------------------------------------------------------


def play(game: GamePlay) -> GamePlay:
    """Run the prompt loop until the user exits or solves the board."""
    while not game.is_won:
        moves = game.valid_moves
        _show_turn(game, moves)

        try:
            chosen = _ask(moves)
        except EOFError:
            chosen = None
            print()

        if chosen is None:
            print(EXIT_MESSAGE)
            break

        print(f"{chosen.label} Chosen")
        game.apply(chosen)
        if game.is_won:
            print(framed_board(game.board))
            print(f"{_G}{SUCCESS_MESSAGE}{_R}")
            print(_stats_line(game))
    return game


# -- public entry point -------------------------------------------------------


def run(settings: Settings) -> GamePlay:
    """Launch the vanilla CLI for one shuffled run."""
    game = GamePlay(settings.shuffle_depth, settings.make_rng())
    return play(game)
