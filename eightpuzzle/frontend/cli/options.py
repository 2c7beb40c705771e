"""Menu text and choice handling shared by the CLI frontends."""

from __future__ import annotations

from eightpuzzle.backend.models.board import Board, Move

BANNER = "Welcome to the Numeric 8 Puzzle!"
RULE = "_______"
PROMPT = "What's your next move?"
EXIT_LABEL = "Exit"
RETRY_MESSAGE = "There was an error, please try again"
EXIT_MESSAGE = "Exiting the program..."
SUCCESS_MESSAGE = "Success"


class SelectionError(ValueError):
    """The user's answer does not name one of the listed options."""


def build_options(moves: list[Move]) -> list[str]:
    """Return one label per move followed by the trailing ``Exit`` option."""
    return [m.label for m in moves] + [EXIT_LABEL]


def framed_board(board: Board) -> str:
    return "\n".join((RULE, board.format(), RULE))


def resolve_choice(raw: str, moves: list[Move]) -> Move | None:
    """Map a 1-based answer to a move, or ``None`` for ``Exit``.

    Raises ``SelectionError`` for anything that is not a listed number.
    """
    try:
        index = int(raw.strip())
    except ValueError:
        raise SelectionError(f"Not a number: {raw!r}") from None
    if not 1 <= index <= len(moves) + 1:
        raise SelectionError(f"Choice {index} is out of range 1-{len(moves) + 1}")
    if index == len(moves) + 1:
        return None
    return moves[index - 1]


def format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"
