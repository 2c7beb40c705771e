from eightpuzzle.backend.models.board import (
    EMPTY,
    SIZE,
    Board,
    BoardInvariantError,
    Direction,
    Move,
)

__all__ = ["EMPTY", "SIZE", "Board", "BoardInvariantError", "Direction", "Move"]
