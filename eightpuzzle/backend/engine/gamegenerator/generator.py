"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import random

from loguru import logger

from eightpuzzle.backend.engine.moves import apply_move, enumerate_moves
from eightpuzzle.backend.models.board import EMPTY, SIZE, Board, Direction, Move

# Direction codes drawn by the random walk.
_DIRECTION_CODES = "LRUD"


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles 1-8 in order, blank bottom-right)."""
        tiles: list[list[int]] = []
        num = 1
        for r in range(SIZE):
            row: list[int] = []
            for c in range(SIZE):
                if r == SIZE - 1 and c == SIZE - 1:
                    row.append(EMPTY)
                else:
                    row.append(num)
                    num += 1
            tiles.append(row)
        return Board(tiles=tiles)

    @staticmethod
    def shuffle(board: Board, n: int, rng: random.Random) -> list[Move]:
        """Apply exactly *n* random legal moves to *board* in place.

        A direction is drawn uniformly from L/R/U/D; if no legal move carries
        it the draw is discarded and repeated.  Directions pointing off the
        board at corners and edges are therefore rejected, which skews the
        accepted walk towards the remaining directions.  The previous move
        may be undone by the next one.

        Returns the accepted moves in the order they were applied.
        """
        if n < 0:
            raise ValueError(f"Shuffle depth must be non-negative, got {n}.")

        applied: list[Move] = []
        rejected = 0
        while len(applied) != n:
            direction = Direction.from_char(rng.choice(_DIRECTION_CODES))
            move = next(
                (m for m in enumerate_moves(board) if m.direction == direction),
                None,
            )
            if move is None:
                rejected += 1
                continue
            apply_move(board, move)
            applied.append(move)

        logger.debug(
            "Shuffled board with {} moves ({} draws rejected): {}",
            n,
            rejected,
            " ".join(str(m) for m in applied),
        )
        return applied

    @staticmethod
    def generate(depth: int, rng: random.Random) -> tuple[Board, list[Move]]:
        """Return a board shuffled *depth* times from solved, plus the shuffle."""
        board = GameGenerator.solved()
        moves = GameGenerator.shuffle(board, depth, rng)
        return board, moves
