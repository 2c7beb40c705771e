"""Board generation and shuffle tests.

Every shuffle is replayed backwards through the real move engine to check
that the board is still reachable from (and returns to) the solved state.
"""

from __future__ import annotations

import random
from collections import Counter

import pytest

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.engine.moves import apply_move, enumerate_moves
from eightpuzzle.backend.models.board import Board, Direction, Move


# -- helpers ------------------------------------------------------------------


def _unwind(board: Board, moves: list[Move]) -> None:
    """Undo *moves* (most recent first) by sliding each tile back."""
    for i, move in enumerate(reversed(moves)):
        back = next((m for m in enumerate_moves(board) if m.tile == move.tile), None)
        assert back is not None, f"Step {i}: tile {move.tile} is not next to the blank"
        apply_move(board, back)


# -- solved -------------------------------------------------------------------


def test_solved_layout() -> None:
    board = GameGenerator.solved()
    assert board.tiles == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    assert board.is_solved()


def test_solved_returns_fresh_boards() -> None:
    a = GameGenerator.solved()
    b = GameGenerator.solved()
    a.tiles[0][0] = 0
    assert b.tiles[0][0] == 1


# -- shuffle ------------------------------------------------------------------


@pytest.mark.parametrize("n", [0, 1, 2, 7, 50, 500])
def test_shuffle_applies_exactly_n_moves(n: int, rng: random.Random) -> None:
    board = GameGenerator.solved()
    moves = GameGenerator.shuffle(board, n, rng)

    assert len(moves) == n
    assert sorted(board.flat()) == list(range(9))

    _unwind(board, moves)
    assert board.is_solved()


def test_shuffle_zero_leaves_board_alone(rng: random.Random) -> None:
    board = GameGenerator.solved()
    assert GameGenerator.shuffle(board, 0, rng) == []
    assert board.is_solved()


def test_single_shuffle_is_never_solved() -> None:
    for seed in range(25):
        board = GameGenerator.solved()
        (move,) = GameGenerator.shuffle(board, 1, random.Random(seed))
        assert (move.direction, move.tile) in {(Direction.DOWN, 6), (Direction.RIGHT, 8)}
        assert not board.is_solved()


def test_shuffle_rejects_negative_depth(rng: random.Random) -> None:
    with pytest.raises(ValueError, match="non-negative"):
        GameGenerator.shuffle(GameGenerator.solved(), -1, rng)


def test_shuffle_is_deterministic_for_a_seed() -> None:
    a = GameGenerator.solved()
    b = GameGenerator.solved()
    moves_a = GameGenerator.shuffle(a, 30, random.Random(7))
    moves_b = GameGenerator.shuffle(b, 30, random.Random(7))

    assert a == b
    assert [str(m) for m in moves_a] == [str(m) for m in moves_b]


def test_every_shuffled_board_keeps_two_to_four_moves(rng: random.Random) -> None:
    board = GameGenerator.solved()
    for _ in range(200):
        GameGenerator.shuffle(board, 1, rng)
        assert len(enumerate_moves(board)) in (2, 3, 4)


def test_shuffle_uses_every_direction(rng: random.Random) -> None:
    board = GameGenerator.solved()
    moves = GameGenerator.shuffle(board, 400, rng)
    counts = Counter(m.direction for m in moves)
    assert set(counts) == set(Direction)


# -- generate -----------------------------------------------------------------


def test_generate_returns_board_and_shuffle(rng: random.Random) -> None:
    board, moves = GameGenerator.generate(12, rng)

    assert len(moves) == 12
    _unwind(board, moves)
    assert board.is_solved()
