"""GamePlay run tests: shuffle on start, phases, and move handling."""

from __future__ import annotations

import random

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.engine.gameplay import GamePlay
from eightpuzzle.backend.engine.gamestate import Phase
from eightpuzzle.backend.models.board import Board, Direction, Move

_ONE_FROM_SOLVED = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]


def test_new_game_is_shuffled_and_playing() -> None:
    game = GamePlay(shuffle_depth=1, rng=random.Random(3))

    assert game.state.phase is Phase.PLAYING
    assert not game.is_won
    assert len(game.shuffle_moves) == 1
    assert not game.board.is_solved()
    assert game.state.moves == 0


def test_seeded_games_match() -> None:
    a = GamePlay(shuffle_depth=25, rng=random.Random(11))
    b = GamePlay(shuffle_depth=25, rng=random.Random(11))
    assert a.board == b.board


def test_valid_moves_follow_the_board() -> None:
    game = GamePlay.from_board(Board.from_rows(_ONE_FROM_SOLVED))
    assert [str(m) for m in game.valid_moves] == ["D5", "L8", "R7"]

    assert game.apply(game.valid_moves[0])
    assert [str(m) for m in game.valid_moves] == ["D2", "U5", "L6", "R4"]


def test_winning_move_ends_the_run() -> None:
    game = GamePlay.from_board(Board.from_rows(_ONE_FROM_SOLVED))

    assert game.move(Direction.LEFT)
    assert game.is_won
    assert game.state.phase is Phase.SOLVED
    assert game.state.moves == 1
    assert game.valid_moves == []

    # The clock stops on the winning move.
    elapsed = game.state.elapsed_time
    assert elapsed >= 0
    assert game.state.elapsed_time == elapsed

    # Solved is terminal.
    assert not game.move(Direction.DOWN)
    assert game.board.is_solved()
    assert game.state.moves == 1


def test_apply_uses_fresh_coordinates() -> None:
    game = GamePlay.from_board(Board.from_rows(_ONE_FROM_SOLVED))
    stale = Move(Direction.LEFT, source=(0, 0), target=(0, 1), tile=8)

    assert game.apply(stale)
    assert game.board.is_solved()


def test_illegal_moves_are_rejected() -> None:
    game = GamePlay.from_board(Board.from_rows(_ONE_FROM_SOLVED))
    before = game.board.copy()

    assert not game.move(Direction.UP)
    assert not game.apply(Move(Direction.DOWN, source=(0, 0), target=(2, 1), tile=1))
    assert game.board == before
    assert game.state.moves == 0


def test_undoing_the_shuffle_wins() -> None:
    game = GamePlay(shuffle_depth=1, rng=random.Random(5))
    (shuffle_move,) = game.shuffle_moves

    back = next(m for m in game.valid_moves if m.tile == shuffle_move.tile)
    assert game.apply(back)
    assert game.is_won


def test_new_game_matches_generator_for_same_seed() -> None:
    game = GamePlay(shuffle_depth=15, rng=random.Random(21))
    board, moves = GameGenerator.generate(15, random.Random(21))

    assert game.board == board
    assert [str(m) for m in game.shuffle_moves] == [str(m) for m in moves]
