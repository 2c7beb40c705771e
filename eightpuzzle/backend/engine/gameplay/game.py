"""Core gameplay logic: processes moves and checks the win condition."""

from __future__ import annotations

import random

from loguru import logger

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.engine.gamestate import GameState, Phase
from eightpuzzle.backend.engine.moves import apply_move, enumerate_moves
from eightpuzzle.backend.models.board import Board, Direction, Move


class GamePlay:
    """Orchestrates a single run: shuffle, then accept moves until solved."""

    def __init__(self, shuffle_depth: int = 1, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        board, self.shuffle_moves = GameGenerator.generate(shuffle_depth, self.rng)
        self.state = GameState(board, phase=Phase.SHUFFLING)
        self._set_phase(Phase.PLAYING)

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> GamePlay:
        """Create a run from an existing board, skipping the shuffle."""
        obj = object.__new__(cls)
        obj.rng = rng if rng is not None else random.Random()
        obj.state = GameState(board)
        obj.shuffle_moves = []
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def valid_moves(self) -> list[Move]:
        """Legal moves for the current board, recomputed on every access."""
        if self.is_won:
            return []
        return enumerate_moves(self.state.board)

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- movement -------------------------------------------------------------

    def apply(self, move: Move) -> bool:
        """Apply *move* if an equal move is legal on the current board.

        The freshly enumerated move is applied, so a move carrying stale
        coordinates still lands correctly.  Returns True if the move was
        applied.
        """
        legal = next((m for m in self.valid_moves if m == move), None)
        if legal is None:
            logger.debug("Rejected move {} in phase {}", move, self.state.phase)
            return False

        apply_move(self.state.board, legal)
        self.state.increment_moves()
        if self.state.board.is_solved():
            self.state.pause()
            self._set_phase(Phase.SOLVED)
        return True

    def move(self, direction: Direction) -> bool:
        """Apply the legal move labelled *direction*, if there is one."""
        legal = next((m for m in self.valid_moves if m.direction == direction), None)
        if legal is None:
            return False
        return self.apply(legal)

    # -- helpers --------------------------------------------------------------

    def _set_phase(self, phase: Phase) -> None:
        logger.info("Phase {} -> {} after {} moves", self.state.phase, phase, self.state.moves)
        self.state.phase = phase
