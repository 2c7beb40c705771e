"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from enum import StrEnum

from eightpuzzle.backend.models.board import Board


class Phase(StrEnum):
    SHUFFLING = "shuffling"
    PLAYING = "playing"
    SOLVED = "solved"


class GameState:
    """Holds the current board, run phase, move counter, and elapsed time."""

    def __init__(self, board: Board, phase: Phase = Phase.PLAYING) -> None:
        self.board = board
        self.phase = phase
        self.moves: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.phase is Phase.SOLVED
