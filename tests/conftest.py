"""Shared fixtures for the engine and frontend tests."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.models.board import Board


@pytest.fixture
def solved_board() -> Board:
    return GameGenerator.solved()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def feed_input(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Replace ``input()`` with scripted answers, then raise ``EOFError``.

    An answer may be an exception instance, which is raised instead of
    returned.
    """

    def _feed(*answers: str | BaseException) -> None:
        it = iter(answers)

        def fake_input(prompt: str = "") -> str:
            try:
                answer = next(it)
            except StopIteration:
                raise EOFError from None
            if isinstance(answer, BaseException):
                raise answer
            return answer

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
