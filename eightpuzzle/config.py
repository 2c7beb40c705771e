"""Run configuration assembled from the command line."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Settings:
    frontend: Frontend = Frontend.rich
    shuffle_depth: int = 1
    seed: int | None = None
    log_level: LogLevel = LogLevel.WARNING

    def make_rng(self) -> random.Random:
        """Return the run's random source, seeded when ``seed`` is set."""
        return random.Random(self.seed)
