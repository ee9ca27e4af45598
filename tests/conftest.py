from __future__ import annotations

import itertools
import random

import pytest

from pyrunner.config import RunnerConfig
from pyrunner.domain.game_state import GameState


class ScriptedRandom:
    """RandomSource that cycles through fixed values."""

    def __init__(self, *values: float) -> None:
        self._values = itertools.cycle(values)

    def random(self) -> float:
        return next(self._values)


class RecordingView:
    def __init__(self) -> None:
        self.frames: list[GameState] = []
        self.scores: list[int] = []
        self.game_overs: list[int] = []
        self.hides = 0

    def render(self, state: GameState) -> None:
        self.frames.append(state)

    def show_score(self, score: int) -> None:
        self.scores.append(score)

    def show_game_over(self, final_score: int) -> None:
        self.game_overs.append(final_score)

    def hide_game_over(self) -> None:
        self.hides += 1


@pytest.fixture
def config() -> RunnerConfig:
    return RunnerConfig(opening_obstacle=False)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()
