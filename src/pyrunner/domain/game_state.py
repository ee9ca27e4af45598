from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pyrunner.config import RunnerConfig


class GameStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Obstacle:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class Player:
    x: float
    y: float
    width: float
    height: float
    vy: float
    gravity: float
    jump_velocity: float
    airborne: bool

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class GameState:
    player: Player
    obstacles: tuple[Obstacle, ...]

    score: int   # raw, +1 per tick
    frame: int

    scroll_speed: float
    floor_y: float
    score_divisor: int = 10

    @property
    def display_score(self) -> int:
        return self.score // self.score_divisor


def initial_state(config: RunnerConfig, *, obstacles: tuple[Obstacle, ...] = ()) -> GameState:
    player = Player(
        x=config.player_x,
        y=config.start_y,
        width=config.player_width,
        height=config.player_height,
        vy=0.0,
        gravity=config.gravity,
        jump_velocity=config.jump_velocity,
        airborne=False,
    )
    return GameState(
        player=player,
        obstacles=obstacles,
        score=0,
        frame=0,
        scroll_speed=config.scroll_speed,
        floor_y=config.floor_y,
        score_divisor=config.score_divisor,
    )
