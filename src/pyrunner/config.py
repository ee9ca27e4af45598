from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from pyrunner.domain.exceptions import ConfigError


@dataclass(frozen=True)
class RunnerConfig:
    """
    Every tunable of a run. Distances are canvas units, speeds are units per tick.
    """

    canvas_width: int = 800
    canvas_height: int = 300
    floor_buffer: float = 10.0  # gap between the floor line and the canvas bottom

    player_x: float = 50.0
    player_width: float = 30.0
    player_height: float = 50.0
    gravity: float = 0.5
    jump_velocity: float = -16.0

    scroll_speed: float = 5.0
    spawn_interval: int = 150  # ticks between obstacle spawns
    obstacle_width_range: tuple[float, float] = (20.0, 50.0)  # [low, high)
    obstacle_height_range: tuple[float, float] = (20.0, 60.0)
    opening_obstacle: bool = True

    score_divisor: int = 10
    fps: int = 60

    sprite_path: Path | None = None
    sprite_scale: float = 0.3

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ConfigError("canvas size must be positive")
        if self.floor_buffer < 0 or self.floor_buffer >= self.canvas_height:
            raise ConfigError("floor_buffer must lie inside the canvas")
        if self.player_width <= 0 or self.player_height <= 0:
            raise ConfigError("player size must be positive")
        if self.player_height > self.floor_y:
            raise ConfigError("player does not fit above the floor")
        if self.spawn_interval <= 0:
            raise ConfigError("spawn_interval must be > 0")
        if self.scroll_speed <= 0:
            raise ConfigError("scroll_speed must be > 0")
        if self.score_divisor <= 0:
            raise ConfigError("score_divisor must be > 0")
        if self.fps <= 0:
            raise ConfigError("fps must be > 0")
        if self.sprite_scale <= 0:
            raise ConfigError("sprite_scale must be > 0")
        for name in ("obstacle_width_range", "obstacle_height_range"):
            low, high = getattr(self, name)
            if low <= 0 or high < low:
                raise ConfigError(f"{name} must be a positive (low, high) pair")

    @property
    def floor_y(self) -> float:
        return self.canvas_height - self.floor_buffer

    @property
    def start_y(self) -> float:
        return self.floor_y - self.player_height

    def with_player_size(self, width: float, height: float) -> RunnerConfig:
        return replace(self, player_width=width, player_height=height)
