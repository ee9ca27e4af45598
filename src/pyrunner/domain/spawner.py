from __future__ import annotations

import logging

from pyrunner.config import RunnerConfig
from pyrunner.domain.game_state import Obstacle
from pyrunner.domain.rng import RandomSource

logger = logging.getLogger(__name__)


def is_spawn_frame(frame: int, interval: int) -> bool:
    # Frame 0 never spawns: the first spawn happens after a full interval.
    return frame > 0 and frame % interval == 0


def spawn_obstacle(rng: RandomSource, config: RunnerConfig) -> Obstacle:
    """
    New obstacle at the right edge, bottom edge on the canvas bottom.
    Width and height are drawn from the half-open configured ranges.
    """
    w_low, w_high = config.obstacle_width_range
    h_low, h_high = config.obstacle_height_range

    width = w_low + rng.random() * (w_high - w_low)
    height = h_low + rng.random() * (h_high - h_low)

    obstacle = Obstacle(
        x=float(config.canvas_width),
        y=config.canvas_height - height,
        width=width,
        height=height,
    )
    logger.debug("spawned obstacle %.1fx%.1f", width, height)
    return obstacle
