from __future__ import annotations

from typing import Protocol

from pyrunner.domain.game_state import GameState

PLAYER_PLACEHOLDER_COLOR = "lightblue"
OBSTACLE_COLOR = "red"


class DrawSurface(Protocol):
    def clear(self) -> None:
        ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        ...

    def blit(self, x: float, y: float, w: float, h: float) -> None:
        """Draw the player sprite into the given box."""
        ...


def paint_frame(surface: DrawSurface, state: GameState, *, sprite_available: bool) -> None:
    surface.clear()

    p = state.player
    if sprite_available:
        surface.blit(p.x, p.y, p.width, p.height)
    else:
        # No sprite: same bounding box as a flat rectangle.
        surface.fill_rect(p.x, p.y, p.width, p.height, PLAYER_PLACEHOLDER_COLOR)

    for o in state.obstacles:
        surface.fill_rect(o.x, o.y, o.width, o.height, OBSTACLE_COLOR)
