from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyrunner.domain.game_state import GameState


class PlayerDied(Exception):
    """Raised by the world step when the player touches an obstacle.

    Carries the state of the tick on which the collision happened so the
    controller can freeze it as the final state.
    """

    def __init__(self, state: GameState) -> None:
        super().__init__(f"collision at frame {state.frame}")
        self.state = state


class ConfigError(ValueError):
    """Raised when a RunnerConfig holds values the game cannot run with."""
