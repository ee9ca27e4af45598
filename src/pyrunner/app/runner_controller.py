from __future__ import annotations

import logging
from typing import Protocol

from pyrunner.config import RunnerConfig
from pyrunner.domain.exceptions import PlayerDied
from pyrunner.domain.game_state import GameState, GameStatus, initial_state
from pyrunner.domain.rng import RandomSource, make_rng
from pyrunner.domain.spawner import spawn_obstacle
from pyrunner.domain.world import World

logger = logging.getLogger(__name__)


class RunnerView(Protocol):
    def render(self, state: GameState) -> None:
        ...

    def show_score(self, score: int) -> None:
        ...

    def show_game_over(self, final_score: int) -> None:
        ...

    def hide_game_over(self) -> None:
        ...


class NullView:
    """Headless view; drops every update."""

    def render(self, state: GameState) -> None:
        pass

    def show_score(self, score: int) -> None:
        pass

    def show_game_over(self, final_score: int) -> None:
        pass

    def hide_game_over(self) -> None:
        pass


class RunnerController:
    """
    Owns the one game state of a session and its RUNNING / GAME_OVER status.

    State only changes through tick(), jump() and reset().
    """

    def __init__(
        self,
        config: RunnerConfig,
        *,
        rng: RandomSource | None = None,
        view: RunnerView | None = None,
    ) -> None:
        self._config = config
        self._rng = rng if rng is not None else make_rng()
        self._view = view if view is not None else NullView()
        self._world = World(self._rng, config)

        opening = (spawn_obstacle(self._rng, config),) if config.opening_obstacle else ()
        self._state = initial_state(config, obstacles=opening)
        self._status = GameStatus.RUNNING

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def game_over(self) -> bool:
        return self._status is GameStatus.GAME_OVER

    def tick(self) -> bool:
        """Advance one frame. Returns True while another tick should be scheduled."""
        if self.game_over:
            return False

        try:
            self._state = self._world.step(self._state)
        except PlayerDied as e:
            self._state = e.state
            self._status = GameStatus.GAME_OVER

        self._view.show_score(self._state.display_score)
        self._view.render(self._state)

        if self.game_over:
            final = self._state.display_score
            logger.info("game over at frame %d, score %d", self._state.frame, final)
            self._view.show_game_over(final)
            return False
        return True

    def jump(self) -> None:
        if self.game_over:
            return
        self._state = self._world.jump(self._state)

    def restart(self) -> bool:
        """Reset only once the run has ended. Returns True when a reset happened."""
        if not self.game_over:
            return False
        self.reset()
        return True

    def reset(self) -> None:
        self._state = initial_state(self._config)
        self._status = GameStatus.RUNNING
        self._view.hide_game_over()
        logger.info("game reset")
