from __future__ import annotations

from dataclasses import replace

from pyrunner.config import RunnerConfig
from pyrunner.domain.exceptions import PlayerDied
from pyrunner.domain.game_state import GameState, Obstacle, Player
from pyrunner.domain.rng import RandomSource
from pyrunner.domain.spawner import is_spawn_frame, spawn_obstacle


class World:
    def __init__(self, rng: RandomSource, config: RunnerConfig) -> None:
        self._rng = rng
        self._config = config

    def jump(self, state: GameState) -> GameState:
        p = state.player
        if p.airborne:
            return state
        return replace(state, player=replace(p, vy=p.jump_velocity, airborne=True))

    def step(self, state: GameState) -> GameState:
        frame = state.frame + 1
        score = state.score + 1

        # ----- Gravity -----
        p = state.player
        vy = p.vy + p.gravity
        y = p.y + vy
        airborne = p.airborne

        # ----- Ground clamp -----
        if y + p.height > state.floor_y:
            y = state.floor_y - p.height
            vy = 0.0
            airborne = False

        p2 = replace(p, y=y, vy=vy, airborne=airborne)

        # ----- Scroll, cull, spawn -----
        dx = state.scroll_speed
        moved = (replace(o, x=o.x - dx) for o in state.obstacles)
        obstacles = tuple(o for o in moved if o.right > 0)

        if is_spawn_frame(frame, self._config.spawn_interval):
            obstacles = obstacles + (spawn_obstacle(self._rng, self._config),)

        next_state = replace(state, player=p2, obstacles=obstacles, score=score, frame=frame)

        # ----- Collision (AABB) -----
        if self._player_hits_any_obstacle(p2, obstacles):
            raise PlayerDied(next_state)

        return next_state

    def _player_hits_any_obstacle(self, p: Player, obstacles: tuple[Obstacle, ...]) -> bool:
        for o in obstacles:
            if overlaps(p, o):
                return True
        return False


def overlaps(p: Player, o: Obstacle) -> bool:
    return p.x < o.right and p.right > o.x and p.y < o.bottom and p.bottom > o.y
