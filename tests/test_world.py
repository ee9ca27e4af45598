from __future__ import annotations

from dataclasses import replace

import pytest

from pyrunner.domain.exceptions import PlayerDied
from pyrunner.domain.game_state import Obstacle, initial_state
from pyrunner.domain.world import World, overlaps


def _world(config, rng):
    return World(rng, config)


def test_step_advances_frame_and_score_by_one(config, rng):
    world = _world(config, rng)
    state = initial_state(config)
    for expected in range(1, 50):
        state = world.step(state)
        assert state.frame == expected
        assert state.score == expected


def test_display_score_is_floored_tenth(config, rng):
    world = _world(config, rng)
    state = initial_state(config)
    for _ in range(29):
        state = world.step(state)
    assert state.display_score == 2


def test_gravity_then_ground_clamp(config, rng):
    world = _world(config, rng)
    state = initial_state(config)
    lifted = replace(state, player=replace(state.player, y=100.0, airborne=True))

    after = world.step(lifted)
    assert after.player.vy == pytest.approx(0.5)
    assert after.player.y == pytest.approx(100.5)
    assert after.player.airborne

    grounded = world.step(state)
    assert grounded.player.y + grounded.player.height == pytest.approx(config.floor_y)
    assert grounded.player.vy == 0.0
    assert not grounded.player.airborne


def test_player_never_sinks_below_floor_during_jump_arc(config, rng):
    world = _world(config, rng)
    state = world.jump(initial_state(config))
    for _ in range(120):
        state = world.step(state)
        assert state.player.bottom <= config.floor_y + 1e-9
    assert not state.player.airborne


def test_jump_sets_impulse_and_airborne(config, rng):
    world = _world(config, rng)
    state = world.jump(initial_state(config))
    assert state.player.vy == -16.0
    assert state.player.airborne


def test_jump_is_noop_while_airborne(config, rng):
    world = _world(config, rng)
    state = world.step(world.jump(initial_state(config)))
    assert state.player.airborne
    assert world.jump(state) is state


def test_obstacles_scroll_left_by_scroll_speed(config, rng):
    world = _world(config, rng)
    state = replace(initial_state(config), obstacles=(Obstacle(x=500.0, y=250.0, width=20.0, height=50.0),))
    state = world.step(state)
    assert state.obstacles[0].x == pytest.approx(495.0)


def test_offscreen_obstacles_are_culled(config, rng):
    world = _world(config, rng)
    leaving = Obstacle(x=4.0, y=0.0, width=1.0, height=1.0)   # right edge hits 0 after one tick
    staying = Obstacle(x=4.0, y=0.0, width=2.0, height=1.0)
    state = replace(initial_state(config), obstacles=(leaving, staying))
    state = world.step(state)
    assert len(state.obstacles) == 1
    assert all(o.right > 0 for o in state.obstacles)


def test_collision_raises_player_died_with_colliding_tick(config, rng):
    world = _world(config, rng)
    state = initial_state(config)
    state = replace(
        state,
        player=replace(state.player, x=50.0, y=40.0, width=30.0, height=50.0),
        obstacles=(Obstacle(x=55.0, y=60.0, width=20.0, height=30.0),),
    )
    with pytest.raises(PlayerDied) as info:
        world.step(state)
    assert info.value.state.frame == 1
    assert info.value.state.score == 1


def test_far_obstacle_collides_only_once_in_range(config, rng):
    world = _world(config, rng)
    obstacle = Obstacle(x=500.0, y=config.canvas_height - 20.0, width=20.0, height=20.0)
    state = replace(initial_state(config), obstacles=(obstacle,))

    # Player right edge is 80, so overlap starts once x < 80: tick 85.
    for _ in range(84):
        state = world.step(state)
    with pytest.raises(PlayerDied):
        world.step(state)


@pytest.mark.parametrize(
    "ox, oy, expected",
    [
        (55.0, 60.0, True),
        (80.0, 60.0, False),   # touching right edge
        (20.0, 60.0, False),   # touching left edge
        (55.0, 90.0, False),   # touching bottom edge
        (55.0, 10.0, False),   # touching top edge
    ],
)
def test_overlap_is_strict(config, ox, oy, expected):
    player = replace(initial_state(config).player, x=50.0, y=40.0, width=30.0, height=50.0)
    assert overlaps(player, Obstacle(x=ox, y=oy, width=30.0, height=30.0)) is expected
