"""Tests for steering, throttle, jumping and movement."""

import math

import pytest

from frostbyte.core.events import EventType
from frostbyte.core.state import Mode
from frostbyte.sim import player as controller
from frostbyte.sim.entities import Player
from frostbyte.sim.input import IDLE, InputCommand, SteeringMode
from frostbyte.sim.tick import tick


@pytest.fixture
def skier():
    return Player(x=320.0, y=150.0)


def test_pointer_inside_dead_zone_is_linear(skier, settings):
    controller.steer(skier, InputCommand.pointer(330.0), settings.player)
    assert skier.angle == pytest.approx(10 / 30)


def test_pointer_outside_dead_zone(skier, settings):
    controller.steer(skier, InputCommand.pointer(360.0), settings.player)
    assert skier.angle == pytest.approx(0.8)

    controller.steer(skier, InputCommand.pointer(0.0), settings.player)
    assert skier.angle == -2.0


def test_pointer_steering_through_tick(state, settings, quiet_rng):
    tick(state, InputCommand.pointer(330.0), quiet_rng, settings)
    assert state.player.angle == pytest.approx(1 / 3)
    assert state.player.x == pytest.approx(320 + (1 / 3) * 5 * 0.5)


@pytest.mark.parametrize("delta,angle", [(60, 1.5), (1000, 2.0), (-1000, -2.0), (0, 0.0)])
def test_drag_steering(skier, settings, delta, angle):
    controller.steer(skier, InputCommand.drag(delta), settings.player)
    assert skier.angle == pytest.approx(angle)


def test_non_finite_steer_is_treated_as_zero(skier, settings):
    controller.steer(skier, InputCommand.drag(math.nan), settings.player)
    assert skier.angle == 0.0
    controller.steer(skier, InputCommand(steering=SteeringMode.RELATIVE, steer=math.inf), settings.player)
    assert skier.angle == 0.0


def test_discrete_steering_steps_and_clamps(skier, settings):
    controller.steer(skier, InputCommand(right=True), settings.player)
    assert skier.angle == pytest.approx(0.15)

    skier.angle = 1.95
    controller.steer(skier, InputCommand(right=True), settings.player)
    assert skier.angle == 2.0

    skier.angle = -1.95
    controller.steer(skier, InputCommand(left=True), settings.player)
    assert skier.angle == -2.0


def test_discrete_release_decays_and_snaps(skier, settings):
    skier.angle = 1.0
    controller.steer(skier, IDLE, settings.player)
    assert skier.angle == pytest.approx(0.95)

    skier.angle = -0.5
    controller.steer(skier, IDLE, settings.player)
    assert skier.angle == pytest.approx(-0.45)

    skier.angle = 0.08
    controller.steer(skier, IDLE, settings.player)
    assert skier.angle == 0.0


def test_throttle(skier, settings):
    cfg = settings.player
    controller.throttle(skier, InputCommand(accelerate=True), cfg)
    assert skier.speed == pytest.approx(5.2)

    skier.speed = 5.0
    controller.throttle(skier, InputCommand(boost=True), cfg)
    assert skier.speed == pytest.approx(5.2)

    skier.speed = 5.0
    controller.throttle(skier, InputCommand(brake=True), cfg)
    assert skier.speed == pytest.approx(4.9)

    skier.speed = 2.05
    controller.throttle(skier, InputCommand(brake=True), cfg)
    assert skier.speed == 2.0

    skier.speed = 14.9
    controller.throttle(skier, InputCommand(accelerate=True), cfg)
    assert skier.speed == 15.0


def test_speed_relaxes_toward_base(skier, settings):
    cfg = settings.player
    skier.speed = 6.0
    controller.throttle(skier, IDLE, cfg)
    assert skier.speed == pytest.approx(5.95)

    skier.speed = 4.0
    controller.throttle(skier, IDLE, cfg)
    assert skier.speed == pytest.approx(4.02)

    skier.speed = 5.01
    controller.throttle(skier, IDLE, cfg)
    assert skier.speed == 5.0


def test_move_integrates_and_clamps(state, settings):
    state.player.angle = 2.0
    state.player.speed = 10.0
    controller.move(state, settings)
    assert state.player.x == pytest.approx(330.0)
    assert state.distance == pytest.approx(5.0)

    state.player.x = 615.0
    controller.move(state, settings)
    assert state.player.x == 620.0

    state.player.angle = -2.0
    state.player.x = 25.0
    controller.move(state, settings)
    assert state.player.x == 20.0


def test_move_updates_difficulty(state, settings):
    state.distance = 1197.5
    controller.move(state, settings)
    assert state.difficulty == 1.0


def test_jump_trigger_launches_from_ground(state, settings, quiet_rng):
    tick(state, InputCommand(jump=True), quiet_rng, settings)
    assert state.mode is Mode.JUMPING
    # Launched this tick, then integrated once in the movement stage
    assert state.player.jump_height == pytest.approx(12.0)
    assert state.player.jump_velocity == pytest.approx(11.2)
    assert EventType.JUMPED in [e.type for e in state.events]


def test_jump_trigger_ignored_while_airborne(state, settings):
    state.player.jump_height = 30.0
    state.player.jump_velocity = 2.0
    state.mode = Mode.JUMPING
    assert not controller.launch_jump(state, settings)
    assert state.player.jump_velocity == 2.0


def test_jump_lands_back_to_playing(state, settings, quiet_rng):
    tick(state, InputCommand(jump=True), quiet_rng, settings)
    heights = []
    for _ in range(100):
        tick(state, IDLE, quiet_rng, settings)
        heights.append(state.player.jump_height)
        if state.mode is Mode.PLAYING:
            break
    assert state.mode is Mode.PLAYING
    assert state.player.jump_height == 0.0
    assert state.player.jump_velocity == 0.0
    assert all(h >= 0 for h in heights)
    assert EventType.LANDED in [e.type for e in state.events]
