"""Player controller: steering, throttle, jump physics and movement."""

import logging
import math

from frostbyte.config.settings import PlayerSettings, SimulationSettings
from frostbyte.core.events import EventType
from frostbyte.core.state import Mode, transition
from frostbyte.sim.difficulty import difficulty_factor
from frostbyte.sim.entities import Player
from frostbyte.sim.input import InputCommand, SteeringMode
from frostbyte.sim.world_state import SimulationState

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def steer(player: Player, command: InputCommand, cfg: PlayerSettings) -> None:
    limit = cfg.max_angle

    if command.steering is SteeringMode.RELATIVE:
        player.angle = _clamp(_finite(command.steer) / cfg.drag_divisor, -limit, limit)

    elif command.steering is SteeringMode.ABSOLUTE:
        target = _finite(command.steer)
        diff = target - player.x
        if abs(diff) > cfg.pointer_dead_zone:
            angle = diff / cfg.pointer_divisor
        else:
            angle = diff / cfg.pointer_dead_zone
        player.angle = _clamp(angle, -limit, limit)

    else:
        angle = player.angle
        if command.left:
            angle -= cfg.steer_step
        if command.right:
            angle += cfg.steer_step
        if not command.left and not command.right:
            if angle > cfg.steer_snap:
                angle -= cfg.steer_decay
            elif angle < -cfg.steer_snap:
                angle += cfg.steer_decay
            else:
                angle = 0.0
        player.angle = _clamp(angle, -limit, limit)


def throttle(player: Player, command: InputCommand, cfg: PlayerSettings) -> None:
    speed = player.speed
    if command.brake:
        speed = max(cfg.min_speed, speed - cfg.brake)
    if command.accelerate or command.boost:
        speed = min(cfg.max_speed, speed + cfg.accel)
    if not (command.brake or command.accelerate or command.boost):
        if speed > cfg.base_speed:
            speed = max(cfg.base_speed, speed - cfg.relax_down)
        elif speed < cfg.base_speed:
            speed = min(cfg.base_speed, speed + cfg.relax_up)
    player.speed = _clamp(speed, cfg.min_speed, cfg.max_speed)


def launch_jump(state: SimulationState, settings: SimulationSettings) -> bool:
    """Start a jump if the player is on the ground."""
    player = state.player
    if player.airborne:
        return False
    if not transition(state, Mode.JUMPING):
        return False
    player.jump_velocity = settings.player.jump_velocity
    state.emit(EventType.JUMPED, x=player.x)
    return True


def advance_jump(state: SimulationState, cfg: PlayerSettings) -> None:
    player = state.player
    if not player.airborne:
        return
    player.jump_height += player.jump_velocity
    player.jump_velocity -= cfg.gravity
    if player.jump_height <= 0:
        player.jump_height = 0.0
        player.jump_velocity = 0.0
        transition(state, Mode.PLAYING)
        state.emit(EventType.LANDED, x=player.x)


def apply_input(state: SimulationState, command: InputCommand, settings: SimulationSettings) -> None:
    """Resolve steering, throttle and the jump trigger for this tick."""
    steer(state.player, command, settings.player)
    throttle(state.player, command, settings.player)
    if command.jump:
        launch_jump(state, settings)


def move(state: SimulationState, settings: SimulationSettings) -> None:
    """Jump physics, horizontal integration, distance and difficulty."""
    cfg = settings.player
    player = state.player

    advance_jump(state, cfg)

    player.x += player.angle * player.speed * 0.5
    player.x = _clamp(player.x, cfg.edge_margin, settings.world.width - cfg.edge_margin)

    state.distance += player.speed * 0.5
    state.difficulty = difficulty_factor(state.distance, settings.spawn)
