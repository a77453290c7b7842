"""Overlap tests and player-side collision resolution."""

import logging
import math

from frostbyte.config.settings import SimulationSettings
from frostbyte.core.events import EventType
from frostbyte.core.state import Mode, transition
from frostbyte.sim.entities import Obstacle, Player, Pursuer
from frostbyte.sim.player import launch_jump
from frostbyte.sim.world_state import SimulationState

logger = logging.getLogger(__name__)


def within(ax: float, ay: float, bx: float, by: float, radius: float) -> bool:
    """Center-distance circle check."""
    return math.hypot(ax - bx, ay - by) < radius


def hits_obstacle(player: Player, obstacle: Obstacle, airborne_gate: float) -> bool:
    """Player hit box vs obstacle box. Ramps always register."""
    if player.jump_height > airborne_gate and not obstacle.is_jump:
        return False
    px = player.x - player.width / 2
    py = player.y - 20
    ox = obstacle.x - obstacle.width / 2
    oy = obstacle.y - obstacle.height / 2
    return (
        px < ox + obstacle.width
        and px + player.width > ox
        and py < oy + obstacle.height
        and py + player.height > oy
    )


def in_capture_range(player: Player, pursuer: Pursuer, radius: float) -> bool:
    if not pursuer.active:
        return False
    return within(player.x, player.y, pursuer.x, pursuer.y, radius)


def collect_pickups(state: SimulationState, settings: SimulationSettings) -> None:
    """Pick up power-ups the player touches.

    Scanned from the end of the list, so the oldest overlapping pickup is
    the one left in the slot.
    """
    player = state.player
    reach = settings.powerups.pickup_reach
    remaining = []
    for pickup in reversed(state.pickups):
        if within(player.x, player.y, pickup.x, pickup.y, pickup.radius + reach):
            state.held_powerup = pickup.kind
            state.emit(EventType.POWERUP_COLLECTED, kind=pickup.kind)
            logger.debug(f"Collected {pickup.kind.value}")
        else:
            remaining.append(pickup)
    remaining.reverse()
    state.pickups = remaining


def crash(state: SimulationState, obstacle: Obstacle) -> None:
    if not transition(state, Mode.CRASHED):
        return
    state.player.speed = 0.0
    state.emit(EventType.CRASHED, kind=obstacle.kind, x=obstacle.x, y=obstacle.y)


def resolve_obstacles(state: SimulationState, settings: SimulationSettings) -> None:
    """Ramps launch jumps; trees and rocks crash an unshielded player."""
    gate = settings.player.airborne_gate
    for obstacle in state.obstacles:
        if obstacle.destroyed or not hits_obstacle(state.player, obstacle, gate):
            continue
        if obstacle.is_jump:
            launch_jump(state, settings)
        elif not state.shield_active:
            crash(state, obstacle)
            return


def check_capture(state: SimulationState, settings: SimulationSettings) -> bool:
    """Caught when the yeti is close, the player is low and unshielded.

    Frozen and stunned yetis still catch on contact.
    """
    player = state.player
    if not in_capture_range(player, state.pursuer, settings.pursuer.capture_radius):
        return False
    if player.jump_height >= settings.player.airborne_gate or state.shield_active:
        return False
    if not transition(state, Mode.CAUGHT):
        return False
    state.emit(EventType.CAUGHT, x=player.x)
    return True
