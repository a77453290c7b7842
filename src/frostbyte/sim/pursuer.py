"""Yeti AI.

States:
    DORMANT: inactive, no cooldown pending
    SEEKING: active, chasing the player
    FROZEN / STUNNED: active, seek suppressed by a power-up
    RETREATING: inactive while a distance cooldown is consumed
"""

import logging
import math
from enum import Enum, auto

from frostbyte.config.settings import SimulationSettings
from frostbyte.core.events import EventType
from frostbyte.core.rng import RandomSource
from frostbyte.sim.entities import Pursuer
from frostbyte.sim.world_state import SimulationState

logger = logging.getLogger(__name__)


class PursuerPhase(Enum):
    DORMANT = auto()
    SEEKING = auto()
    FROZEN = auto()
    STUNNED = auto()
    RETREATING = auto()


def phase_of(pursuer: Pursuer) -> PursuerPhase:
    if not pursuer.active:
        return PursuerPhase.RETREATING if pursuer.retreat_cooldown > 0 else PursuerPhase.DORMANT
    if pursuer.is_frozen:
        return PursuerPhase.FROZEN
    if pursuer.is_stunned:
        return PursuerPhase.STUNNED
    return PursuerPhase.SEEKING


def ramped_speed(distance: float, settings: SimulationSettings) -> float:
    cfg = settings.pursuer
    progress = (distance - cfg.activation_distance) / cfg.ramp_distance
    speed = cfg.base_speed + progress * (cfg.max_speed - cfg.base_speed)
    return max(cfg.base_speed, min(cfg.max_speed, speed))


def try_activate(state: SimulationState, rng: RandomSource, settings: SimulationSettings) -> bool:
    """Wake the yeti below the window once the player is far enough down."""
    pursuer = state.pursuer
    cfg = settings.pursuer
    if pursuer.active or pursuer.retreat_cooldown > 0:
        return False
    if state.distance <= cfg.activation_distance:
        return False

    pursuer.active = True
    pursuer.x = float(rng.random()) * settings.world.width
    pursuer.y = settings.world.height + cfg.spawn_offset
    pursuer.frozen.clear()
    pursuer.stunned.clear()
    state.emit(EventType.PURSUER_ACTIVATED, x=pursuer.x, distance=state.distance)
    logger.info(f"Yeti activated at distance {state.distance:.0f}")
    return True


def consume_cooldown(state: SimulationState) -> None:
    pursuer = state.pursuer
    if pursuer.active or pursuer.retreat_cooldown <= 0:
        return
    pursuer.retreat_cooldown = max(0.0, pursuer.retreat_cooldown - state.player.speed * 0.5)


def _move(state: SimulationState, settings: SimulationSettings) -> None:
    pursuer = state.pursuer
    player = state.player

    if pursuer.seeking:
        dx = player.x - pursuer.x
        dy = player.y - pursuer.y
        dist = math.hypot(dx, dy)
        if dist > 0:
            pursuer.x += (dx / dist) * pursuer.speed
            pursuer.y += (dy / dist) * pursuer.speed - player.speed * settings.pursuer.scroll_bias
    elif pursuer.is_stunned:
        pursuer.y -= player.speed * settings.pursuer.stun_drift


def update(state: SimulationState, rng: RandomSource, settings: SimulationSettings) -> None:
    """Activation, cooldown, seek/drift, speed ramp and escape."""
    try_activate(state, rng, settings)
    consume_cooldown(state)

    pursuer = state.pursuer
    if not pursuer.active:
        return

    _move(state, settings)
    pursuer.speed = ramped_speed(state.distance, settings)

    if pursuer.y < settings.pursuer.escape_y:
        pursuer.active = False
        pursuer.retreat_cooldown = settings.pursuer.retreat_cooldown
        pursuer.frozen.clear()
        pursuer.stunned.clear()
        state.emit(EventType.PURSUER_RETREATED, distance=state.distance)
        logger.info(f"Yeti outrun at distance {state.distance:.0f}")
