"""
Per-tick orchestration.

``tick()`` is the only function that advances a ``SimulationState``.
Stages run in a fixed order because later stages read what earlier ones
wrote within the same tick:

    1. triggers (power-up activation), effect timers, steering, throttle
    2. movement: jump physics, horizontal position, distance, difficulty
    3. world: tombstone, scroll, cull, spawn
    4. collisions: pickups, obstacles
    5. projectiles
    6. yeti, capture
    7. finalize
"""

import logging
import math
from typing import Optional

from frostbyte.config.settings import SimulationSettings, get_settings
from frostbyte.core.events import EventType
from frostbyte.core.rng import RandomSource
from frostbyte.sim import collision, player, powerups, pursuer, spawner
from frostbyte.sim.entities import Player
from frostbyte.sim.input import InputCommand
from frostbyte.sim.world_state import SimulationState

logger = logging.getLogger(__name__)


def new_state(
    rng: RandomSource,
    settings: Optional[SimulationSettings] = None,
    best_distance: int = 0,
    best_x: Optional[int] = None,
) -> SimulationState:
    """Build a fresh session at the top of the slope."""
    settings = settings or get_settings()
    world = settings.world

    state = SimulationState(
        player=Player(
            x=world.width / 2,
            y=settings.player.screen_y,
            speed=settings.player.base_speed,
        ),
        difficulty=settings.spawn.difficulty_floor,
        best_distance=max(0, int(best_distance)),
        best_x=int(best_x) if best_x is not None else world.width // 2,
    )
    spawner.populate(state, rng, settings)
    return state


def reset(
    state: SimulationState,
    rng: RandomSource,
    settings: Optional[SimulationSettings] = None,
) -> SimulationState:
    """Start over, keeping only the best-run record."""
    fresh = new_state(rng, settings, state.best_distance, state.best_x)
    fresh.emit(EventType.RESET, previous_distance=state.distance)
    logger.info(f"Session reset after {state.distance:.0f} ({state.mode.name})")
    return fresh


def record_best(state: SimulationState) -> bool:
    """Update the best-run record when a run ends further than before."""
    if state.distance <= state.best_distance:
        return False
    state.best_distance = int(math.floor(state.distance))
    state.best_x = int(round(state.player.x))
    state.emit(EventType.NEW_BEST, distance=state.best_distance, x=state.best_x)
    logger.info(f"New best distance: {state.best_distance}")
    return True


def _finalize(state: SimulationState) -> SimulationState:
    state.obstacles = [o for o in state.obstacles if not o.destroyed]
    if state.mode.is_terminal:
        record_best(state)
    return state


def tick(
    state: SimulationState,
    command: InputCommand,
    rng: RandomSource,
    settings: Optional[SimulationSettings] = None,
) -> SimulationState:
    """Advance the simulation by one fixed step.

    Args:
        state: Session state, mutated in place
        command: This tick's normalized input
        rng: Random source for spawning and yeti placement
        settings: Tuning constants (cached defaults if omitted)

    Returns:
        The advanced state, or a fresh one when a restart was requested
        from a terminal mode
    """
    settings = settings or get_settings()
    state.events = []

    if state.mode.is_terminal:
        if command.restart:
            return reset(state, rng, settings)
        return state

    state.frame += 1

    if command.activate:
        powerups.activate(state, settings)
    powerups.advance_timers(state)
    player.apply_input(state, command, settings)

    player.move(state, settings)
    spawner.advance_world(state, rng, settings)

    collision.collect_pickups(state, settings)
    collision.resolve_obstacles(state, settings)
    if state.mode.is_terminal:
        return _finalize(state)

    powerups.advance_projectiles(state, settings)

    pursuer.update(state, rng, settings)
    collision.check_capture(state, settings)

    return _finalize(state)
