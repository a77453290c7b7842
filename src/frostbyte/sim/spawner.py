"""Procedural placement, world scrolling and culling of slope entities."""

import logging
import math

from frostbyte.config.settings import SimulationSettings
from frostbyte.core.rng import RandomSource, uniform
from frostbyte.sim.entities import (
    Obstacle,
    ObstacleKind,
    PowerupPickup,
    PowerupType,
    Tombstone,
)
from frostbyte.sim.world_state import SimulationState

logger = logging.getLogger(__name__)

POWERUP_TYPES = list(PowerupType)


def pick_obstacle_kind(draw: float, settings: SimulationSettings) -> ObstacleKind:
    if draw < settings.spawn.tree_share:
        return ObstacleKind.TREE
    if draw < settings.spawn.rock_share:
        return ObstacleKind.ROCK
    return ObstacleKind.JUMP


def spawn_obstacle(state: SimulationState, y: float, rng: RandomSource,
                   settings: SimulationSettings) -> Obstacle:
    kind = pick_obstacle_kind(float(rng.random()), settings)
    margin = settings.player.edge_margin
    x = uniform(rng, margin, settings.world.width - margin)
    snowy = kind is ObstacleKind.TREE and rng.random() < settings.spawn.snowy_tree_chance

    obstacle = Obstacle(x=x, y=y, kind=kind, snowy=bool(snowy))
    state.obstacles.append(obstacle)
    logger.debug(f"Spawned {kind.value} at ({x:.0f}, {y:.0f})")
    return obstacle


def spawn_pickup(state: SimulationState, y: float, rng: RandomSource,
                 settings: SimulationSettings) -> PowerupPickup:
    index = min(int(rng.random() * len(POWERUP_TYPES)), len(POWERUP_TYPES) - 1)
    kind = POWERUP_TYPES[index]
    margin = settings.player.edge_margin + 10
    x = uniform(rng, margin, settings.world.width - margin)

    pickup = PowerupPickup(
        x=x,
        y=y,
        kind=kind,
        radius=settings.powerups.pickup_radius,
        bob_phase=uniform(rng, 0.0, 2 * math.pi),
    )
    state.pickups.append(pickup)
    logger.debug(f"Spawned {kind.value} pickup at ({x:.0f}, {y:.0f})")
    return pickup


def populate(state: SimulationState, rng: RandomSource, settings: SimulationSettings) -> None:
    """Fill a fresh slope with the opening obstacles, below the window."""
    state.obstacles = []
    state.pickups = []
    state.projectiles = []
    h = settings.world.height
    for _ in range(settings.world.initial_obstacles):
        spawn_obstacle(state, uniform(rng, h, 2 * h), rng, settings)


def scroll(state: SimulationState) -> None:
    """Move world entities up by the player's speed unless Freeze is active."""
    if state.freeze_active:
        return
    speed = state.player.speed
    for obstacle in state.obstacles:
        obstacle.y -= speed
    for pickup in state.pickups:
        pickup.y -= speed
    if state.tombstone is not None:
        state.tombstone.y -= speed


def cull(state: SimulationState, settings: SimulationSettings) -> None:
    """Drop entities above the window and obstacles flagged destroyed."""
    cull_y = settings.world.cull_y
    state.obstacles = [o for o in state.obstacles if o.y > cull_y and not o.destroyed]
    state.pickups = [p for p in state.pickups if p.y > cull_y]
    if state.tombstone is not None and state.tombstone.y < settings.powerups.tombstone_cull_y:
        state.tombstone = None


def spawn_tick(state: SimulationState, rng: RandomSource, settings: SimulationSettings) -> None:
    """Independent Bernoulli trials for each obstacle rate and for pickups."""
    rates = settings.spawn
    spd = state.player.speed / settings.player.base_speed
    y = settings.world.height + settings.world.spawn_offset

    for rate in (rates.tree_rate, rates.rock_rate, rates.jump_rate):
        if rng.random() < rate * spd * state.difficulty:
            spawn_obstacle(state, y, rng, settings)
    if rng.random() < rates.pickup_rate * spd:
        spawn_pickup(state, y, rng, settings)


def place_tombstone(state: SimulationState, settings: SimulationSettings) -> None:
    """Show the best-run marker once the player nears the previous record."""
    if state.tombstone_placed or state.best_distance <= 0:
        return
    if state.distance < state.best_distance - settings.powerups.tombstone_lead:
        return
    state.tombstone = Tombstone(
        x=float(state.best_x),
        y=settings.world.height + settings.powerups.tombstone_offset,
        score=state.best_distance,
    )
    state.tombstone_placed = True
    logger.debug(f"Tombstone placed for best {state.best_distance}")


def advance_world(state: SimulationState, rng: RandomSource, settings: SimulationSettings) -> None:
    """Scroll, cull and spawn for one tick."""
    place_tombstone(state, settings)
    scroll(state)
    cull(state, settings)
    spawn_tick(state, rng, settings)
