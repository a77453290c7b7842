"""Power-up system: held slot, activation effects, timers and projectiles.

Activation effects:
    BOOST     speed kick plus boost flag
    SHIELD    suppresses crashes and captures
    SNOWBALL  projectile aimed at the yeti (or straight up)
    FREEZE    halts world scroll, freezes an active yeti
    BOMB      fused projectile that explodes in an area
"""

import logging
import math
from typing import Callable, Dict, Tuple

from frostbyte.config.settings import SimulationSettings
from frostbyte.core.events import EventType
from frostbyte.core.timer import Timer
from frostbyte.sim.collision import within
from frostbyte.sim.entities import PowerupType, Projectile, ProjectileKind
from frostbyte.sim.world_state import SimulationState

logger = logging.getLogger(__name__)


def normalize(dx: float, dy: float, default: Tuple[float, float] = (0.0, -1.0)) -> Tuple[float, float]:
    """Unit vector along (dx, dy), or ``default`` for a zero-length vector."""
    length = math.hypot(dx, dy)
    if length == 0:
        return default
    return dx / length, dy / length


def advance_timers(state: SimulationState) -> None:
    """Count down every active effect by one tick."""
    state.boost.tick()
    state.shield.tick()
    state.pursuer.frozen.tick()
    state.pursuer.stunned.tick()
    state.freeze.tick()


def _boost(state: SimulationState, settings: SimulationSettings) -> None:
    cfg = settings.powerups
    state.boost.start(cfg.boost_ticks)
    state.player.speed = min(settings.player.max_speed, state.player.speed + cfg.boost_amount)


def _shield(state: SimulationState, settings: SimulationSettings) -> None:
    state.shield.start(settings.powerups.shield_ticks)


def _snowball(state: SimulationState, settings: SimulationSettings) -> None:
    player = state.player
    pursuer = state.pursuer
    speed = settings.powerups.snowball_speed

    vx, vy = 0.0, -speed
    if pursuer.active:
        ux, uy = normalize(pursuer.x - player.x, pursuer.y - player.y)
        vx = ux * speed
        vy = uy * speed - player.speed * 0.5

    state.projectiles.append(Projectile(
        x=player.x, y=player.y, vx=vx, vy=vy, kind=ProjectileKind.SNOWBALL,
    ))


def _freeze(state: SimulationState, settings: SimulationSettings) -> None:
    cfg = settings.powerups
    state.freeze.start(cfg.freeze_ticks)
    if state.pursuer.active:
        state.pursuer.frozen.start(cfg.pursuer_freeze_ticks)


def _bomb(state: SimulationState, settings: SimulationSettings) -> None:
    cfg = settings.powerups
    player = state.player
    fuse = Timer()
    fuse.start(cfg.bomb_fuse_ticks)
    state.projectiles.append(Projectile(
        x=player.x,
        y=player.y,
        vx=player.angle * cfg.bomb_drift,
        vy=-cfg.bomb_lift,
        kind=ProjectileKind.BOMB,
        fuse=fuse,
    ))


_EFFECTS: Dict[PowerupType, Callable[[SimulationState, SimulationSettings], None]] = {
    PowerupType.BOOST: _boost,
    PowerupType.SHIELD: _shield,
    PowerupType.SNOWBALL: _snowball,
    PowerupType.FREEZE: _freeze,
    PowerupType.BOMB: _bomb,
}


def activate(state: SimulationState, settings: SimulationSettings) -> bool:
    """Use the held power-up. Returns False when the slot is empty."""
    kind = state.held_powerup
    if kind is None:
        return False
    state.held_powerup = None
    _EFFECTS[kind](state, settings)
    state.emit(EventType.POWERUP_ACTIVATED, kind=kind)
    logger.debug(f"Activated {kind.value}")
    return True


def explode(state: SimulationState, x: float, y: float, settings: SimulationSettings) -> None:
    """Destroy nearby obstacles and stun a nearby yeti."""
    cfg = settings.powerups
    destroyed = 0
    for obstacle in state.obstacles:
        if within(x, y, obstacle.x, obstacle.y, cfg.bomb_radius):
            obstacle.destroyed = True
            destroyed += 1

    pursuer = state.pursuer
    stunned = False
    if pursuer.active and within(x, y, pursuer.x, pursuer.y, cfg.bomb_radius):
        pursuer.stunned.start(cfg.bomb_stun_ticks)
        stunned = True
        state.emit(EventType.PURSUER_STUNNED, ticks=cfg.bomb_stun_ticks)

    state.emit(EventType.BOMB_EXPLODED, x=x, y=y, destroyed=destroyed, stunned=stunned)
    logger.debug(f"Bomb exploded at ({x:.0f}, {y:.0f}): {destroyed} destroyed")


def _hit_pursuer(state: SimulationState, projectile: Projectile, settings: SimulationSettings) -> bool:
    pursuer = state.pursuer
    if not pursuer.seeking:
        return False
    if not within(projectile.x, projectile.y, pursuer.x, pursuer.y, settings.powerups.hit_pursuer_radius):
        return False

    state.emit(EventType.PROJECTILE_HIT, kind=projectile.kind, target="pursuer")
    if projectile.kind is ProjectileKind.SNOWBALL:
        ticks = settings.powerups.snowball_stun_ticks
        pursuer.stunned.start(ticks)
        state.emit(EventType.PURSUER_STUNNED, ticks=ticks)
    else:
        explode(state, projectile.x, projectile.y, settings)
    return True


def _hit_obstacle(state: SimulationState, projectile: Projectile, settings: SimulationSettings) -> bool:
    radius = settings.powerups.hit_obstacle_radius
    for obstacle in state.obstacles:
        if obstacle.is_jump or obstacle.destroyed:
            continue
        if within(projectile.x, projectile.y, obstacle.x, obstacle.y, radius):
            obstacle.destroyed = True
            state.emit(EventType.PROJECTILE_HIT, kind=projectile.kind, target=obstacle.kind)
            return True
    return False


def _out_of_bounds(projectile: Projectile, settings: SimulationSettings) -> bool:
    margin = settings.powerups.bounds_margin
    return (
        projectile.y < -margin
        or projectile.y > settings.world.height + margin
        or projectile.x < -margin
        or projectile.x > settings.world.width + margin
    )


def advance_projectiles(state: SimulationState, settings: SimulationSettings) -> None:
    """Move projectiles and resolve fuses, hits and bounds."""
    scroll = state.player.speed * 0.5
    survivors = []

    for projectile in state.projectiles:
        projectile.x += projectile.vx
        projectile.y += projectile.vy
        if projectile.scroll_compensated:
            projectile.y -= scroll

        if projectile.fuse is not None:
            projectile.fuse.tick()
            if projectile.fuse.expired:
                explode(state, projectile.x, projectile.y, settings)
                continue

        if _hit_pursuer(state, projectile, settings):
            continue
        if _hit_obstacle(state, projectile, settings):
            continue
        if _out_of_bounds(projectile, settings):
            continue
        survivors.append(projectile)

    state.projectiles = survivors
