"""Read-only per-tick view handed to the renderer and HUD."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from frostbyte.core.state import Mode
from frostbyte.sim.entities import ObstacleKind, PowerupType, ProjectileKind
from frostbyte.sim.world_state import SimulationState


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    angle: float
    jump_height: float
    speed: float


@dataclass(frozen=True)
class ObstacleView:
    x: float
    y: float
    kind: ObstacleKind
    snowy: bool


@dataclass(frozen=True)
class PickupView:
    x: float
    y: float
    kind: PowerupType
    bob_phase: float


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    kind: ProjectileKind
    fuse: int


@dataclass(frozen=True)
class PursuerView:
    x: float
    y: float
    active: bool
    frozen: bool
    stunned: bool


@dataclass(frozen=True)
class RenderSnapshot:
    frame: int
    mode: Mode
    distance: float
    speed: float
    difficulty: float
    player: PlayerView
    obstacles: Tuple[ObstacleView, ...]
    pickups: Tuple[PickupView, ...]
    projectiles: Tuple[ProjectileView, ...]
    pursuer: PursuerView
    held_powerup: Optional[PowerupType]
    # Remaining ticks per active effect, e.g. {"shield": 120}
    effects: Mapping[str, int]
    best_distance: int
    tombstone: Optional[Tuple[float, float, int]]

    @property
    def boost_active(self) -> bool:
        return self.effects.get("boost", 0) > 0

    @property
    def shield_active(self) -> bool:
        return self.effects.get("shield", 0) > 0

    @property
    def freeze_active(self) -> bool:
        return self.effects.get("freeze", 0) > 0

    def positions(self) -> Dict[str, NDArray[np.float32]]:
        """Entity centers as (N, 2) arrays for bulk drawing."""
        def as_array(items) -> NDArray[np.float32]:
            return np.array([(i.x, i.y) for i in items], dtype=np.float32).reshape(-1, 2)

        return {
            "obstacles": as_array(self.obstacles),
            "pickups": as_array(self.pickups),
            "projectiles": as_array(self.projectiles),
        }


def take_snapshot(state: SimulationState) -> RenderSnapshot:
    p = state.player
    y = state.pursuer
    effects = {
        "boost": state.boost.remaining,
        "shield": state.shield.remaining,
        "freeze": state.freeze.remaining,
        "pursuer_frozen": y.frozen.remaining,
        "pursuer_stunned": y.stunned.remaining,
    }
    tomb = state.tombstone

    return RenderSnapshot(
        frame=state.frame,
        mode=state.mode,
        distance=state.distance,
        speed=p.speed,
        difficulty=state.difficulty,
        player=PlayerView(p.x, p.y, p.angle, p.jump_height, p.speed),
        obstacles=tuple(ObstacleView(o.x, o.y, o.kind, o.snowy) for o in state.obstacles),
        pickups=tuple(PickupView(k.x, k.y, k.kind, k.bob_phase) for k in state.pickups),
        projectiles=tuple(
            ProjectileView(j.x, j.y, j.kind, j.fuse.remaining if j.fuse else 0)
            for j in state.projectiles
        ),
        pursuer=PursuerView(y.x, y.y, y.active, y.is_frozen, y.is_stunned),
        held_powerup=state.held_powerup,
        effects=MappingProxyType({k: v for k, v in effects.items() if v > 0}),
        best_distance=state.best_distance,
        tombstone=(tomb.x, tomb.y, tomb.score) if tomb else None,
    )
