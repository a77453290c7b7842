"""World entities: player, obstacles, pickups, projectiles and the yeti."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from frostbyte.core.timer import Timer


class ObstacleKind(Enum):
    TREE = "tree"
    ROCK = "rock"
    JUMP = "jump"


# (width, height) of each obstacle's hit box
OBSTACLE_SIZES: dict[ObstacleKind, tuple[float, float]] = {
    ObstacleKind.TREE: (30.0, 40.0),
    ObstacleKind.ROCK: (25.0, 20.0),
    ObstacleKind.JUMP: (40.0, 10.0),
}


class PowerupType(Enum):
    BOOST = "boost"
    SNOWBALL = "snowball"
    SHIELD = "shield"
    FREEZE = "freeze"
    BOMB = "bomb"


class ProjectileKind(Enum):
    SNOWBALL = "snowball"
    BOMB = "bomb"


@dataclass
class Player:
    x: float
    y: float
    angle: float = 0.0  # -2 to 2
    speed: float = 5.0
    jump_height: float = 0.0
    jump_velocity: float = 0.0
    width: float = 20.0
    height: float = 30.0

    @property
    def airborne(self) -> bool:
        return self.jump_height > 0 or self.jump_velocity > 0


@dataclass
class Obstacle:
    x: float
    y: float
    kind: ObstacleKind
    destroyed: bool = False
    snowy: bool = False  # cosmetic

    @property
    def width(self) -> float:
        return OBSTACLE_SIZES[self.kind][0]

    @property
    def height(self) -> float:
        return OBSTACLE_SIZES[self.kind][1]

    @property
    def is_jump(self) -> bool:
        return self.kind is ObstacleKind.JUMP


@dataclass
class PowerupPickup:
    x: float
    y: float
    kind: PowerupType
    radius: float = 15.0
    bob_phase: float = 0.0  # cosmetic


@dataclass
class Projectile:
    x: float
    y: float
    vx: float
    vy: float
    kind: ProjectileKind
    fuse: Optional[Timer] = None  # bombs only
    scroll_compensated: bool = True


@dataclass
class Pursuer:
    """The yeti. A singleton that toggles between dormant and active."""
    x: float = 0.0
    y: float = -200.0
    active: bool = False
    speed: float = 4.0
    width: float = 40.0
    height: float = 50.0
    frozen: Timer = field(default_factory=Timer)
    stunned: Timer = field(default_factory=Timer)
    retreat_cooldown: float = 0.0  # distance before it may return

    @property
    def is_frozen(self) -> bool:
        return self.frozen.active

    @property
    def is_stunned(self) -> bool:
        return self.stunned.active

    @property
    def seeking(self) -> bool:
        return self.active and not self.is_frozen and not self.is_stunned


@dataclass
class Tombstone:
    """Marker placed where the previous best run ended."""
    x: float
    y: float
    score: int
