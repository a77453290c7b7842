"""The single aggregate holding everything the simulation mutates."""

import copy
from dataclasses import dataclass, field
from typing import Any, List, Optional

from frostbyte.core.events import Event, EventType
from frostbyte.core.state import Mode
from frostbyte.core.timer import Timer
from frostbyte.sim.entities import (
    Obstacle,
    Player,
    PowerupPickup,
    PowerupType,
    Projectile,
    Pursuer,
    Tombstone,
)


@dataclass
class SimulationState:
    player: Player
    mode: Mode = Mode.PLAYING
    frame: int = 0
    distance: float = 0.0
    difficulty: float = 0.25

    obstacles: List[Obstacle] = field(default_factory=list)
    pickups: List[PowerupPickup] = field(default_factory=list)
    projectiles: List[Projectile] = field(default_factory=list)
    pursuer: Pursuer = field(default_factory=Pursuer)

    # Power-ups
    held_powerup: Optional[PowerupType] = None
    boost: Timer = field(default_factory=Timer)
    shield: Timer = field(default_factory=Timer)
    freeze: Timer = field(default_factory=Timer)

    # Best run marker
    best_distance: int = 0
    best_x: int = 320
    tombstone: Optional[Tombstone] = None
    tombstone_placed: bool = False

    # Events recorded during the current tick
    events: List[Event] = field(default_factory=list)

    @property
    def shield_active(self) -> bool:
        return self.shield.active

    @property
    def freeze_active(self) -> bool:
        return self.freeze.active

    @property
    def boost_active(self) -> bool:
        return self.boost.active

    def emit(self, event_type: EventType, **data: Any) -> None:
        """Record an event for this tick."""
        self.events.append(Event(event_type, data=data, frame=self.frame))

    def copy(self) -> "SimulationState":
        """Deep copy for save/restore."""
        return copy.deepcopy(self)
