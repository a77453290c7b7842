"""Normalized per-tick input command supplied by the host."""

from dataclasses import dataclass
from enum import Enum


class SteeringMode(Enum):
    DISCRETE = "discrete"  # left/right flags
    ABSOLUTE = "absolute"  # pointer x position
    RELATIVE = "relative"  # horizontal drag delta


@dataclass(frozen=True)
class InputCommand:
    steering: SteeringMode = SteeringMode.DISCRETE
    # ABSOLUTE: target x in world units; RELATIVE: drag delta since touch start
    steer: float = 0.0
    left: bool = False
    right: bool = False

    accelerate: bool = False
    brake: bool = False
    boost: bool = False

    # Triggers, true only on the tick they fire
    jump: bool = False
    activate: bool = False
    restart: bool = False

    @classmethod
    def pointer(cls, target_x: float, **kwargs) -> "InputCommand":
        return cls(steering=SteeringMode.ABSOLUTE, steer=target_x, **kwargs)

    @classmethod
    def drag(cls, delta_x: float, **kwargs) -> "InputCommand":
        return cls(steering=SteeringMode.RELATIVE, steer=delta_x, **kwargs)


IDLE = InputCommand()
