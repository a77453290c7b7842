"""Core building blocks for the FrostByte simulation."""

from .state import Mode, can_transition, transition
from .events import EventBus, Event, EventType
from .timer import Timer
from .rng import RandomSource, make_rng

__all__ = [
    "Mode",
    "can_transition",
    "transition",
    "EventBus",
    "Event",
    "EventType",
    "Timer",
    "RandomSource",
    "make_rng",
]
