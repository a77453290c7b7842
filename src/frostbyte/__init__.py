"""FrostByte - endless downhill skiing with a yeti on your tail."""

from frostbyte.session import Session
from frostbyte.sim import InputCommand, SteeringMode, RenderSnapshot, SimulationState, new_state, reset, tick

__version__ = "0.1.0"

__all__ = [
    "Session",
    "InputCommand",
    "SteeringMode",
    "RenderSnapshot",
    "SimulationState",
    "new_state",
    "reset",
    "tick",
]
