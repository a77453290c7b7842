"""Deterministic simulation tick for FrostByte."""

from frostbyte.sim.input import InputCommand, SteeringMode
from frostbyte.sim.snapshot import RenderSnapshot, take_snapshot
from frostbyte.sim.tick import new_state, reset, tick
from frostbyte.sim.world_state import SimulationState

__all__ = [
    "InputCommand",
    "SteeringMode",
    "RenderSnapshot",
    "take_snapshot",
    "new_state",
    "reset",
    "tick",
    "SimulationState",
]
