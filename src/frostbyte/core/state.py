"""
Top-level mode machine for the simulation.

Modes:
    PLAYING: Skiing on the ground
    JUMPING: Airborne after a ramp or the jump button
    CRASHED: Hit a tree or rock (terminal until reset)
    CAUGHT: Caught by the pursuer (terminal until reset)
"""

from enum import Enum, auto
from typing import Protocol
import logging

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Simulation modes."""
    PLAYING = auto()
    JUMPING = auto()
    CRASHED = auto()
    CAUGHT = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (Mode.CRASHED, Mode.CAUGHT)


class HasMode(Protocol):
    mode: Mode


# Valid mode transitions. Leaving a terminal mode goes through reset() only.
VALID_TRANSITIONS: list[tuple[Mode, Mode]] = [
    # From PLAYING
    (Mode.PLAYING, Mode.JUMPING),
    (Mode.PLAYING, Mode.CRASHED),
    (Mode.PLAYING, Mode.CAUGHT),

    # From JUMPING
    (Mode.JUMPING, Mode.PLAYING),  # Landed
    (Mode.JUMPING, Mode.CRASHED),
    (Mode.JUMPING, Mode.CAUGHT),
]

_VALID = set(VALID_TRANSITIONS)


def can_transition(from_mode: Mode, to_mode: Mode) -> bool:
    """Check if transition between two modes is valid."""
    return (from_mode, to_mode) in _VALID


def transition(state: HasMode, to_mode: Mode) -> bool:
    """
    Attempt to move ``state`` to a new mode.

    Args:
        state: Anything carrying a ``mode`` attribute
        to_mode: Target mode

    Returns:
        True if the state is in ``to_mode`` afterwards
    """
    if state.mode == to_mode:
        return True

    if not can_transition(state.mode, to_mode):
        logger.warning(
            f"Invalid transition: {state.mode.name} -> {to_mode.name}"
        )
        return False

    old_mode = state.mode
    state.mode = to_mode
    logger.info(f"Mode transition: {old_mode.name} -> {to_mode.name}")
    return True
