"""Shared fixtures for the simulation tests."""

from collections import deque

import pytest

from frostbyte.config.settings import SimulationSettings
from frostbyte.core.rng import make_rng
from frostbyte.sim.tick import new_state


class ScriptedRandom:
    """Returns queued values, then a fixed fallback forever."""

    def __init__(self, *values: float, fallback: float = 0.99) -> None:
        self._values = deque(values)
        self.fallback = fallback

    def random(self) -> float:
        if self._values:
            return self._values.popleft()
        return self.fallback


@pytest.fixture
def settings():
    return SimulationSettings(_env_file=None)


@pytest.fixture
def rng():
    return make_rng(1234)


@pytest.fixture
def quiet_rng():
    """Never passes a spawn trial."""
    return ScriptedRandom(fallback=0.99)


@pytest.fixture
def state(settings, quiet_rng):
    """Fresh state on an empty slope."""
    s = new_state(quiet_rng, settings)
    s.obstacles.clear()
    return s
