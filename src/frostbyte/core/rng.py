"""Injectable random source for spawning and pursuer placement."""

from __future__ import annotations

from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a seedable generator. Same seed, same run."""
    return np.random.default_rng(seed)


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Draw from [low, high) using only ``rng.random()``."""
    return low + float(rng.random()) * (high - low)
