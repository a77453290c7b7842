"""Distance-driven difficulty ramp."""

from frostbyte.config.settings import SpawnSettings


def difficulty_factor(distance: float, spawn: SpawnSettings) -> float:
    """Obstacle density multiplier: sparse at the top, full by the ramp end."""
    floor = spawn.difficulty_floor
    factor = floor + (distance / spawn.difficulty_distance) * (1.0 - floor)
    return max(floor, min(1.0, factor))
