"""
Simulation settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Defaults are tuned for a fixed 60 Hz tick.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorldSettings(BaseSettings):
    """Logical play-field dimensions."""

    width: int = Field(default=640, gt=0)
    height: int = Field(default=480, gt=0)

    # Entities above this line are culled
    cull_y: float = -50.0

    # Spawn offset below the visible window
    spawn_offset: float = 50.0
    initial_obstacles: int = Field(default=10, ge=0)


class SpawnSettings(BaseSettings):
    """Per-tick base spawn rates (scaled by speed and difficulty)."""

    tree_rate: float = Field(default=0.026, ge=0.0, le=1.0)
    rock_rate: float = Field(default=0.012, ge=0.0, le=1.0)
    jump_rate: float = Field(default=0.007, ge=0.0, le=1.0)
    pickup_rate: float = Field(default=0.004, ge=0.0, le=1.0)

    # Obstacle kind partition of a uniform draw
    tree_share: float = Field(default=0.6, ge=0.0, le=1.0)
    rock_share: float = Field(default=0.85, ge=0.0, le=1.0)
    snowy_tree_chance: float = Field(default=0.55, ge=0.0, le=1.0)

    # Difficulty ramp: 0.25 -> 1.0 over the first 1200 units
    difficulty_floor: float = 0.25
    difficulty_distance: float = Field(default=1200.0, gt=0.0)


class PlayerSettings(BaseSettings):
    """Player controller tuning."""

    screen_y: float = 150.0
    edge_margin: float = 20.0

    base_speed: float = 5.0
    min_speed: float = 2.0
    max_speed: float = 15.0
    accel: float = 0.2
    brake: float = 0.1
    relax_down: float = 0.05
    relax_up: float = 0.02

    max_angle: float = 2.0
    steer_step: float = 0.15
    steer_decay: float = 0.05
    steer_snap: float = 0.1
    pointer_dead_zone: float = 30.0
    pointer_divisor: float = 50.0
    drag_divisor: float = 40.0

    jump_velocity: float = 12.0
    gravity: float = 0.8
    airborne_gate: float = 20.0


class PowerupSettings(BaseSettings):
    """Power-up durations and projectile tuning (ticks / units)."""

    boost_ticks: int = Field(default=300, ge=0)
    boost_amount: float = 4.0
    shield_ticks: int = Field(default=360, ge=0)
    freeze_ticks: int = Field(default=240, ge=0)
    pursuer_freeze_ticks: int = Field(default=240, ge=0)

    pickup_radius: float = 15.0
    pickup_reach: float = 15.0

    snowball_speed: float = 10.0
    snowball_stun_ticks: int = Field(default=180, ge=0)

    bomb_fuse_ticks: int = Field(default=60, ge=1)
    bomb_lift: float = 6.0
    bomb_drift: float = 2.0
    bomb_radius: float = 80.0
    bomb_stun_ticks: int = Field(default=300, ge=0)

    hit_pursuer_radius: float = 50.0
    hit_obstacle_radius: float = 25.0
    bounds_margin: float = 80.0

    tombstone_lead: float = 250.0
    tombstone_offset: float = 60.0
    tombstone_cull_y: float = -80.0


class PursuerSettings(BaseSettings):
    """Yeti behaviour."""

    activation_distance: float = 5000.0
    spawn_offset: float = 100.0
    base_speed: float = 4.0
    max_speed: float = 8.0
    ramp_distance: float = Field(default=2000.0, gt=0.0)
    scroll_bias: float = 0.7
    stun_drift: float = 0.4
    escape_y: float = -350.0
    retreat_cooldown: float = 3000.0
    capture_radius: float = 40.0


class SimulationSettings(BaseSettings):
    """Main simulation settings."""

    model_config = SettingsConfigDict(
        env_prefix="FROSTBYTE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Host loop
    tick_rate: int = Field(default=60, gt=0)
    seed: Optional[int] = None
    max_ticks: int = Field(default=36000, ge=0)
    store_path: Path = Field(default_factory=lambda: Path.home() / ".frostbyte" / "highscore.json")

    # Nested settings
    world: WorldSettings = Field(default_factory=WorldSettings)
    spawn: SpawnSettings = Field(default_factory=SpawnSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)
    powerups: PowerupSettings = Field(default_factory=PowerupSettings)
    pursuer: PursuerSettings = Field(default_factory=PursuerSettings)

    @property
    def tick_seconds(self) -> float:
        """Wall-clock length of one tick for the host loop."""
        return 1.0 / self.tick_rate


@lru_cache
def get_settings() -> SimulationSettings:
    """Get cached settings instance."""
    return SimulationSettings()
