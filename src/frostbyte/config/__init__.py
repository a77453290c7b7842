"""Configuration for FrostByte."""

from .settings import SimulationSettings, get_settings

__all__ = ["SimulationSettings", "get_settings"]
