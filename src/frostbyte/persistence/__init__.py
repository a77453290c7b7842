"""Persistence for the best-distance record."""

from .highscore import JsonFileStore, KeyValueStore, MemoryStore, load_best, save_best

__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore", "load_best", "save_best"]
