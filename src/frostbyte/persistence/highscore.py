"""Best-distance persistence.

The simulation only keeps the record in memory; a small key-value store
carries it between sessions. Two keys are used: the best distance and the
horizontal position where that run ended (for the tombstone marker).
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)

HIGHSCORE_KEY = "frostbyte_highscore"
HIGHSCORE_X_KEY = "frostbyte_highscore_x"


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """In-process store, used by tests and headless runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Key-value pairs kept in a single JSON object on disk.

    Unreadable or malformed files read as empty. Write failures are logged
    and the in-memory copy is kept.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._data: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring store {self.path}: expected an object")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write store {self.path}: {e}")


def _read_int(store: KeyValueStore, key: str, default: int) -> int:
    raw = store.get(key)
    if raw is None:
        return default
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        logger.warning(f"Ignoring non-numeric {key}={raw!r}")
        return default


def load_best(store: KeyValueStore, default_x: int) -> Tuple[int, int]:
    """Return (best distance, best x). Missing values read as (0, default_x)."""
    best = max(0, _read_int(store, HIGHSCORE_KEY, 0))
    best_x = _read_int(store, HIGHSCORE_X_KEY, default_x)
    return best, best_x


def save_best(store: KeyValueStore, distance: int, x: int) -> None:
    store.set(HIGHSCORE_KEY, str(int(distance)))
    store.set(HIGHSCORE_X_KEY, str(int(x)))
    logger.info(f"Saved best distance {distance}")
