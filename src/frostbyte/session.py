"""Host-facing session: owns the state, random source, store and event bus."""

import logging
from typing import Optional

from frostbyte.config.settings import SimulationSettings, get_settings
from frostbyte.core.events import Event, EventBus, EventType
from frostbyte.core.rng import RandomSource, make_rng
from frostbyte.core.state import Mode
from frostbyte.persistence.highscore import KeyValueStore, MemoryStore, load_best, save_best
from frostbyte.sim.input import IDLE, InputCommand
from frostbyte.sim.snapshot import RenderSnapshot, take_snapshot
from frostbyte.sim.tick import new_state, reset, tick
from frostbyte.sim.world_state import SimulationState

logger = logging.getLogger(__name__)


class Session:
    """
    One player's run on the slope.

    The host calls ``tick()`` once per frame and renders ``snapshot()``.
    Events recorded by the simulation are published on ``event_bus`` after
    each tick; a new best distance is written to the store.
    """

    def __init__(
        self,
        settings: Optional[SimulationSettings] = None,
        rng: Optional[RandomSource] = None,
        store: Optional[KeyValueStore] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rng = rng if rng is not None else make_rng(self.settings.seed)
        self.store = store if store is not None else MemoryStore()
        self.event_bus = event_bus or EventBus()
        self.event_bus.subscribe(EventType.NEW_BEST, self._on_new_best)

        best, best_x = load_best(self.store, self.settings.world.width // 2)
        self.state: SimulationState = new_state(self.rng, self.settings, best, best_x)
        logger.info(f"Session started (best {best})")

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def is_over(self) -> bool:
        return self.state.mode.is_terminal

    def tick(self, command: InputCommand = IDLE) -> RenderSnapshot:
        """Advance one frame and publish its events."""
        if command.restart and self.is_over:
            return self.reset()
        self.state = tick(self.state, command, self.rng, self.settings)
        self._publish()
        return self.snapshot()

    def reset(self) -> RenderSnapshot:
        """Restart from the top, re-reading the stored record."""
        best, best_x = load_best(self.store, self.settings.world.width // 2)
        if best > self.state.best_distance:
            self.state.best_distance = best
            self.state.best_x = best_x
        self.state = reset(self.state, self.rng, self.settings)
        self._publish()
        return self.snapshot()

    def snapshot(self) -> RenderSnapshot:
        return take_snapshot(self.state)

    def save(self) -> SimulationState:
        """Copy of the current state for later restore()."""
        return self.state.copy()

    def restore(self, saved: SimulationState) -> None:
        self.state = saved.copy()

    def _publish(self) -> None:
        for event in self.state.events:
            self.event_bus.emit(event)

    def _on_new_best(self, event: Event) -> None:
        save_best(self.store, event.data["distance"], event.data["x"])
