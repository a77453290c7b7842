"""Tick-count timers shared by power-ups, pursuer effects and bomb fuses."""

from dataclasses import dataclass


@dataclass
class Timer:
    """Countdown measured in simulation ticks.

    A timer is active while ``remaining > 0``. ``tick()`` never takes it
    below zero.
    """

    remaining: int = 0

    @property
    def active(self) -> bool:
        return self.remaining > 0

    @property
    def expired(self) -> bool:
        return self.remaining <= 0

    def start(self, ticks: int) -> None:
        """Arm the timer for ``ticks`` ticks."""
        self.remaining = max(0, int(ticks))

    def clear(self) -> None:
        self.remaining = 0

    def tick(self) -> bool:
        """Advance one tick.

        Returns:
            True if the timer expired on this tick
        """
        if self.remaining <= 0:
            return False
        self.remaining -= 1
        return self.remaining == 0
