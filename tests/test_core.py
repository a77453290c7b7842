"""Tests for timers, the mode machine and the event bus."""

import logging

from frostbyte.core.events import Event, EventBus, EventType
from frostbyte.core.state import Mode, VALID_TRANSITIONS, can_transition, transition
from frostbyte.core.timer import Timer


class _Holder:
    def __init__(self, mode):
        self.mode = mode


def test_timer_counts_down_to_zero():
    timer = Timer()
    assert timer.expired
    timer.start(3)
    assert timer.active
    assert timer.tick() is False
    assert timer.tick() is False
    assert timer.tick() is True
    assert timer.expired
    assert timer.tick() is False
    assert timer.remaining == 0


def test_timer_start_clamps_negative():
    timer = Timer()
    timer.start(-5)
    assert timer.remaining == 0


def test_terminal_modes():
    assert Mode.CRASHED.is_terminal
    assert Mode.CAUGHT.is_terminal
    assert not Mode.PLAYING.is_terminal
    assert not Mode.JUMPING.is_terminal


def test_no_transition_leaves_terminal_modes():
    for from_mode, _ in VALID_TRANSITIONS:
        assert not from_mode.is_terminal
    assert not can_transition(Mode.CRASHED, Mode.PLAYING)
    assert not can_transition(Mode.CAUGHT, Mode.JUMPING)


def test_transition_applies_valid_change():
    holder = _Holder(Mode.PLAYING)
    assert transition(holder, Mode.JUMPING)
    assert holder.mode is Mode.JUMPING
    assert transition(holder, Mode.PLAYING)
    assert holder.mode is Mode.PLAYING


def test_transition_rejects_invalid_change(caplog):
    holder = _Holder(Mode.CRASHED)
    with caplog.at_level(logging.WARNING):
        assert not transition(holder, Mode.JUMPING)
    assert holder.mode is Mode.CRASHED
    assert "Invalid transition" in caplog.text


def test_same_mode_transition_is_noop():
    holder = _Holder(Mode.JUMPING)
    assert transition(holder, Mode.JUMPING)
    assert holder.mode is Mode.JUMPING


def test_event_bus_delivers_and_unsubscribes():
    bus = EventBus()
    seen = []
    unsubscribe = bus.subscribe(EventType.CRASHED, seen.append)
    everything = []
    bus.subscribe_all(everything.append)

    bus.emit(Event(EventType.CRASHED))
    bus.emit(Event(EventType.JUMPED))
    assert [e.type for e in seen] == [EventType.CRASHED]
    assert len(everything) == 2

    unsubscribe()
    bus.emit(Event(EventType.CRASHED))
    assert len(seen) == 1


def test_event_bus_handler_error_does_not_stop_delivery(caplog):
    bus = EventBus()
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.LANDED, broken)
    bus.subscribe(EventType.LANDED, seen.append)
    with caplog.at_level(logging.ERROR):
        bus.emit(Event(EventType.LANDED))
    assert len(seen) == 1
    assert "boom" in caplog.text


def test_event_bus_history_limit():
    bus = EventBus(history_limit=3)
    for frame in range(5):
        bus.emit(Event(EventType.JUMPED, frame=frame))
    history = bus.get_history(limit=10)
    assert [e.frame for e in history] == [2, 3, 4]
    assert bus.get_history(EventType.CRASHED) == []
    bus.clear_history()
    assert bus.get_history() == []
