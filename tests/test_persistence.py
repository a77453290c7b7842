"""Tests for the best-distance store."""

import json

from frostbyte.persistence.highscore import (
    HIGHSCORE_KEY,
    HIGHSCORE_X_KEY,
    JsonFileStore,
    MemoryStore,
    load_best,
    save_best,
)


def test_missing_values_use_defaults():
    assert load_best(MemoryStore(), 320) == (0, 320)


def test_non_numeric_values_are_ignored():
    store = MemoryStore({HIGHSCORE_KEY: "lots", HIGHSCORE_X_KEY: "1e999"})
    assert load_best(store, 320) == (0, 320)


def test_negative_best_reads_as_zero():
    store = MemoryStore({HIGHSCORE_KEY: "-40", HIGHSCORE_X_KEY: "100"})
    assert load_best(store, 320) == (0, 100)


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "highscore.json"
    save_best(JsonFileStore(path), 4321, 210)

    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {HIGHSCORE_KEY: "4321", HIGHSCORE_X_KEY: "210"}
    assert load_best(JsonFileStore(path), 320) == (4321, 210)


def test_malformed_file_reads_as_empty(tmp_path):
    path = tmp_path / "highscore.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_best(JsonFileStore(path), 320) == (0, 320)

    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_best(JsonFileStore(path), 320) == (0, 320)


def test_write_failure_keeps_value_in_memory(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    store = JsonFileStore(blocker / "highscore.json")

    save_best(store, 900, 50)
    assert load_best(store, 320) == (900, 50)
