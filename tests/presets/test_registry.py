"""Tests for the preset registry."""

import pytest

from chessclock.core.enums import Mode
from chessclock.core.stage import Stage
from chessclock.errors import ConfigNotFoundError, StageError
from chessclock.presets.registry import (
    BUILTIN_PRESETS,
    DEFAULT_PRESET,
    ConfigRegistry,
    Preset,
)

_HOURGLASS = [{"time": [60_000, 60_000], "mode": "Hourglass", "increment": 0}]
_FISCHER = [{"time": [60_000, 60_000], "mode": "Fischer", "increment": 0}]


class TestDefaults:
    def test_seeded_with_builtins(self) -> None:
        registry = ConfigRegistry.with_defaults()
        assert registry.list_config_names() == list(BUILTIN_PRESETS)
        assert DEFAULT_PRESET in registry

    def test_new_registry_is_empty(self) -> None:
        assert len(ConfigRegistry()) == 0

    def test_registries_are_independent(self) -> None:
        first = ConfigRegistry.with_defaults()
        second = ConfigRegistry.with_defaults()
        first.delete_config("Hourglass 1")
        assert "Hourglass 1" not in first
        assert "Hourglass 1" in second

    def test_tournament_preset_has_second_stage(self) -> None:
        preset = ConfigRegistry.with_defaults().require("Tournament 40/120|5, 60|5")
        assert [s.move for s in preset.stages] == [None, 40]
        assert all(s.mode is Mode.DELAY for s in preset.stages)


class TestCrud:
    def test_list_entries(self) -> None:
        entries = ConfigRegistry.with_defaults().list_config_entries()
        assert entries
        assert all(isinstance(name, str) for name, _ in entries)
        assert all(isinstance(s, Stage) for _, stages in entries for s in stages)

    def test_set_and_replace(self) -> None:
        registry = ConfigRegistry.with_defaults()
        length = len(registry.list_config_names())
        registry.set_config("test", _HOURGLASS)
        assert len(registry.list_config_names()) == length + 1
        assert "test" in registry.list_config_names()

        registry.set_config("test", _FISCHER)
        assert len(registry.list_config_names()) == length + 1
        preset = registry.get_config("test")
        assert preset is not None
        assert preset.stages[0].mode is Mode.FISCHER

    def test_set_accepts_stage_objects(self) -> None:
        registry = ConfigRegistry()
        stage = Stage(time=(1000, 1000), mode=Mode.DELAY, increment=100)
        registry.set_config("x", [stage])
        assert registry.require("x") == Preset("x", (stage,))

    def test_set_rejects_empty_table(self) -> None:
        with pytest.raises(StageError):
            ConfigRegistry().set_config("empty", [])

    def test_get_missing_returns_none(self) -> None:
        assert ConfigRegistry.with_defaults().get_config("Does not exist") is None

    def test_require_missing_raises(self) -> None:
        with pytest.raises(ConfigNotFoundError, match="Does not exist"):
            ConfigRegistry().require("Does not exist")

    def test_delete(self) -> None:
        registry = ConfigRegistry()
        registry.set_config("test", _FISCHER)
        registry.delete_config("test")
        assert registry.get_config("test") is None
        registry.delete_config("test")
