"""Named time-control presets.

A :class:`ConfigRegistry` maps a preset name to its stage table.  It holds
no timing logic; the clock only reads stage tables out of it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from chessclock.core.stage import Stage, StageLike, as_stage
from chessclock.errors import ConfigNotFoundError, StageError


@dataclass(frozen=True, slots=True)
class Preset:
    """A named stage table."""

    name: str
    stages: tuple[Stage, ...]


# ── Built-in presets ─────────────────────────────────────────────────────────

DEFAULT_PRESET = "Fischer Blitz 5|0"

BUILTIN_PRESETS: dict[str, list[dict[str, object]]] = {
    "Fischer Blitz 5|0": [
        {"time": [300_000, 300_000], "mode": "Fischer", "increment": 0},
    ],
    "Fischer Rapid 5|5": [
        {"time": [300_000, 300_000], "mode": "Fischer", "increment": 5000},
    ],
    "Fischer Rapid 10|5": [
        {"time": [600_000, 600_000], "mode": "Fischer", "increment": 5000},
    ],
    "Delay Bullet 1|2": [
        {"time": [60_000, 60_000], "mode": "Delay", "increment": 2000},
    ],
    "Bronstein Bullet 1|2": [
        {"time": [60_000, 60_000], "mode": "Bronstein", "increment": 2000},
    ],
    "Hourglass 1": [
        {"time": [60_000, 60_000], "mode": "Hourglass", "increment": 0},
    ],
    "Tournament 40/120|5, 60|5": [
        {"time": [7_200_000, 7_200_000], "mode": "Delay", "increment": 5000},
        {"move": 40, "time": [3_600_000, 3_600_000], "mode": "Delay", "increment": 5000},
    ],
}


# ── Registry ─────────────────────────────────────────────────────────────────


class ConfigRegistry:
    """Mutable name → stage table store."""

    __slots__ = ("_configs",)

    def __init__(self) -> None:
        self._configs: dict[str, tuple[Stage, ...]] = {}

    @classmethod
    def with_defaults(cls) -> ConfigRegistry:
        """Registry pre-seeded with :data:`BUILTIN_PRESETS`."""
        registry = cls()
        for name, stages in BUILTIN_PRESETS.items():
            registry.set_config(name, stages)
        return registry

    def set_config(self, name: str, stages: Iterable[StageLike]) -> None:
        """Add or replace the preset *name*."""
        table = tuple(as_stage(s) for s in stages)
        if not table:
            raise StageError(f"Preset {name!r} has no stages")
        self._configs[name] = table

    def delete_config(self, name: str) -> None:
        """Remove *name*; unknown names are ignored."""
        self._configs.pop(name, None)

    def get_config(self, name: str) -> Preset | None:
        stages = self._configs.get(name)
        if stages is None:
            return None
        return Preset(name, stages)

    def require(self, name: str) -> Preset:
        """Like :meth:`get_config` but raises :class:`ConfigNotFoundError`."""
        preset = self.get_config(name)
        if preset is None:
            raise ConfigNotFoundError(name)
        return preset

    def list_config_names(self) -> list[str]:
        return list(self._configs)

    def list_config_entries(self) -> list[tuple[str, tuple[Stage, ...]]]:
        return list(self._configs.items())

    def __contains__(self, name: object) -> bool:
        return name in self._configs

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"ConfigRegistry({len(self)} presets)"

