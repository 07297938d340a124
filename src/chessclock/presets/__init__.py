"""Named time-control presets."""

from chessclock.presets.registry import (
    BUILTIN_PRESETS,
    DEFAULT_PRESET,
    ConfigRegistry,
    Preset,
)

__all__ = [
    "BUILTIN_PRESETS",
    "DEFAULT_PRESET",
    "ConfigRegistry",
    "Preset",
]
