"""chessclock — two-player game clock with Fischer, Bronstein, delay and
hourglass time controls."""

from chessclock.clock import Clock, ClockState, ManualTickSource, ThreadingTickSource
from chessclock.core import Mode, Player, Stage, Status
from chessclock.errors import ClockError, ConfigNotFoundError, StageError
from chessclock.presets import ConfigRegistry, Preset

__all__ = [
    "Clock",
    "ClockError",
    "ClockState",
    "ConfigNotFoundError",
    "ConfigRegistry",
    "ManualTickSource",
    "Mode",
    "Player",
    "Preset",
    "Stage",
    "StageError",
    "Status",
    "ThreadingTickSource",
]
