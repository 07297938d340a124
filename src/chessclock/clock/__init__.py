"""Clock engine and the tick sources that drive it.

Quick start::

    from chessclock.clock import Clock
    from chessclock.presets import ConfigRegistry

    presets = ConfigRegistry.with_defaults()
    clock = Clock.from_preset(presets.require("Fischer Rapid 5|5"))
    clock.push(0)   # player 0 ends the opening turn, player 1 is on move
"""

from chessclock.clock.engine import UPDATE_INTERVAL, Clock, StateCallback
from chessclock.clock.interfaces import ITickHandle, ITickSource, TimeSource, monotonic_ms
from chessclock.clock.scheduling import ManualTickSource, ThreadingTickSource
from chessclock.clock.state import ClockState

__all__ = [
    # Interfaces
    "ITickHandle",
    "ITickSource",
    "StateCallback",
    "TimeSource",
    # Concrete
    "Clock",
    "ClockState",
    "ManualTickSource",
    "ThreadingTickSource",
    "UPDATE_INTERVAL",
    "monotonic_ms",
]
