"""Abstract scheduling interfaces for the clock engine.

The engine never sleeps or talks to an event loop directly: it asks an
:class:`ITickSource` for a repeating task and reads time from a
:data:`TimeSource`.  Swapping both makes the clock fully deterministic.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

TimeSource = Callable[[], int]
"""Zero-argument callable returning the current instant in milliseconds."""

TickCallback = Callable[[], None]


def monotonic_ms() -> int:
    """Default time source: monotonic clock in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


class ITickHandle(ABC):
    """Cancellable handle to a scheduled repeating task."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """Is the task still scheduled?"""

    @abstractmethod
    def cancel(self) -> None:
        """Stop future firings. Cancelling twice is harmless."""


class ITickSource(ABC):
    """Something that can run a callback every *period_ms* milliseconds."""

    @abstractmethod
    def schedule_repeating(self, period_ms: int, callback: TickCallback) -> ITickHandle:
        """Start calling *callback* every *period_ms* until cancelled."""
