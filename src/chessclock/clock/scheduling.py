"""Tick sources: a background-thread one and a deterministic manual one."""

from __future__ import annotations

import itertools
import logging
import threading

from chessclock.clock.interfaces import ITickHandle, ITickSource, TickCallback

_LOGGER = logging.getLogger(__name__)


# ── Threads ──────────────────────────────────────────────────────────────────


class _ThreadTickHandle(ITickHandle):
    """Daemon thread firing a callback until its stop event is set."""

    __slots__ = ("_callback", "_period", "_stop_event", "_thread")

    def __init__(self, period_ms: int, callback: TickCallback) -> None:
        self._callback = callback
        self._period = period_ms / 1000
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="clock-tick", daemon=True
        )
        self._thread.start()

    @property
    def active(self) -> bool:
        return not self._stop_event.is_set()

    def cancel(self) -> None:
        # Never join here: the tick callback itself may cancel its own handle.
        self._stop_event.set()

    def _run(self) -> None:
        while not self._stop_event.wait(self._period):
            try:
                self._callback()
            except Exception:
                _LOGGER.exception("Tick callback failed; stopping tick task")
                self._stop_event.set()


class ThreadingTickSource(ITickSource):
    """Runs each repeating task on its own daemon thread."""

    def schedule_repeating(self, period_ms: int, callback: TickCallback) -> ITickHandle:
        return _ThreadTickHandle(period_ms, callback)


# ── Manual (virtual time) ────────────────────────────────────────────────────


class _ManualTickHandle(ITickHandle):
    __slots__ = ("callback", "due", "period", "seq", "_active")

    def __init__(self, period_ms: int, callback: TickCallback, due: int, seq: int) -> None:
        self.callback = callback
        self.period = period_ms
        self.due = due
        self.seq = seq
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False


class ManualTickSource(ITickSource):
    """Virtual clock that only moves when :meth:`advance` is called.

    Doubles as a time source: calling the instance returns the virtual
    instant in milliseconds.  Due tasks fire in due-time order and observe
    ``now()`` equal to their own due time.
    """

    def __init__(self, start_ms: int = 0) -> None:
        self._now = start_ms
        self._handles: list[_ManualTickHandle] = []
        self._seq = itertools.count()

    def __call__(self) -> int:
        return self._now

    def now(self) -> int:
        return self._now

    @property
    def pending(self) -> int:
        """Number of repeating tasks still scheduled."""
        return sum(1 for h in self._handles if h.active)

    def schedule_repeating(self, period_ms: int, callback: TickCallback) -> ITickHandle:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        handle = _ManualTickHandle(
            period_ms, callback, self._now + period_ms, next(self._seq)
        )
        self._handles.append(handle)
        return handle

    def advance(self, ms: int) -> None:
        """Move virtual time forward by *ms*, firing every task that falls due."""
        if ms < 0:
            raise ValueError("Cannot move time backwards")
        target = self._now + ms
        while True:
            due = [h for h in self._handles if h.active and h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: (h.due, h.seq))
            self._now = handle.due
            handle.due += handle.period
            handle.callback()
        self._now = target
        self._handles = [h for h in self._handles if h.active]
