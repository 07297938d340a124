"""Qt tick source so the clock can run on a Qt event loop."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer

from chessclock.clock.interfaces import ITickHandle, ITickSource, TickCallback


class _QtTickHandle(ITickHandle):
    __slots__ = ("_timer",)

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtTickSource(ITickSource):
    """Schedules ticks with ``QTimer`` on the calling thread's event loop.

    Ticks and explicit clock calls then share the GUI thread, so no
    cross-thread handoff is needed.
    """

    __slots__ = ("_parent",)

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule_repeating(self, period_ms: int, callback: TickCallback) -> ITickHandle:
        timer = QTimer(self._parent)
        timer.setInterval(period_ms)
        timer.timeout.connect(callback)
        timer.start()
        return _QtTickHandle(timer)
