"""Two-player countdown clock with multi-stage time controls.

The clock is driven two ways: explicit calls (``push``, ``pause``, ...) and
a repeating tick task that charges elapsed time to the player on move.
Both paths share :meth:`Clock._record` and run under one lock.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from functools import partial
from typing import Protocol

from chessclock.clock.interfaces import ITickHandle, ITickSource, TimeSource, monotonic_ms
from chessclock.clock.scheduling import ManualTickSource, ThreadingTickSource
from chessclock.clock.state import ClockState
from chessclock.core.enums import Player, Status
from chessclock.core.policy import recording_charge, turn_adjustment
from chessclock.core.stage import StageLike, find_stage, index_stages
from chessclock.errors import ClockError
from chessclock.presets.registry import BUILTIN_PRESETS, DEFAULT_PRESET

_LOGGER = logging.getLogger(__name__)

UPDATE_INTERVAL = 100  # ms

StateCallback = Callable[[ClockState], None]


class PresetLike(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def stages(self) -> Iterable[StageLike]: ...


class Clock:
    """Chess clock for two players.

    Args:
        stages: Stage table; defaults to the ``"Fischer Blitz 5|0"`` preset.
        name: Optional label carried into the state snapshot.
        update_interval: Tick period in milliseconds.
        callback: Observer called with a fresh :class:`ClockState` after
            every state change and every tick.
        tick_source: Scheduler for the tick task.  Defaults to a
            background thread per task.
        time_source: Millisecond clock.  Defaults to the monotonic clock,
            or to *tick_source* itself when it is a :class:`ManualTickSource`.
    """

    __slots__ = (
        "_name",
        "_stages",
        "_move",
        "_remaining",
        "_last_player",
        "_white",
        "_log",
        "_status",
        "_stage",
        "_timestamp",
        "_update_interval",
        "_callback",
        "_tick_source",
        "_time_source",
        "_handle",
        "_lock",
    )

    def __init__(
        self,
        stages: Iterable[StageLike] | None = None,
        *,
        name: str | None = None,
        update_interval: int = UPDATE_INTERVAL,
        callback: StateCallback | None = None,
        tick_source: ITickSource | None = None,
        time_source: TimeSource | None = None,
    ) -> None:
        if stages is None:
            stages = BUILTIN_PRESETS[DEFAULT_PRESET]
            if name is None:
                name = DEFAULT_PRESET
        if (
            isinstance(update_interval, bool)
            or not isinstance(update_interval, int)
            or update_interval <= 0
        ):
            raise ClockError(
                f"update_interval must be a positive integer, got {update_interval!r}"
            )
        if tick_source is None:
            tick_source = ThreadingTickSource()
        if time_source is None:
            if isinstance(tick_source, ManualTickSource):
                time_source = tick_source
            else:
                time_source = monotonic_ms

        self._name = name
        self._stages = index_stages(stages)
        self._update_interval = update_interval
        self._callback = callback
        self._tick_source = tick_source
        self._time_source = time_source
        self._handle: ITickHandle | None = None
        self._lock = threading.RLock()
        self._init_game()

    @classmethod
    def from_preset(cls, preset: PresetLike, **kwargs: object) -> Clock:
        """Build a clock from a registry preset."""
        return cls(preset.stages, name=preset.name, **kwargs)  # type: ignore[arg-type]

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> ClockState:
        """Snapshot of the clock; never shares the internal containers."""
        with self._lock:
            return ClockState(
                name=self._name,
                move=(self._move[0], self._move[1]),
                remaining_time=(self._remaining[0], self._remaining[1]),
                last_player=self._last_player,
                white=self._white,
                log=(tuple(self._log[0]), tuple(self._log[1])),
                status=self._status,
                stage=(self._stage[0], self._stage[1]),
                timestamp=self._timestamp,
                stages=self._stages,
            )

    @property
    def status(self) -> Status:
        return self._status

    @property
    def active_player(self) -> Player | None:
        """Player whose time is currently being counted."""
        if self._last_player is None or self._status not in (Status.LIVE, Status.PAUSED):
            return None
        return self._last_player.opposite

    @property
    def update_interval(self) -> int:
        return self._update_interval

    # ── Operations ───────────────────────────────────────────────────────

    def push(self, player: int) -> None:
        """End *player*'s turn and start the opponent's time."""
        player = Player(player)
        with self._lock:
            if self._status in (Status.DONE, Status.PAUSED):
                return
            if self._last_player == player:
                return
            if self._status is Status.READY:
                self._status = Status.LIVE
                self._white = player.opposite
            self._cancel_tick()
            self._last_player = player

            if self._record(player):
                self._notify()
                return

            self._move[player] += 1
            self._apply_increment(player)
            self._update_stage(player)

            opponent = player.opposite
            self._log[opponent].append(0)
            self._schedule_tick(opponent)
            _LOGGER.debug(
                "Player %s pushed (move %d), remaining %s",
                player,
                self._move[player],
                self._remaining,
            )
            self._notify()

    def pause(self) -> None:
        """Suspend the running clock."""
        with self._lock:
            if self._status is not Status.LIVE or self._last_player is None:
                return
            self._cancel_tick()
            if not self._record(self._last_player.opposite):
                self._status = Status.PAUSED
                _LOGGER.debug("Clock paused, remaining %s", self._remaining)
            self._notify()

    def resume(self) -> None:
        """Restart a paused clock without charging the pause to anyone."""
        with self._lock:
            if self._status is not Status.PAUSED or self._last_player is None:
                return
            self._timestamp = self._time_source()
            self._schedule_tick(self._last_player.opposite)
            self._status = Status.LIVE
            _LOGGER.debug("Clock resumed")
            self._notify()

    def add_time(self, player: int, ms: int) -> None:
        """Give *player* extra time (or take it away with negative *ms*)."""
        player = Player(player)
        with self._lock:
            self._remaining[player] = max(0, self._remaining[player] + ms)
            self._notify()

    def reset(self, preset: PresetLike | None = None) -> None:
        """Start over, optionally with a different preset."""
        with self._lock:
            if preset is not None:
                self._stages = index_stages(preset.stages)
                self._name = preset.name
            self._cancel_tick()
            self._init_game()
            _LOGGER.debug("Clock reset to %r", self._name)
            self._notify()

    def close(self) -> None:
        """Cancel the tick task, if any."""
        with self._lock:
            self._cancel_tick()

    # ── Internal ─────────────────────────────────────────────────────────

    def _init_game(self) -> None:
        first = self._stages[0]
        self._move = [0, 0]
        self._remaining = list(first.time)
        self._log: tuple[list[int], list[int]] = ([], [])
        self._stage = [first, first]
        self._last_player: Player | None = None
        self._white: Player | None = None
        self._timestamp: int | None = None
        self._status = Status.READY

    def _record(self, player: Player) -> bool:
        """Charge time elapsed since the last recording to *player*.

        Returns True if *player* ran out of time.
        """
        before = self._timestamp
        after = self._timestamp = self._time_source()

        if before is not None:
            diff = after - before
            log = self._log[player]
            log[-1] += diff
            self._remaining[player] -= recording_charge(self._stage[player], log[-1], diff)

        if self._remaining[player] <= 0:
            self._remaining[player] = 0
            self._status = Status.DONE
            self._cancel_tick()
            _LOGGER.debug("Player %s ran out of time", player)
            return True
        return False

    def _apply_increment(self, player: Player) -> None:
        log = self._log[player]
        spent = log[-1] if log else 0
        own, opponent = turn_adjustment(self._stage[player], spent)
        self._remaining[player] += own
        self._remaining[player.opposite] += opponent

    def _update_stage(self, player: Player) -> None:
        stage = find_stage(self._stages, self._move[player])
        if stage is None:
            return
        self._remaining[player] += stage.time[player]
        self._stage[player] = stage
        _LOGGER.debug("Player %s entered stage %s: %s", player, stage.index, stage.describe())

    def _tick(self, player: Player) -> None:
        with self._lock:
            if self._status is not Status.LIVE or self.active_player != player:
                return
            self._record(player)
            self._notify()

    def _schedule_tick(self, player: Player) -> None:
        self._cancel_tick()
        self._handle = self._tick_source.schedule_repeating(
            self._update_interval, partial(self._tick, player)
        )

    def _cancel_tick(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _notify(self) -> None:
        if self._callback is not None:
            self._callback(self.state)

    def __repr__(self) -> str:
        return (
            f"Clock(name={self._name!r}, status={self._status}, "
            f"remaining={tuple(self._remaining)})"
        )
