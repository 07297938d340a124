"""Read-only snapshot of a clock."""

from __future__ import annotations

from dataclasses import dataclass

from chessclock.core.enums import Player, Status
from chessclock.core.stage import Stage


@dataclass(frozen=True, slots=True)
class ClockState:
    """Immutable view of everything the clock tracks.

    Times are milliseconds.  ``log[p]`` holds one entry per turn of player
    *p*, the last one growing while that player is on move.
    """

    name: str | None
    move: tuple[int, int]
    remaining_time: tuple[int, int]
    last_player: Player | None
    white: Player | None
    log: tuple[tuple[int, ...], tuple[int, ...]]
    status: Status
    stage: tuple[Stage, Stage]
    timestamp: int | None
    stages: tuple[Stage, ...]

    @property
    def is_running(self) -> bool:
        return self.status is Status.LIVE

    @property
    def active_player(self) -> Player | None:
        """Player whose time is being counted, if any."""
        if self.last_player is None or self.status not in (Status.LIVE, Status.PAUSED):
            return None
        return self.last_player.opposite

    def remaining(self, player: int) -> int:
        return self.remaining_time[Player(player)]
