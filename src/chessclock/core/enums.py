"""Core enumerations for the clock domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Player(IntEnum):
    """Seat at the clock. Plain ``0`` / ``1`` are accepted everywhere."""

    FIRST = 0
    SECOND = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Mode(StrEnum):
    """Time-control policy of a stage."""

    FISCHER = "Fischer"
    BRONSTEIN = "Bronstein"
    DELAY = "Delay"
    HOURGLASS = "Hourglass"


class Status(StrEnum):
    """Clock lifecycle states."""

    READY = "ready"
    LIVE = "live"
    PAUSED = "paused"
    DONE = "done"
