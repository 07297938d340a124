"""Increment and decrement rules for each time-control mode.

All functions are pure: they take the stage and elapsed-time figures and
return millisecond deltas.  The clock engine decides whom to apply them to.
"""

from __future__ import annotations

from chessclock.core.enums import Mode
from chessclock.core.stage import Stage


def delay_charge(elapsed: int, diff: int, delay: int) -> int:
    """Milliseconds to charge for *diff* under a delay of *delay*.

    *elapsed* is the turn's running total, already including *diff*.
    Only time past the delay window is charged.
    """
    if elapsed - diff > delay:
        return diff
    if elapsed > delay:
        return elapsed - delay
    return 0


def recording_charge(stage: Stage, elapsed: int, diff: int) -> int:
    """Milliseconds to subtract from the timed player for one recording."""
    if stage.mode is Mode.DELAY:
        return delay_charge(elapsed, diff, stage.increment)
    return diff


def turn_adjustment(stage: Stage, spent: int) -> tuple[int, int]:
    """``(mover_delta, opponent_delta)`` applied when a turn ends.

    *spent* is the time the mover consumed on the turn just finished.
    """
    if stage.mode is Mode.FISCHER:
        return stage.increment, 0
    if stage.mode is Mode.BRONSTEIN:
        return min(spent, stage.increment), 0
    if stage.mode is Mode.HOURGLASS:
        return 0, spent
    # Delay already took effect while recording.
    return 0, 0
