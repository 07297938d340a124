"""Time-control stages and stage tables.

A stage table is an ordered sequence of :class:`Stage` records.  The first
stage is the initial one; later stages carry a ``move`` count and become
active for a player once that player has completed exactly that many turns.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from chessclock.core.enums import Mode
from chessclock.errors import StageError


@dataclass(frozen=True, slots=True)
class Stage:
    """One segment of a time control.

    Args:
        time: Starting allotment in milliseconds for player 0 and player 1.
        mode: Policy applied while the stage is active.
        increment: Increment, Bronstein cap or delay in milliseconds.
        move: Move count at which the stage starts (``None`` = initial).
        index: Position in the table, assigned by :func:`index_stages`.
    """

    time: tuple[int, int]
    mode: Mode
    increment: int = 0
    move: int | None = None
    index: int | None = None

    def __post_init__(self) -> None:
        try:
            first, second = self.time
        except (TypeError, ValueError):
            raise StageError(f"Stage time must be a pair, got {self.time!r}") from None
        if first < 0 or second < 0:
            raise StageError(f"Stage time must be non-negative, got {self.time!r}")
        if self.increment < 0:
            raise StageError(f"Stage increment must be non-negative, got {self.increment}")
        if self.move is not None and self.move < 1:
            raise StageError(f"Stage move must be >= 1, got {self.move}")
        try:
            mode = Mode(self.mode)
        except ValueError:
            raise StageError(f"Unknown stage mode {self.mode!r}") from None

        object.__setattr__(self, "time", (first, second))
        object.__setattr__(self, "mode", mode)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Stage:
        """Build a stage from its mapping form (``time``, ``mode``, ...)."""
        return cls(
            time=tuple(data["time"]),  # type: ignore[arg-type]
            mode=data["mode"],
            increment=data.get("increment", 0),
            move=data.get("move"),
            index=data.get("index"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "time": list(self.time),
            "mode": str(self.mode),
            "increment": self.increment,
        }
        if self.move is not None:
            data["move"] = self.move
        return data

    def describe(self) -> str:
        """Short human label such as ``"5m+5s Fischer"``."""
        first, second = (_format_minutes(t) for t in self.time)
        base = first if first == second else f"{first}/{second}"
        if self.increment:
            base = f"{base}+{self.increment / 1000:g}s"
        label = f"{base} {self.mode}"
        if self.move is not None:
            return f"from move {self.move}: {label}"
        return label


StageLike = Stage | Mapping[str, Any]


def as_stage(stage: StageLike) -> Stage:
    if isinstance(stage, Stage):
        return stage
    return Stage.from_dict(stage)


def index_stages(stages: Iterable[StageLike]) -> tuple[Stage, ...]:
    """Return *stages* as a tuple with ``index`` set by configuration order."""
    table = tuple(replace(as_stage(s), index=i) for i, s in enumerate(stages))
    if not table:
        raise StageError("Stage table must contain at least one stage")
    return table


def find_stage(stages: Sequence[Stage], move: int) -> Stage | None:
    """First stage whose ``move`` equals *move*, or ``None``."""
    for stage in stages:
        if stage.move == move:
            return stage
    return None


def _format_minutes(ms: int) -> str:
    minutes = ms / 60_000
    if minutes >= 1:
        return f"{minutes:g}m"
    return f"{ms / 1000:g}s"
