"""Exception hierarchy for the clock package."""

from __future__ import annotations


class ClockError(Exception):
    """Base class for all clock errors."""


class StageError(ClockError, ValueError):
    """A stage or stage table is malformed."""


class ConfigNotFoundError(ClockError, KeyError):
    """No preset is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No clock preset named {self.name!r}"
