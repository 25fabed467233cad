"""Time sources used to anchor default allocations.

Defaults are computed relative to "today" in UTC. Callers that need
deterministic behaviour (tests, replayed scenarios) pass a :class:`FixedClock`
instead of relying on the process clock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import UTC, date, datetime

__all__ = ["Clock", "FixedClock", "SystemClock", "DEFAULT_CLOCK", "resolve_clock"]


class Clock(ABC):
    """Source of the current calendar day."""

    @abstractmethod
    def today(self) -> date:
        """Return the current day in UTC."""


class SystemClock(Clock):
    """Clock backed by the interpreter's wall clock."""

    def today(self) -> date:
        return datetime.now(UTC).date()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """Clock that always reports the same day."""

    __slots__ = ("_day",)

    def __init__(self, day: date) -> None:
        if isinstance(day, datetime) or not isinstance(day, date):
            raise TypeError(f"FixedClock expects a date, got {type(day).__name__}")
        self._day = day

    def today(self) -> date:
        return self._day

    def __repr__(self) -> str:
        return f"FixedClock({self._day.isoformat()})"


DEFAULT_CLOCK: Clock = SystemClock()


def resolve_clock(clock: Clock | None) -> Clock:
    """Return ``clock`` or :data:`DEFAULT_CLOCK` when ``None``."""

    return DEFAULT_CLOCK if clock is None else clock
