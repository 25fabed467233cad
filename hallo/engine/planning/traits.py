"""Capabilities shared by planning entities and the errors they may raise."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

__all__ = [
    "Contribution",
    "InvalidDatesError",
    "TimeBound",
    "TimeBoundError",
]


class TimeBoundError(Exception):
    """Base class for failures while changing a date range."""


class InvalidDatesError(TimeBoundError, ValueError):
    """Raised when a start/end update would leave the range inverted."""

    def __init__(self, start_date: date | None = None, end_date: date | None = None) -> None:
        self.start_date = start_date
        self.end_date = end_date
        super().__init__("Start and end dates are invalid. Go double-check.")


class TimeBound(ABC):
    """Entity owning a start and an end date."""

    @property
    @abstractmethod
    def start_date(self) -> date:
        """First day of the range (exclusive when testing activity)."""

    @property
    @abstractmethod
    def end_date(self) -> date:
        """Last day of the range (inclusive when testing activity)."""

    @abstractmethod
    def set_start_date(self, value: date, *, strict: bool = False) -> date:
        """Overwrite the start date and return the stored value."""

    @abstractmethod
    def set_end_date(self, value: date, *, strict: bool = False) -> date:
        """Overwrite the end date and return the stored value."""


class Contribution(ABC):
    """Entity that contributes a monetary value on the days it is active."""

    @abstractmethod
    def get_contribution_on(self, day: date) -> int:
        """Return the value contributed on ``day`` (zero when inactive)."""
