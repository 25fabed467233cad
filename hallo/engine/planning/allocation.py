"""Date ranges describing when a project is active.

An :class:`Allocation` is a pair of UTC calendar days. Activity is tested with
an exclusive lower bound and an inclusive upper bound, so a project allocated
from the 8th to the 10th is active on the 9th and the 10th but not on the 8th.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from hallo.engine.logging import setup_logger
from hallo.engine.planning.config import PlanningDefaults, resolve_defaults
from hallo.engine.planning.traits import InvalidDatesError, TimeBound
from hallo.engine.utils.clock import Clock, resolve_clock

__all__ = ["Allocation", "ensure_day", "ensure_duration", "shift_day"]

LOG = setup_logger(__name__)


def ensure_day(value: object, *, label: str = "date") -> date:
    """Return ``value`` when it is a calendar day, raise ``TypeError`` otherwise."""

    # datetime subclasses date but carries a time-of-day component.
    if isinstance(value, datetime) or not isinstance(value, date):
        raise TypeError(f"{label} must be a datetime.date, got {type(value).__name__}")
    return value


def ensure_duration(value: object, *, label: str = "duration") -> timedelta:
    """Return ``value`` when it is a whole-day :class:`timedelta`."""

    if not isinstance(value, timedelta):
        raise TypeError(f"{label} must be a datetime.timedelta, got {type(value).__name__}")
    if value.seconds or value.microseconds:
        raise ValueError(f"{label} must be a whole number of days, got {value}")
    return value


def shift_day(day: date, delta: timedelta, *, label: str = "end_date") -> date:
    """Return ``day + delta``, raising ``ValueError`` when it leaves the calendar."""

    try:
        return day + delta
    except OverflowError as exc:
        raise ValueError(f"{label} out of range: {day} + {delta.days} days") from exc


class Allocation(TimeBound):
    """Start and end day of a piece of work.

    Attributes:
      start_date: Day the allocation starts. Activity begins the day after.
      end_date: Last active day.

    Nothing forces ``start_date`` to precede ``end_date``. Inverted ranges
    are stored as given and report a negative :meth:`duration` unless the
    setters are called with ``strict=True``.
    """

    def __init__(self, start_date: date, end_date: date) -> None:
        self._start_date = ensure_day(start_date, label="start_date")
        self._end_date = ensure_day(end_date, label="end_date")

    @classmethod
    def default(
        cls,
        clock: Clock | None = None,
        defaults: PlanningDefaults | None = None,
    ) -> Allocation:
        """Return a placeholder allocation anchored on ``clock``'s today.

        Args:
          clock: Time source; the system UTC clock when omitted.
          defaults: Lead time and duration; :class:`PlanningDefaults` when
            omitted (3 weeks from today, lasting 4 weeks).

        Returns:
          A new :class:`Allocation`.

        Raises:
          ValueError: If the computed start or end falls outside the
            supported calendar (``date.min`` to ``date.max``).
        """

        settings = resolve_defaults(defaults)
        start = shift_day(
            resolve_clock(clock).today(),
            timedelta(weeks=settings.lead_time_weeks),
            label="start_date",
        )
        return cls(start, shift_day(start, timedelta(weeks=settings.duration_weeks)))

    @classmethod
    def from_duration(cls, start_date: date, duration: timedelta) -> Allocation:
        """Build an allocation starting on ``start_date`` and lasting ``duration``.

        Raises:
          ValueError: If ``start_date + duration`` falls outside the supported
            calendar.
        """

        start = ensure_day(start_date, label="start_date")
        return cls(start, shift_day(start, ensure_duration(duration)))

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def end_date(self) -> date:
        return self._end_date

    def set_start_date(self, value: date, *, strict: bool = False) -> date:
        """Overwrite the start date.

        Args:
          value: New start day.
          strict: Reject a start falling after the current end.

        Returns:
          The stored start date.

        Raises:
          InvalidDatesError: When ``strict`` and ``value > end_date``. The
            allocation is left unchanged.
        """

        day = ensure_day(value, label="start_date")
        if strict and day > self._end_date:
            LOG.warning("Rejected start date %s after end date %s", day, self._end_date)
            raise InvalidDatesError(day, self._end_date)
        self._start_date = day
        return self._start_date

    def set_end_date(self, value: date, *, strict: bool = False) -> date:
        """Overwrite the end date.

        Raises:
          InvalidDatesError: When ``strict`` and ``value < start_date``. The
            allocation is left unchanged.
        """

        day = ensure_day(value, label="end_date")
        if strict and day < self._start_date:
            LOG.warning("Rejected end date %s before start date %s", day, self._start_date)
            raise InvalidDatesError(self._start_date, day)
        self._end_date = day
        return self._end_date

    def duration(self) -> timedelta:
        """Return ``end_date - start_date``; negative for inverted ranges."""

        return self._end_date - self._start_date

    def is_active_on(self, day: date) -> bool:
        """Return ``True`` when ``start_date < day <= end_date``."""

        day = ensure_day(day)
        if day <= self._start_date:
            return False
        if day > self._end_date:
            return False
        return True

    def copy(self) -> Allocation:
        return Allocation(self._start_date, self._end_date)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Allocation):
            return NotImplemented
        return (self._start_date, self._end_date) == (other._start_date, other._end_date)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Allocation(start_date={self._start_date.isoformat()}, "
            f"end_date={self._end_date.isoformat()})"
        )

    def __str__(self) -> str:
        return f"{self._start_date.isoformat()} to {self._end_date.isoformat()}"
