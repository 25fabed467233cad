"""Projects and the fluent builder that assembles them.

A :class:`Project` is a piece of work we might do in the future. Every value
it carries is approximate: the monetary value is a rough figure and the
allocation is a best guess of when the work happens.

Example::

    project = (
        ProjectBuilder.default()
        .name("p1")
        .duration_weeks(3)
        .start_date(date(2024, 5, 6))
        .value(5000)
        .build()
    )
    project.get_contribution_on(date(2024, 5, 10))  # -> 5000
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta

from hallo.engine.logging import setup_logger
from hallo.engine.planning.allocation import Allocation, ensure_day, ensure_duration
from hallo.engine.planning.config import MAX_VALUE, PlanningDefaults, resolve_defaults
from hallo.engine.planning.traits import Contribution
from hallo.engine.utils.clock import Clock

__all__ = [
    "MAX_VALUE",
    "Project",
    "ProjectBuilder",
    "ProjectBuilderError",
    "ZeroLengthDuration",
]

LOG = setup_logger(__name__)


class ProjectBuilderError(Exception):
    """Base class for failures raised by :meth:`ProjectBuilder.build`."""


class ZeroLengthDuration(ProjectBuilderError, ValueError):
    """Raised by strict builders when the allocation has no positive length."""

    def __init__(self, duration: timedelta | None = None) -> None:
        self.duration = duration
        super().__init__("Project has no duration.")


def _ensure_value(value: object) -> int:
    """Return ``value`` when it fits an unsigned 32-bit count."""

    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"value must be >= 0, got {value}")
    if value > MAX_VALUE:
        raise ValueError(f"value must be <= {MAX_VALUE}, got {value}")
    return value


@dataclass(frozen=True)
class Project(Contribution):
    """Named piece of work with an approximate value and an allocation.

    Instances are immutable: fields cannot be reassigned and
    :meth:`allocation` hands out copies. Use :class:`ProjectBuilder` to
    construct them.

    Attributes:
      name: Label used when rendering the project.
      approx_value: Approximate value, an unsigned count up to
        :data:`MAX_VALUE`.
    """

    name: str
    approx_value: int
    _allocation: Allocation = field(hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"name must be a str, got {type(self.name).__name__}")
        if not isinstance(self._allocation, Allocation):
            raise TypeError(
                f"allocation must be an Allocation, got {type(self._allocation).__name__}"
            )
        _ensure_value(self.approx_value)
        # The project owns its range; callers keep no handle on it.
        object.__setattr__(self, "_allocation", self._allocation.copy())

    @classmethod
    def default(
        cls,
        clock: Clock | None = None,
        defaults: PlanningDefaults | None = None,
    ) -> Project:
        """Return the project a default builder would produce."""

        return ProjectBuilder.default(clock, defaults).build()

    def duration(self) -> timedelta:
        """Return the approximate duration of the project."""

        return self._allocation.duration()

    def value(self) -> int:
        """Return the approximate value of the project."""

        return self.approx_value

    def allocation(self) -> Allocation:
        """Return a copy of the project's allocation."""

        return self._allocation.copy()

    def get_contribution_on(self, day: date) -> int:
        """Return the project's value when it is active on ``day``, else ``0``."""

        if self._allocation.is_active_on(day):
            return self.approx_value
        return 0

    def __str__(self) -> str:
        return f"{self.name} ({self._allocation}) {self.value()}"


class ProjectBuilder:
    """Fluent constructor for :class:`Project`.

    Each setter updates the builder in place and returns it so calls can be
    chained. :meth:`build` snapshots the current state; later changes to the
    builder never leak into projects already built.

    Args:
      clock: Time source anchoring the default allocation.
      defaults: Initial name, value and allocation shape.
      strict: Override ``defaults.strict``. Strict builders refuse to build a
        project whose duration is zero or negative.
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        defaults: PlanningDefaults | None = None,
        strict: bool | None = None,
    ) -> None:
        settings = resolve_defaults(defaults)
        self._allocation = Allocation.default(clock, settings)
        self._name = settings.name
        self._value = settings.approx_value
        self._strict = settings.strict if strict is None else bool(strict)

    @classmethod
    def default(
        cls,
        clock: Clock | None = None,
        defaults: PlanningDefaults | None = None,
    ) -> ProjectBuilder:
        return cls(clock=clock, defaults=defaults)

    @property
    def strict(self) -> bool:
        return self._strict

    def start_date(self, day: date) -> ProjectBuilder:
        """Move the project to start on ``day`` keeping its current duration."""

        self._allocation = Allocation.from_duration(
            ensure_day(day, label="start_date"), self._allocation.duration()
        )
        return self

    def duration(self, duration: timedelta) -> ProjectBuilder:
        """Set the project's duration keeping its current start date."""

        self._allocation = Allocation.from_duration(
            self._allocation.start_date, ensure_duration(duration)
        )
        return self

    def duration_weeks(self, weeks: int) -> ProjectBuilder:
        """Set the project's duration in weeks."""

        if not isinstance(weeks, int) or isinstance(weeks, bool):
            raise TypeError(f"weeks must be an int, got {type(weeks).__name__}")
        return self.duration(timedelta(weeks=weeks))

    def value(self, value: int) -> ProjectBuilder:
        """Set the project's approximate value; zero is allowed."""

        self._value = _ensure_value(value)
        return self

    def name(self, name: str) -> ProjectBuilder:
        if not isinstance(name, str):
            raise TypeError(f"name must be a str, got {type(name).__name__}")
        self._name = name
        return self

    def build(self) -> Project:
        """Build the project. Use at the end of the call chain.

        Raises:
          ZeroLengthDuration: When the builder is strict and the allocation's
            duration is zero or negative.
        """

        duration = self._allocation.duration()
        if self._strict and duration <= timedelta(0):
            LOG.warning(
                "Refusing to build project %r with duration %s",
                self._name,
                duration,
                extra={"project": self._name},
            )
            raise ZeroLengthDuration(duration)
        project = Project(self._name, self._value, self._allocation)
        LOG.debug(
            "Built project %s",
            project,
            extra={
                "project": self._name,
                "start_date": self._allocation.start_date,
                "end_date": self._allocation.end_date,
            },
        )
        return project

    def __repr__(self) -> str:
        return (
            f"ProjectBuilder(name={self._name!r}, value={self._value}, "
            f"allocation={self._allocation!r}, strict={self._strict})"
        )
