"""Time-bounded projects for scenario planning."""

from .allocation import Allocation, ensure_day, ensure_duration, shift_day
from .config import (
    DEFAULT_PLANNING_PATH,
    MAX_VALUE,
    PlanningConfigError,
    PlanningDefaults,
    ValidationSummary,
    load_planning_defaults,
    validate_planning_mapping,
)
from .projects import Project, ProjectBuilder, ProjectBuilderError, ZeroLengthDuration
from .schedule import contribution_schedule
from .traits import Contribution, InvalidDatesError, TimeBound, TimeBoundError

__all__ = [
    "Allocation",
    "Contribution",
    "DEFAULT_PLANNING_PATH",
    "MAX_VALUE",
    "InvalidDatesError",
    "PlanningConfigError",
    "PlanningDefaults",
    "Project",
    "ProjectBuilder",
    "ProjectBuilderError",
    "TimeBound",
    "TimeBoundError",
    "ValidationSummary",
    "ZeroLengthDuration",
    "contribution_schedule",
    "ensure_day",
    "ensure_duration",
    "load_planning_defaults",
    "shift_day",
    "validate_planning_mapping",
]
