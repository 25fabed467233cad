"""Configurable defaults for new allocations and projects.

The defaults are placeholders rather than business rules: a fresh project
starts three weeks from today, runs four weeks, is called ``"New Project"``
and is worth ``20000``. Deployments override them through the ``planning``
section of a YAML file::

    planning:
      lead_time_weeks: 2
      duration_weeks: 6
      name: Untitled
      approx_value: 15000
      strict: true

Validation collects every problem before failing so a broken file can be
fixed in one pass.
"""

from __future__ import annotations

# ruff: noqa: ANN401
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Final

from hallo.engine.infra.paths import DEFAULT_CONFIG_ROOT
from hallo.engine.logging import setup_logger
from hallo.engine.utils.io import read_yaml

__all__ = [
    "DEFAULT_PLANNING_PATH",
    "MAX_VALUE",
    "PlanningConfigError",
    "PlanningDefaults",
    "ValidationSummary",
    "load_planning_defaults",
    "resolve_defaults",
    "validate_planning_mapping",
]

LOG = setup_logger(__name__)

DEFAULT_PLANNING_PATH: Final[Path] = DEFAULT_CONFIG_ROOT / "planning.yml"
SECTION: Final[str] = "planning"
MAX_VALUE: Final[int] = 2**32 - 1


class PlanningConfigError(ValueError):
    """Raised when planning defaults cannot be parsed."""

    def __init__(self, errors: list[str], source: Path | str | None = None) -> None:
        self.errors = list(errors)
        self.source = source
        where = f" in {source}" if source is not None else ""
        super().__init__(f"Invalid planning configuration{where}: " + "; ".join(self.errors))


@dataclass(frozen=True)
class PlanningDefaults:
    """Values used when a builder or allocation is created without overrides.

    Attributes:
      lead_time_weeks: Weeks between today and the default start date.
      duration_weeks: Default allocation length in weeks.
      name: Default project name.
      approx_value: Default approximate project value.
      strict: Reject inverted ranges and non-positive durations when ``True``.
    """

    lead_time_weeks: int = 3
    duration_weeks: int = 4
    name: str = "New Project"
    approx_value: int = 20000
    strict: bool = False

    @classmethod
    def from_mapping(
        cls,
        payload: Mapping[str, object],
        *,
        source: Path | str | None = None,
    ) -> PlanningDefaults:
        """Create defaults from a possibly partial mapping.

        Args:
          payload: Mapping extracted from YAML; missing keys keep their defaults.
          source: Optional file path quoted in error messages.

        Returns:
          A validated :class:`PlanningDefaults` instance.

        Raises:
          PlanningConfigError: When one or more fields are invalid.
        """

        summary = validate_planning_mapping(payload)
        for warning in summary.warnings:
            LOG.warning(warning)
        if summary.errors:
            raise PlanningConfigError(summary.errors, source)
        return cls(**summary.values)


@dataclass(slots=True)
class ValidationSummary:
    """Diagnostics produced while validating a ``planning`` mapping.

    Attributes:
      errors: Messages for fields that could not be accepted.
      warnings: Soft diagnostics such as ignored keys.
      values: Normalised fields that passed validation.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    values: dict[str, Any] = field(default_factory=dict)


def _as_int(
    value: Any,
    *,
    path: str,
    errors: list[str],
    minimum: int | None = None,
    maximum: int | None = None,
) -> int | None:
    """Validate ``value`` as integer returning it when valid."""

    if not isinstance(value, int) or isinstance(value, bool):
        errors.append(f"{path} must be an integer")
        return None
    if minimum is not None and value < minimum:
        errors.append(f"{path} must be >= {minimum}")
        return None
    if maximum is not None and value > maximum:
        errors.append(f"{path} must be <= {maximum}")
        return None
    return value


def _as_bool(value: Any, *, path: str, errors: list[str]) -> bool | None:
    """Validate ``value`` as a YAML boolean; strings such as ``"yes"`` fail."""

    if not isinstance(value, bool):
        errors.append(f"{path} must be a boolean")
        return None
    return value


def _as_text(value: Any, *, path: str, errors: list[str]) -> str | None:
    """Validate ``value`` as string; empty names are allowed."""

    if not isinstance(value, str):
        errors.append(f"{path} must be a string")
        return None
    return value


def validate_planning_mapping(payload: Mapping[str, object]) -> ValidationSummary:
    """Validate ``payload`` field by field without raising.

    Args:
      payload: Raw ``planning`` section.

    Returns:
      A :class:`ValidationSummary`; ``values`` only holds accepted fields.
    """

    summary = ValidationSummary()
    if not isinstance(payload, Mapping):
        summary.errors.append(f"{SECTION} must be a mapping")
        return summary

    known = {item.name for item in fields(PlanningDefaults)}
    for key in payload:
        if key not in known:
            summary.warnings.append(f"{SECTION}.{key} is not a recognised setting; ignoring")

    checks: dict[str, Any] = {
        "lead_time_weeks": lambda v, p: _as_int(v, path=p, errors=summary.errors),
        "duration_weeks": lambda v, p: _as_int(v, path=p, errors=summary.errors, minimum=0),
        "name": lambda v, p: _as_text(v, path=p, errors=summary.errors),
        "approx_value": lambda v, p: _as_int(
            v, path=p, errors=summary.errors, minimum=0, maximum=MAX_VALUE
        ),
        "strict": lambda v, p: _as_bool(v, path=p, errors=summary.errors),
    }
    for key, check in checks.items():
        if key not in payload:
            continue
        value = check(payload[key], f"{SECTION}.{key}")
        if value is not None:
            summary.values[key] = value
    return summary


def load_planning_defaults(path: Path | str | None = None) -> PlanningDefaults:
    """Load :class:`PlanningDefaults` from a YAML file.

    Args:
      path: YAML document to read; ``configs/planning.yml`` when omitted. A
        missing file yields the built-in defaults.

    Returns:
      The parsed defaults.

    Raises:
      PlanningConfigError: When the document or the ``planning`` section is
        malformed.
    """

    target = Path(path) if path is not None else DEFAULT_PLANNING_PATH
    if not target.exists():
        LOG.debug("No planning config at %s; using built-in defaults", target)
        return PlanningDefaults()

    data = read_yaml(target)
    if data is None:
        return PlanningDefaults()
    if not isinstance(data, Mapping):
        raise PlanningConfigError(["document root must be a mapping"], target)
    section = data.get(SECTION, {})
    if section is None:
        section = {}
    defaults = PlanningDefaults.from_mapping(section, source=target)  # type: ignore[arg-type]
    LOG.debug("Loaded planning defaults from %s: %s", target, defaults)
    return defaults


def resolve_defaults(defaults: PlanningDefaults | None) -> PlanningDefaults:
    """Return ``defaults`` or the built-in :class:`PlanningDefaults` when ``None``."""

    return PlanningDefaults() if defaults is None else defaults
