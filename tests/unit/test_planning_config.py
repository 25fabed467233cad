"""Tests for loading and validating planning defaults."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from hallo.engine.planning import (
    MAX_VALUE,
    PlanningConfigError,
    PlanningDefaults,
    load_planning_defaults,
    validate_planning_mapping,
)


def _write(path: Path, payload: object) -> Path:
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    return path


def test_builtin_defaults() -> None:
    defaults = PlanningDefaults()
    assert defaults.lead_time_weeks == 3
    assert defaults.duration_weeks == 4
    assert defaults.name == "New Project"
    assert defaults.approx_value == 20000
    assert defaults.strict is False


def test_repository_config_matches_builtin_defaults() -> None:
    path = Path(__file__).resolve().parents[2] / "configs" / "planning.yml"
    assert load_planning_defaults(path) == PlanningDefaults()


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    assert load_planning_defaults(tmp_path / "absent.yml") == PlanningDefaults()


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "planning.yml"
    path.write_text("", encoding="utf-8")
    assert load_planning_defaults(path) == PlanningDefaults()


def test_partial_override(tmp_path: Path) -> None:
    path = _write(tmp_path / "planning.yml", {"planning": {"duration_weeks": 6, "strict": True}})
    defaults = load_planning_defaults(path)
    assert defaults.duration_weeks == 6
    assert defaults.strict is True
    assert defaults.lead_time_weeks == 3


def test_collects_every_error(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "planning.yml",
        {
            "planning": {
                "lead_time_weeks": "soon",
                "duration_weeks": -1,
                "approx_value": 1.5,
                "strict": "yes",
                "name": 42,
            }
        },
    )
    with pytest.raises(PlanningConfigError) as excinfo:
        load_planning_defaults(path)
    errors = excinfo.value.errors
    assert "planning.lead_time_weeks must be an integer" in errors
    assert "planning.duration_weeks must be >= 0" in errors
    assert "planning.approx_value must be an integer" in errors
    assert "planning.strict must be a boolean" in errors
    assert "planning.name must be a string" in errors
    assert str(path) in str(excinfo.value)


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path / "planning.yml", [1, 2, 3])
    with pytest.raises(PlanningConfigError):
        load_planning_defaults(path)


def test_non_mapping_section_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path / "planning.yml", {"planning": ["strict"]})
    with pytest.raises(PlanningConfigError, match="planning must be a mapping"):
        load_planning_defaults(path)


def test_unknown_keys_are_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        defaults = PlanningDefaults.from_mapping({"colour": "blue", "approx_value": 0})
    assert defaults.approx_value == 0
    assert "planning.colour is not a recognised setting" in caplog.text


def test_validate_does_not_raise() -> None:
    summary = validate_planning_mapping({"approx_value": -5, "name": "ok"})
    assert summary.errors == ["planning.approx_value must be >= 0"]
    assert summary.values == {"name": "ok"}


def test_booleans_are_not_integers() -> None:
    summary = validate_planning_mapping({"duration_weeks": True})
    assert summary.errors == ["planning.duration_weeks must be an integer"]


def test_approx_value_is_capped_at_unsigned_32_bit(tmp_path: Path) -> None:
    path = _write(tmp_path / "planning.yml", {"planning": {"approx_value": MAX_VALUE + 1}})
    with pytest.raises(PlanningConfigError) as excinfo:
        load_planning_defaults(path)
    assert excinfo.value.errors == [f"planning.approx_value must be <= {MAX_VALUE}"]

    path = _write(tmp_path / "planning.yml", {"planning": {"approx_value": MAX_VALUE}})
    assert load_planning_defaults(path).approx_value == MAX_VALUE
