from __future__ import annotations

from datetime import date, timedelta

import pandas as pd
import pytest

from hallo.engine.planning import (
    MAX_VALUE,
    Contribution,
    Project,
    ProjectBuilder,
    contribution_schedule,
)


def _project() -> Project:
    return (
        ProjectBuilder.default()
        .name("p1")
        .value(5000)
        .start_date(date(2014, 7, 8))
        .duration_weeks(1)
        .build()
    )


def test_schedule_matches_point_queries() -> None:
    project = _project()
    schedule = contribution_schedule(project, date(2014, 7, 6), date(2014, 7, 17))
    assert schedule.name == "p1"
    assert schedule.index.name == "date"
    assert schedule.dtype == "int64"
    assert len(schedule) == 12
    for stamp, value in schedule.items():
        assert value == project.get_contribution_on(stamp.date())


def test_schedule_window_boundaries() -> None:
    schedule = contribution_schedule(_project(), date(2014, 7, 8), date(2014, 7, 16))
    assert schedule[pd.Timestamp("2014-07-08")] == 0
    assert schedule[pd.Timestamp("2014-07-09")] == 5000
    assert schedule[pd.Timestamp("2014-07-15")] == 5000
    assert schedule[pd.Timestamp("2014-07-16")] == 0
    assert int(schedule.sum()) == 7 * 5000


def test_schedule_supports_other_frequencies() -> None:
    schedule = contribution_schedule(_project(), date(2014, 7, 1), date(2014, 7, 29), freq="7D")
    assert list(schedule.index.day) == [1, 8, 15, 22, 29]
    assert list(schedule) == [0, 0, 5000, 0, 0]


def test_schedule_accepts_any_contribution() -> None:
    class Flat(Contribution):
        def get_contribution_on(self, day: date) -> int:
            return 3

    schedule = contribution_schedule(Flat(), date(2020, 1, 1), date(2020, 1, 3))
    assert schedule.name is None
    assert list(schedule) == [3, 3, 3]


def test_schedule_single_day() -> None:
    schedule = contribution_schedule(_project(), date(2014, 7, 10), date(2014, 7, 10))
    assert list(schedule) == [5000]


def test_schedule_rejects_reversed_range() -> None:
    with pytest.raises(ValueError):
        contribution_schedule(_project(), date(2014, 7, 10), date(2014, 7, 1))


def test_schedule_holds_largest_accepted_value() -> None:
    project = (
        ProjectBuilder.default()
        .value(MAX_VALUE)
        .start_date(date(2014, 7, 8))
        .duration(timedelta(days=2))
        .build()
    )
    schedule = contribution_schedule(project, date(2014, 7, 8), date(2014, 7, 10))
    assert list(schedule) == [0, MAX_VALUE, MAX_VALUE]
    assert int(schedule.sum()) == 2 * MAX_VALUE
