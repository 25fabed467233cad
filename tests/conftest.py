"""Shared pytest configuration for the hallo test-suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from datetime import date
from pathlib import Path

import pytest


def _insert_repo_root() -> None:
    """Make the repository root importable when the package is not installed."""

    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_insert_repo_root()

from hallo.engine.utils.clock import FixedClock  # noqa: E402

REFERENCE_DAY = date(2014, 7, 1)


def pytest_report_header(config: pytest.Config) -> Iterable[str]:  # pragma: no cover - pytest hook
    root = Path.cwd()
    log_level = os.environ.get("HALLO_LOG_LEVEL", "INFO")
    return [f"hallo repo: {root}", f"HALLO_LOG_LEVEL={log_level}"]


@pytest.fixture(autouse=True)
def _set_verbose_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HALLO_LOG_LEVEL", "INFO")
    monkeypatch.delenv("HALLO_JSON_LOGS", raising=False)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to 2014-07-01 so default allocations are predictable."""

    return FixedClock(REFERENCE_DAY)
