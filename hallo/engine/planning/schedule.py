"""Day-by-day contribution schedule for a single contributor."""

from __future__ import annotations

from datetime import date

import numpy as np
import pandas as pd

from hallo.engine.planning.allocation import ensure_day
from hallo.engine.planning.traits import Contribution

__all__ = ["contribution_schedule"]


def contribution_schedule(
    contributor: Contribution,
    start: date,
    end: date,
    freq: str = "D",
) -> pd.Series:
    """Return what ``contributor`` contributes on each date of a range.

    Args:
      contributor: Any :class:`Contribution`, typically a project.
      start: First date evaluated (inclusive).
      end: Last date evaluated (inclusive when it falls on ``freq``).
      freq: pandas frequency alias used to step through the range.

    Returns:
      Integer series indexed by a ``DatetimeIndex`` named ``date``. The
      series is named after the contributor when it exposes ``name``.

    Raises:
      ValueError: If ``start`` falls after ``end``.
    """

    first = ensure_day(start, label="start")
    last = ensure_day(end, label="end")
    if first > last:
        raise ValueError(f"start {first} must not be after end {last}")

    index = pd.date_range(pd.Timestamp(first), pd.Timestamp(last), freq=freq, name="date")
    values = np.fromiter(
        (contributor.get_contribution_on(stamp.date()) for stamp in index),
        dtype="int64",
        count=len(index),
    )
    return pd.Series(values, index=index, name=getattr(contributor, "name", None))
