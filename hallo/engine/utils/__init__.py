"""Utility helpers for hallo."""

from .clock import DEFAULT_CLOCK, Clock, FixedClock, SystemClock, resolve_clock
from .io import ensure_dir, read_yaml

__all__ = [
    "DEFAULT_CLOCK",
    "Clock",
    "FixedClock",
    "SystemClock",
    "ensure_dir",
    "read_yaml",
    "resolve_clock",
]
