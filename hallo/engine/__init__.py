"""Engine namespace for hallo."""

from __future__ import annotations

from . import infra, planning, utils

__all__ = ["infra", "planning", "utils"]
