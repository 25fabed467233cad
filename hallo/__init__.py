"""Top-level package for the hallo project planner.

Exposes the package version for runtime checks.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
