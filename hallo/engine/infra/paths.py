"""Filesystem locations used by the logging and configuration layers."""

from __future__ import annotations

from pathlib import Path
from typing import Final

DEFAULT_ARTIFACT_ROOT: Final[Path] = Path("artifacts")
DEFAULT_LOG_ROOT: Final[Path] = DEFAULT_ARTIFACT_ROOT / "logs"
DEFAULT_CONFIG_ROOT: Final[Path] = Path("configs")

__all__ = ["DEFAULT_ARTIFACT_ROOT", "DEFAULT_CONFIG_ROOT", "DEFAULT_LOG_ROOT"]
