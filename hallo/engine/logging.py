"""Structured logging helpers for the hallo planning engine."""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Final

from hallo.engine.infra.paths import DEFAULT_LOG_ROOT
from hallo.engine.utils.io import ensure_dir

CONSOLE_FORMAT: Final[str] = "[%(levelname)s] %(name)s: %(message)s"
DEFAULT_LEVEL: Final[str] = "INFO"
AUDIT_DIR: Final[Path] = DEFAULT_LOG_ROOT
LOG_PATH: Final[Path] = AUDIT_DIR / "hallo.log"
JSON_ENV_FLAG: Final[str] = "HALLO_JSON_LOGS"
LEVEL_ENV_FLAG: Final[str] = "HALLO_LOG_LEVEL"


class JsonAuditFormatter(logging.Formatter):
    """Format log records as single-line JSON payloads."""

    def format(self, record: logging.LogRecord) -> str:
        """Serialise ``record`` with the project and date extras set by planners."""

        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat()
        payload = {
            "timestamp": timestamp,
            "level": record.levelname,
            "source": record.name,
            "message": record.getMessage(),
            "project": getattr(record, "project", None),
            "start_date": _coerce_text(getattr(record, "start_date", None)),
            "end_date": _coerce_text(getattr(record, "end_date", None)),
        }
        return json.dumps(payload, ensure_ascii=False)


def _coerce_text(value: object) -> str | None:
    """Render optional extras such as dates as plain strings."""

    if value is None:
        return None
    return str(value)


def _ensure_audit_dir() -> None:
    """Create the log directory lazily so importing never touches the disk."""

    ensure_dir(AUDIT_DIR)


def _resolve_level(level: str | int | None) -> int:
    """Resolve the log level from the environment or the explicit argument."""

    env_level = os.environ.get(LEVEL_ENV_FLAG)
    if env_level:
        candidate = env_level.strip().upper()
    elif isinstance(level, str):
        candidate = level.strip().upper()
    elif isinstance(level, int):
        return int(level)
    else:
        candidate = DEFAULT_LEVEL
    resolved = logging.getLevelName(candidate)
    return int(resolved) if isinstance(resolved, int) else logging.INFO


def _json_logging_enabled(explicit: bool) -> bool:
    """Return ``True`` when JSON logging is requested by flag or environment."""

    if explicit:
        return True
    value = os.environ.get(JSON_ENV_FLAG)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _ensure_console_handler(logger: logging.Logger, level: int) -> None:
    """Attach one console handler per logger, refreshing its level on reuse."""

    for handler in logger.handlers:
        if getattr(handler, "_hallo_console", False):
            handler.setLevel(level)
            return
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    stream_handler._hallo_console = True  # type: ignore[attr-defined]
    logger.addHandler(stream_handler)


def _ensure_json_handler(logger: logging.Logger, level: int) -> None:
    """Attach the JSON audit file handler once per logger."""

    for handler in logger.handlers:
        if getattr(handler, "_hallo_json", False):
            handler.setLevel(level)
            return
    _ensure_audit_dir()
    json_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    json_handler.setLevel(level)
    json_handler.setFormatter(JsonAuditFormatter())
    json_handler._hallo_json = True  # type: ignore[attr-defined]
    logger.addHandler(json_handler)


def setup_logger(
    name: str,
    json_format: bool = False,
    level: str | int | None = None,
) -> logging.Logger:
    """Configure and return a logger for hallo modules.

    Args:
      name: Dotted logger name, usually ``__name__``.
      json_format: Also write JSON lines to :data:`LOG_PATH`.
      level: Explicit level; ``HALLO_LOG_LEVEL`` takes precedence when set.

    Returns:
      The configured :class:`logging.Logger`. Calling this again with the same
      name never attaches duplicate handlers.
    """

    resolved_level = _resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(resolved_level)
    # Keep propagation on so capture handlers such as ``caplog`` still see records.
    logger.propagate = True
    _ensure_console_handler(logger, resolved_level)
    if _json_logging_enabled(json_format):
        _ensure_json_handler(logger, resolved_level)
    return logger


__all__ = ["JsonAuditFormatter", "LOG_PATH", "setup_logger"]
