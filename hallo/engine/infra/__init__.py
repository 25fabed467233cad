"""Infrastructure helpers shared by the planning engine."""

from .paths import DEFAULT_ARTIFACT_ROOT, DEFAULT_CONFIG_ROOT, DEFAULT_LOG_ROOT

__all__ = ["DEFAULT_ARTIFACT_ROOT", "DEFAULT_CONFIG_ROOT", "DEFAULT_LOG_ROOT"]
