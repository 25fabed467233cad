"""I/O helpers for configuration files and artefact directories."""

from __future__ import annotations

from pathlib import Path

import yaml

__all__ = ["ensure_dir", "read_yaml"]


def ensure_dir(path: Path | str) -> Path:
    """Create ``path`` when missing and return it as a :class:`Path`."""

    path_obj = Path(path)
    path_obj.mkdir(parents=True, exist_ok=True)
    return path_obj


def read_yaml(path: Path | str) -> object:
    """Read a YAML document and return the corresponding Python object."""

    with Path(path).open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)
