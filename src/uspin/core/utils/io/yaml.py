"""YAML reading under a shared advisory lock."""
from __future__ import annotations

import fcntl
from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: Path, default: Any = None) -> Any:
    """Parse the YAML document at ``path``.

    An empty document yields ``default``. A missing file raises
    ``FileNotFoundError``; malformed YAML raises ``yaml.YAMLError``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
        try:
            data = yaml.safe_load(f)
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    return default if data is None else data


__all__ = ["read_yaml"]
