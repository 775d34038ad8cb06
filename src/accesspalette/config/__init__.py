"""Configuration file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML mapping; an empty file yields an empty mapping."""
    with Path(path).open("r", encoding="utf-8") as handle:
        try:
            loaded = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid config YAML: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must be a YAML object: {path}")
    return loaded


__all__ = ["load_yaml"]
