"""Loading of YAML settings files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


class SettingsFileError(ValueError):
    """Raised when a settings file is not a YAML mapping."""


def read_settings(path: str | Path) -> AppConfig:
    """Parse and validate a YAML settings file; an empty file yields defaults."""
    with Path(path).open("r", encoding="utf-8") as handle:
        loaded: Any = yaml.safe_load(handle)
    if loaded is None:
        return AppConfig()
    if not isinstance(loaded, dict):
        raise SettingsFileError(f"Settings file {path} must contain a YAML mapping")
    return load_config(loaded)


__all__ = ["SettingsFileError", "read_settings"]
