# -*- coding: utf-8 -*-
"""Settings loading and validation."""

from __future__ import annotations

import json
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from demobrowser.constants import (
    DEFAULT_SETTINGS_FILE,
    MAX_RECENTLY_USED_CAPACITY,
    RECENTLY_USED_CAPACITY,
    SCREEN_TITLES,
)
from demobrowser.utils.file_utils import load_env_file, read_json_file


CATALOG_ENV_VAR = "DEMOBROWSER_CATALOG"

DEFAULT_CONFIG: dict[str, Any] = {
    "navigation": {
        "recently_used_capacity": RECENTLY_USED_CAPACITY,
        "initial_screen": "components",
    },
    "catalog": {"path": ""},
    "logging": {"session_log": False, "level": "INFO"},
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides to runtime config."""
    merged = deepcopy(config)
    catalog_path = env_values.get(CATALOG_ENV_VAR, "").strip()
    if catalog_path:
        merged.setdefault("catalog", {})
        merged["catalog"]["path"] = catalog_path
    return merged


def _check_sections(config: dict[str, Any]) -> None:
    for section in DEFAULT_CONFIG:
        if not isinstance(config.get(section), dict):
            raise ConfigError(f"{section} must be an object")


def validate_config(config: dict[str, Any]) -> None:
    """Validate the navigation, catalog and logging sections."""
    _check_sections(config)
    capacity = config.get("navigation", {}).get("recently_used_capacity")
    if isinstance(capacity, bool) or not isinstance(capacity, int) or not (
        1 <= capacity <= MAX_RECENTLY_USED_CAPACITY
    ):
        raise ConfigError(
            f"navigation.recently_used_capacity must be an int in range 1..{MAX_RECENTLY_USED_CAPACITY}"
        )

    initial_screen = config.get("navigation", {}).get("initial_screen")
    if initial_screen not in SCREEN_TITLES:
        raise ConfigError("navigation.initial_screen must be one of: " + ", ".join(SCREEN_TITLES))

    catalog_path = config.get("catalog", {}).get("path")
    if not isinstance(catalog_path, str):
        raise ConfigError("catalog.path must be a string")

    level = str(config.get("logging", {}).get("level", "")).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError("logging.level must be one of: " + ", ".join(sorted(_LOG_LEVELS)))


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults.

    Values from a ``.env`` file next to the settings file are applied first,
    then the process environment wins.
    """
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = load_env_file(config_path.parent / ".env")
    if os.environ.get(CATALOG_ENV_VAR):
        env_values[CATALOG_ENV_VAR] = os.environ[CATALOG_ENV_VAR]

    if not config_path.exists():
        return _apply_env_overrides(get_default_config(), env_values)

    try:
        loaded = read_json_file(config_path)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid settings file {config_path}: {exc}") from exc
    merged = _deep_merge(get_default_config(), loaded)
    _check_sections(merged)
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged
