# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from cgpatracker.constants import (
    DEFAULT_CSV_FILENAME,
    DEFAULT_HOTKEYS,
    DEFAULT_PDF_FILENAME,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_STATE_FILE,
    STATE_STORAGE_KEY,
)
from cgpatracker.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "storage": {"state_file": DEFAULT_STATE_FILE, "state_key": STATE_STORAGE_KEY},
    "history": {"record_noop_commands": True},
    "export": {
        "output_dir": "exports",
        "csv_filename": DEFAULT_CSV_FILENAME,
        "pdf_filename": DEFAULT_PDF_FILENAME,
    },
    "logging": {"log_dir": ".", "file_logging": True},
    "hotkeys": deepcopy(DEFAULT_HOTKEYS),
}

ENV_OVERRIDES = {
    "CGPA_STATE_FILE": ("storage", "state_file"),
    "CGPA_EXPORT_DIR": ("export", "output_dir"),
}


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


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply .env and process environment overrides; the process wins."""
    merged = deepcopy(config)
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_name, env_values.get(env_name, "")).strip()
        if value:
            merged.setdefault(section, {})
            merged[section][key] = value
    return merged


def _require_non_empty_str(value: Any, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{label} must be a non-empty string")


def validate_config(config: dict[str, Any]) -> None:
    """Validate the settings the store, exporters and GUI rely on."""
    storage = config.get("storage", {})
    _require_non_empty_str(storage.get("state_file"), "storage.state_file")
    _require_non_empty_str(storage.get("state_key"), "storage.state_key")

    record_noop = config.get("history", {}).get("record_noop_commands")
    if not isinstance(record_noop, bool):
        raise ConfigError("history.record_noop_commands must be true or false")

    export = config.get("export", {})
    _require_non_empty_str(export.get("output_dir"), "export.output_dir")
    for key, suffix in (("csv_filename", ".csv"), ("pdf_filename", ".pdf")):
        filename = export.get(key)
        _require_non_empty_str(filename, f"export.{key}")
        if not filename.lower().endswith(suffix):
            raise ConfigError(f"export.{key} must end with {suffix}")

    if not isinstance(config.get("logging", {}).get("file_logging"), bool):
        raise ConfigError("logging.file_logging must be true or false")

    hotkeys = config.get("hotkeys", {})
    if not isinstance(hotkeys, dict) or not all(isinstance(v, str) for v in hotkeys.values()):
        raise ConfigError("hotkeys must map action names to key sequences")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    if not config_path.exists():
        return _apply_env_overrides(get_default_config(), env_values)

    loaded = read_json_file(config_path)
    merged = _deep_merge(get_default_config(), loaded)
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path
