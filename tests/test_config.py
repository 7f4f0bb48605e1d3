# -*- coding: utf-8 -*-
"""Tests for config persistence and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cgpatracker.config import (
    ConfigError,
    get_default_config,
    load_config,
    save_config,
    validate_config,
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CGPA_STATE_FILE", raising=False)
    monkeypatch.delenv("CGPA_EXPORT_DIR", raising=False)


def test_default_config_has_all_keys() -> None:
    config = get_default_config()
    assert {"storage", "history", "export", "logging", "hotkeys"}.issubset(config.keys())


def test_default_config_is_valid(default_config: dict) -> None:
    validate_config(default_config)


def test_default_config_is_a_copy() -> None:
    get_default_config()["storage"]["state_file"] = "changed.json"
    assert get_default_config()["storage"]["state_file"] == "cgpa_state.json"


def test_save_config_creates_json_file(tmp_path: Path, default_config: dict) -> None:
    target = tmp_path / "settings.json"
    save_config(default_config, target)
    assert json.loads(target.read_text(encoding="utf-8"))["storage"]["state_key"] == "cgpaState"


def test_state_file_persisted(tmp_path: Path, default_config: dict) -> None:
    target = tmp_path / "settings.json"
    default_config["storage"]["state_file"] = "elsewhere.json"
    save_config(default_config, target)
    assert load_config(target)["storage"]["state_file"] == "elsewhere.json"


def test_hotkeys_persisted(tmp_path: Path, default_config: dict) -> None:
    target = tmp_path / "settings.json"
    default_config["hotkeys"]["undo"] = "Alt+Z"
    save_config(default_config, target)
    assert load_config(target)["hotkeys"]["undo"] == "Alt+Z"


def test_partial_file_is_merged_over_defaults(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text(json.dumps({"history": {"record_noop_commands": False}}), encoding="utf-8")
    loaded = load_config(target)
    assert loaded["history"]["record_noop_commands"] is False
    assert loaded["export"]["pdf_filename"] == "CGPA_Report.pdf"


def test_load_config_returns_defaults_when_file_missing(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json") == get_default_config()


@pytest.mark.parametrize(
    ("section", "key", "value"),
    [
        ("storage", "state_file", ""),
        ("storage", "state_key", None),
        ("history", "record_noop_commands", "yes"),
        ("export", "csv_filename", "report.txt"),
        ("export", "pdf_filename", "report.csv"),
        ("logging", "file_logging", 1),
    ],
)
def test_invalid_values_rejected(default_config: dict, section: str, key: str, value) -> None:
    default_config[section][key] = value
    with pytest.raises(ConfigError):
        validate_config(default_config)


def test_invalid_file_raises_on_load(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text(json.dumps({"export": {"pdf_filename": "x.doc"}}), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(target)


def test_load_config_reads_state_file_from_env_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text('CGPA_STATE_FILE="from-env.json"\n', encoding="utf-8")
    loaded = load_config(tmp_path / "settings.json")
    assert loaded["storage"]["state_file"] == "from-env.json"


def test_process_environment_beats_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("CGPA_EXPORT_DIR=from-file\n", encoding="utf-8")
    monkeypatch.setenv("CGPA_EXPORT_DIR", "from-process")
    loaded = load_config(tmp_path / "settings.json")
    assert loaded["export"]["output_dir"] == "from-process"
