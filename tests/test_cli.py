# -*- coding: utf-8 -*-
"""Tests for the typer command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cgpatracker.cli.cgpa_cli import app
from cgpatracker.core.storage import JsonFileStorage

runner = CliRunner()


@pytest.fixture
def cli_args(tmp_path: Path) -> list[str]:
    return ["--config", str(tmp_path / "settings.json"), "--state-file", str(tmp_path / "state.json")]


def _invoke(cli_args: list[str], *args: str, **kwargs):
    return runner.invoke(app, [*cli_args, *args], **kwargs)


def _saved_state(tmp_path: Path) -> dict:
    raw = JsonFileStorage(tmp_path / "state.json").get_item("cgpaState")
    assert raw is not None
    return json.loads(raw)


def test_add_and_summary(cli_args: list[str]) -> None:
    assert _invoke(cli_args, "add", "Calculus", "4", "A").exit_code == 0
    assert _invoke(cli_args, "add", "History", "2", "C").exit_code == 0
    result = _invoke(cli_args, "summary")
    assert result.exit_code == 0
    assert "Total Credits: 6" in result.output
    assert "Total Points: 26" in result.output
    assert "CGPA: 4.33" in result.output
    assert "Class: Second Class Upper" in result.output


def test_add_rejects_invalid_fields(cli_args: list[str], tmp_path: Path) -> None:
    result = _invoke(cli_args, "add", "Calculus", "9", "E")
    assert result.exit_code == 1
    assert "between 1 and 6" in result.output
    assert not (tmp_path / "state.json").exists()


def test_state_persists_between_invocations(cli_args: list[str], tmp_path: Path) -> None:
    _invoke(cli_args, "add", "Physics", "3", "B")
    state = _saved_state(tmp_path)
    assert state["historyIndex"] == 1
    assert state["courses"][0]["name"] == "Physics"
    result = _invoke(cli_args, "list")
    assert "Physics - 3 Credits, Grade B (4.0)" in result.output


def test_remove_undo_redo(cli_args: list[str], tmp_path: Path) -> None:
    _invoke(cli_args, "add", "Physics", "3", "B")
    course_id = _saved_state(tmp_path)["courses"][0]["id"]

    assert "Course Removed: Physics" in _invoke(cli_args, "remove", course_id).output
    assert "No courses added yet." in _invoke(cli_args, "list").output
    assert "Undone. 1 courses" in _invoke(cli_args, "undo").output
    assert "Redone. 0 courses" in _invoke(cli_args, "redo").output
    assert "Nothing to redo." in _invoke(cli_args, "redo").output


def test_undo_with_empty_history(cli_args: list[str]) -> None:
    assert "Nothing to undo." in _invoke(cli_args, "undo").output


def test_update_changes_grade(cli_args: list[str], tmp_path: Path) -> None:
    _invoke(cli_args, "add", "Physics", "3", "B")
    course_id = _saved_state(tmp_path)["courses"][0]["id"]
    result = _invoke(cli_args, "update", course_id, "--grade", "A")
    assert result.exit_code == 0
    assert _saved_state(tmp_path)["courses"][0] == {"id": course_id, "name": "Physics", "creditUnits": 3, "grade": "A"}


def test_update_unknown_id_fails(cli_args: list[str]) -> None:
    result = _invoke(cli_args, "update", "missing", "--grade", "A")
    assert result.exit_code == 1


def test_reset_requires_confirmation(cli_args: list[str]) -> None:
    _invoke(cli_args, "add", "Physics", "3", "B")
    aborted = _invoke(cli_args, "reset", input="n\n")
    assert aborted.exit_code == 1
    assert "Physics" in _invoke(cli_args, "list").output
    assert "All Courses Reset" in _invoke(cli_args, "reset", "--yes").output
    assert "No courses added yet." in _invoke(cli_args, "list").output


def test_reset_with_no_courses(cli_args: list[str]) -> None:
    assert "There are no courses to reset." in _invoke(cli_args, "reset", "--yes").output


def test_theme_toggle_does_not_touch_history(cli_args: list[str], tmp_path: Path) -> None:
    _invoke(cli_args, "add", "Physics", "3", "B")
    assert "Dark mode: on" in _invoke(cli_args, "theme").output
    state = _saved_state(tmp_path)
    assert state["darkMode"] is True
    assert state["historyIndex"] == 1


def test_history_marks_cursor(cli_args: list[str]) -> None:
    _invoke(cli_args, "add", "Physics", "3", "B")
    _invoke(cli_args, "undo")
    lines = _invoke(cli_args, "history").output.splitlines()
    assert lines == ["* 0: (empty)", "  1: Physics"]


def test_export_csv_writes_file(cli_args: list[str], tmp_path: Path) -> None:
    _invoke(cli_args, "add", "Physics", "3", "B")
    target = tmp_path / "report.csv"
    result = _invoke(cli_args, "export-csv", str(target))
    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8").splitlines()[1] == "Physics,3,B,4,12"


def test_export_pdf_writes_file(cli_args: list[str], tmp_path: Path) -> None:
    _invoke(cli_args, "add", "Physics", "3", "B")
    target = tmp_path / "report.pdf"
    assert _invoke(cli_args, "export-pdf", str(target)).exit_code == 0
    assert target.read_bytes().startswith(b"%PDF")


def test_export_with_no_courses_is_rejected(cli_args: list[str], tmp_path: Path) -> None:
    result = _invoke(cli_args, "export-csv", str(tmp_path / "report.csv"))
    assert result.exit_code == 1
    assert "No data to export" in result.output
    assert not (tmp_path / "report.csv").exists()


def test_corrupt_state_file_starts_empty(cli_args: list[str], tmp_path: Path) -> None:
    (tmp_path / "state.json").write_text(json.dumps({"cgpaState": "{broken"}), encoding="utf-8")
    result = _invoke(cli_args, "list")
    assert result.exit_code == 0
    assert "No courses added yet." in result.output


def test_invalid_settings_exit_with_code_2(tmp_path: Path) -> None:
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"export": {"csv_filename": "x.txt"}}), encoding="utf-8")
    result = runner.invoke(app, ["--config", str(settings), "list"])
    assert result.exit_code == 2
