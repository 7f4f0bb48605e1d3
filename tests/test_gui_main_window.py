# -*- coding: utf-8 -*-
"""Tests for the main window wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PyQt6")

from PyQt6.QtWidgets import QMessageBox

from cgpatracker.core.storage import MemoryStorage
from cgpatracker.core.store import CourseStateStore
from cgpatracker.export.exporter import Exporter
from cgpatracker.gui.controller import AppController
from cgpatracker.gui.main_window import MainWindow
from cgpatracker.gui.theme import DARK_PALETTE, LIGHT_PALETTE


@pytest.fixture
def window(qt_app, tmp_path: Path, default_config: dict):
    store = CourseStateStore(MemoryStorage())
    controller = AppController(store, Exporter(output_dir=tmp_path))
    win = MainWindow(settings=default_config, controller=controller)
    yield win
    win.close()


def _fill_form(win: MainWindow, name: str, credits: int, grade: str) -> None:
    form = win.form_widget
    form.name_input.setText(name)
    form.credits_input.setCurrentIndex(form.credits_input.findData(credits))
    form.grade_input.setCurrentIndex(form.grade_input.findData(grade))


def test_initial_window_shows_empty_state(window: MainWindow) -> None:
    assert window.course_list_widget.course_count() == 0
    assert window.summary_widget.cgpa_value.text() == "0.00"
    assert window.summary_widget.class_label.text() == "N/A"
    assert not window.undo_action.isEnabled()
    assert not window.redo_action.isEnabled()


def test_form_submission_adds_course_and_updates_summary(window: MainWindow) -> None:
    _fill_form(window, "Calculus", 4, "A")
    window.form_widget.submit()
    _fill_form(window, "History", 2, "C")
    window.form_widget.submit()

    assert window.course_list_widget.course_count() == 2
    assert window.summary_widget.credits_value.text() == "6"
    assert window.summary_widget.points_value.text() == "26"
    assert window.summary_widget.cgpa_value.text() == "4.33"
    assert window.undo_action.isEnabled()
    assert window.form_widget.name_input.text() == ""


def test_invalid_form_shows_errors_without_adding(window: MainWindow) -> None:
    window.form_widget.submit()
    errors = window.form_widget.errors()
    assert set(errors) == {"name", "credit_units", "grade"}
    assert window.controller.store.courses == []


def test_undo_redo_actions(window: MainWindow) -> None:
    _fill_form(window, "Physics", 3, "B")
    window.form_widget.submit()
    window.undo_action.trigger()
    assert window.course_list_widget.course_count() == 0
    assert window.redo_action.isEnabled()
    window.redo_action.trigger()
    assert window.course_list_widget.course_count() == 1


def test_edit_selected_course(window: MainWindow) -> None:
    _fill_form(window, "Physics", 3, "B")
    course = window.form_widget.submit()
    assert course is not None

    window.edit_course(course.id)
    assert window.form_widget.editing_id == course.id
    window.form_widget.grade_input.setCurrentIndex(window.form_widget.grade_input.findData("A"))
    window.form_widget.submit()

    updated = window.controller.store.find_course(course.id)
    assert updated is not None and updated.grade.value == "A"
    assert window.controller.store.history_index == 2


def test_remove_selected_course(window: MainWindow) -> None:
    _fill_form(window, "Physics", 3, "B")
    window.form_widget.submit()
    window.course_list_widget.list_widget.setCurrentRow(0)
    window.course_list_widget.remove_button.click()
    assert window.controller.store.courses == []


def test_dark_mode_toggle_switches_stylesheet(window: MainWindow) -> None:
    assert LIGHT_PALETTE["background"] in window.styleSheet()
    window.dark_mode_action.trigger()
    assert window.controller.store.dark_mode is True
    assert window.dark_mode_action.isChecked()
    assert DARK_PALETTE["background"] in window.styleSheet()
    assert window.controller.store.history_index == 0


def test_export_with_no_courses_shows_notice(window: MainWindow, monkeypatch: pytest.MonkeyPatch) -> None:
    shown: list[str] = []
    monkeypatch.setattr(QMessageBox, "information", lambda parent, title, text: shown.append(title))
    assert window.export_pdf() is None
    assert shown == ["No Data to Export"]


def test_export_csv_to_path(window: MainWindow, tmp_path: Path) -> None:
    _fill_form(window, "Physics", 3, "B")
    window.form_widget.submit()
    target = window.export_csv(tmp_path / "out.csv")
    assert target == tmp_path / "out.csv"
    assert "Physics,3,B,4,12" in target.read_text(encoding="utf-8")
