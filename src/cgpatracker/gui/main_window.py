# -*- coding: utf-8 -*-
"""Main window: course form, course list and CGPA summary."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from cgpatracker.constants import APP_TITLE, APP_VERSION
from cgpatracker.core.state import AppState
from cgpatracker.export.exporter import NothingToExportError
from cgpatracker.gui.controller import AppController
from cgpatracker.gui.course_form_widget import CourseFormWidget
from cgpatracker.gui.course_list_widget import CourseListWidget
from cgpatracker.gui.summary_widget import SummaryWidget
from cgpatracker.gui.theme import stylesheet_for

logger = logging.getLogger(__name__)

NOTICE_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    """Course entry, history controls, summary and export in one window."""

    def __init__(self, settings: dict[str, Any], controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.settings = settings
        self.controller = controller
        self._applied_dark_mode: bool | None = None

        self.setWindowTitle(f"{APP_TITLE} v{APP_VERSION}")
        self.resize(980, 760)

        self._build_actions()
        self._build_ui()
        self._bind_hotkeys()

        self.controller.state_changed.connect(self._render)
        self.controller.notice.connect(self._show_notice)
        self.controller.refresh()

    def _build_actions(self) -> None:
        self.undo_action = QAction("Undo", self)
        self.undo_action.triggered.connect(self.controller.undo)
        self.redo_action = QAction("Redo", self)
        self.redo_action.triggered.connect(self.controller.redo)
        self.reset_action = QAction("Reset All", self)
        self.reset_action.triggered.connect(self.controller.reset_all)
        self.export_csv_action = QAction("Export CSV", self)
        self.export_csv_action.triggered.connect(lambda: self.export_csv())
        self.export_pdf_action = QAction("Export PDF", self)
        self.export_pdf_action.triggered.connect(lambda: self.export_pdf())
        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.triggered.connect(lambda _checked: self.controller.toggle_dark_mode())

    def _build_ui(self) -> None:
        toolbar = self.addToolBar("Main")
        toolbar.setMovable(False)
        for action in (self.undo_action, self.redo_action, self.reset_action):
            toolbar.addAction(action)
        toolbar.addSeparator()
        toolbar.addAction(self.export_csv_action)
        toolbar.addAction(self.export_pdf_action)
        toolbar.addSeparator()
        toolbar.addAction(self.dark_mode_action)

        self.title_label = QLabel(APP_TITLE)
        self.title_label.setObjectName("appTitle")
        subtitle = QLabel("Track your academic performance and calculate your Cumulative Grade Point Average")
        subtitle.setObjectName("mutedText")

        self.form_widget = CourseFormWidget()
        self.form_widget.course_submitted.connect(self.controller.add_course)
        self.form_widget.course_edited.connect(self.controller.update_course)
        self.summary_widget = SummaryWidget()
        self.summary_widget.export_pdf_requested.connect(lambda: self.export_pdf())
        self.summary_widget.export_csv_requested.connect(lambda: self.export_csv())
        self.course_list_widget = CourseListWidget()
        self.course_list_widget.remove_requested.connect(self.controller.remove_course)
        self.course_list_widget.edit_requested.connect(self.edit_course)
        self.course_list_widget.reset_requested.connect(self.controller.reset_all)

        top_row = QHBoxLayout()
        top_row.setSpacing(16)
        top_row.addWidget(self.form_widget, 1)
        top_row.addWidget(self.summary_widget, 1)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(14)
        layout.addWidget(self.title_label)
        layout.addWidget(subtitle)
        layout.addLayout(top_row)
        layout.addWidget(self.course_list_widget, 1)
        self.setCentralWidget(central)

        self.setStatusBar(QStatusBar(self))

    def _bind_hotkeys(self) -> None:
        hotkeys = self.settings.get("hotkeys", {})
        bindings = [
            (hotkeys.get("undo"), self.controller.undo),
            (hotkeys.get("redo"), self.controller.redo),
            (hotkeys.get("reset"), self.controller.reset_all),
            (hotkeys.get("toggle_theme"), self.controller.toggle_dark_mode),
            (hotkeys.get("export_pdf"), lambda: self.export_pdf()),
            (hotkeys.get("export_csv"), lambda: self.export_csv()),
        ]
        self._shortcuts: list[QShortcut] = []
        for sequence, handler in bindings:
            if not sequence:
                continue
            shortcut = QShortcut(QKeySequence(sequence), self)
            shortcut.activated.connect(handler)
            self._shortcuts.append(shortcut)

    def _render(self, state: AppState) -> None:
        self.course_list_widget.set_courses(state.courses)
        self.summary_widget.set_aggregate(self.controller.store.compute_aggregate())
        self.undo_action.setEnabled(state.can_undo)
        self.redo_action.setEnabled(state.can_redo)
        self.dark_mode_action.setChecked(state.dark_mode)
        if self._applied_dark_mode != state.dark_mode:
            self.setStyleSheet(stylesheet_for(state.dark_mode))
            self._applied_dark_mode = state.dark_mode

        editing_id = self.form_widget.editing_id
        if editing_id is not None and self.controller.store.find_course(editing_id) is None:
            self.form_widget.clear()

    def _show_notice(self, title: str, message: str) -> None:
        logger.info("%s: %s", title, message)
        self.statusBar().showMessage(f"{title}: {message}", NOTICE_TIMEOUT_MS)

    def edit_course(self, course_id: str) -> None:
        course = self.controller.store.find_course(course_id)
        if course is not None:
            self.form_widget.load_course(course)

    def _choose_export_path(self, kind: str) -> Path | None:
        default = self.controller.exporter.default_path(kind)
        file_filter = "CSV Files (*.csv)" if kind == "csv" else "PDF Files (*.pdf)"
        selected, _ = QFileDialog.getSaveFileName(self, f"Export {kind.upper()}", str(default), file_filter)
        return Path(selected) if selected else None

    def _export(self, kind: str, path: Path | None) -> Path | None:
        if not self.controller.store.courses:
            QMessageBox.information(self, "No Data to Export", "Please add some courses before exporting.")
            return None
        if path is None:
            path = self._choose_export_path(kind)
            if path is None:
                return None
        try:
            if kind == "csv":
                return self.controller.export_csv(path)
            return self.controller.export_pdf(path)
        except NothingToExportError as e:
            QMessageBox.information(self, "No Data to Export", str(e))
        except OSError as e:
            logger.exception("Export to %s failed", path)
            QMessageBox.warning(self, APP_TITLE, f"Could not write report: {e}")
        return None

    def export_csv(self, path: Path | None = None) -> Path | None:
        return self._export("csv", path)

    def export_pdf(self, path: Path | None = None) -> Path | None:
        return self._export("pdf", path)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.controller.shutdown()
        super().closeEvent(event)
