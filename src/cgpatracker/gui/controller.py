# -*- coding: utf-8 -*-
"""Bridge between the course store and the Qt widgets."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal

from cgpatracker.core.state import AppState
from cgpatracker.core.store import CourseStateStore
from cgpatracker.export.exporter import Exporter
from cgpatracker.models.course import Course

logger = logging.getLogger(__name__)


class AppController(QObject):
    """
    Forward user commands to the store and re-emit its transitions as Qt signals.
    Widgets never hold course data of their own; they render ``state_changed``.
    """

    state_changed = pyqtSignal(object)
    notice = pyqtSignal(str, str)

    def __init__(self, store: CourseStateStore, exporter: Exporter) -> None:
        super().__init__()
        self.store = store
        self.exporter = exporter
        self._unsubscribe = store.subscribe(self.state_changed.emit)

    def refresh(self) -> None:
        self.state_changed.emit(self.store.state)

    def add_course(self, course: Course) -> None:
        self.store.add_course(course)
        self.notice.emit("Course Added", f"{course.name} has been added to your course list.")

    def update_course(self, course: Course) -> None:
        self.store.update_course(course)
        self.notice.emit("Course Updated", f"{course.name} has been updated.")

    def remove_course(self, course_id: str) -> None:
        course = self.store.find_course(course_id)
        self.store.remove_course(course_id)
        if course is not None:
            self.notice.emit("Course Removed", f"{course.name} has been removed from your course list.")

    def reset_all(self) -> bool:
        if not self.store.courses:
            self.notice.emit("No Courses", "There are no courses to reset.")
            return False
        self.store.reset_all()
        self.notice.emit("All Courses Reset", "All courses have been removed.")
        return True

    def undo(self) -> None:
        self.store.undo()

    def redo(self) -> None:
        self.store.redo()

    def toggle_dark_mode(self) -> None:
        self.store.toggle_dark_mode()

    def export_csv(self, path: str | Path | None = None) -> Path:
        """Write the CSV report; raises NothingToExportError for an empty list."""
        target = self.exporter.export_csv(self.store.courses, self.store.compute_aggregate(), path)
        self.notice.emit("CSV Exported", f"Your CGPA report has been saved to {target}.")
        return target

    def export_pdf(self, path: str | Path | None = None) -> Path:
        """Write the PDF report; raises NothingToExportError for an empty list."""
        target = self.exporter.export_pdf(self.store.courses, self.store.compute_aggregate(), path)
        self.notice.emit("PDF Generated", f"Your CGPA report has been saved to {target}.")
        return target

    def shutdown(self) -> None:
        self._unsubscribe()
        logger.debug("Controller detached from store")

    @property
    def state(self) -> AppState:
        return self.store.state
