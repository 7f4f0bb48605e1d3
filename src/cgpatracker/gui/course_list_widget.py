# -*- coding: utf-8 -*-
"""Course list panel."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from cgpatracker.models.course import Course


def describe_course(course: Course) -> str:
    unit_label = "Credit" if course.credit_units == 1 else "Credits"
    return (
        f"{course.name}\n{course.credit_units} {unit_label} • "
        f"Grade: {course.grade.value} ({course.grade_points}.0)"
    )


class CourseListWidget(QWidget):
    """Show the current course list with remove, edit and reset controls."""

    remove_requested = pyqtSignal(str)
    edit_requested = pyqtSignal(str)
    reset_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("panelCard")

        self.title_label = QLabel("Course List")
        self.title_label.setObjectName("sectionTitle")
        self.reset_button = QPushButton("Reset All")
        self.reset_button.setObjectName("dangerButton")
        self.reset_button.clicked.connect(lambda: self.reset_requested.emit())

        header = QHBoxLayout()
        header.addWidget(self.title_label)
        header.addStretch(1)
        header.addWidget(self.reset_button)

        self.list_widget = QListWidget()
        self.list_widget.itemSelectionChanged.connect(self._update_buttons)
        self.list_widget.itemDoubleClicked.connect(lambda item: self.edit_requested.emit(self._item_id(item)))

        empty = QWidget()
        empty_layout = QVBoxLayout(empty)
        empty_title = QLabel("No courses added yet.")
        empty_title.setObjectName("mutedText")
        empty_hint = QLabel("Add courses using the form above.")
        empty_hint.setObjectName("mutedText")
        for label in (empty_title, empty_hint):
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            empty_layout.addWidget(label)

        self.stack = QStackedWidget()
        self.stack.addWidget(empty)
        self.stack.addWidget(self.list_widget)

        self.edit_button = QPushButton("Edit Selected")
        self.edit_button.setObjectName("secondaryButton")
        self.edit_button.clicked.connect(self._emit_edit)
        self.remove_button = QPushButton("Remove Selected")
        self.remove_button.setObjectName("secondaryButton")
        self.remove_button.clicked.connect(self._emit_remove)

        actions = QHBoxLayout()
        actions.addStretch(1)
        actions.addWidget(self.edit_button)
        actions.addWidget(self.remove_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(8)
        layout.addLayout(header)
        layout.addWidget(self.stack, 1)
        layout.addLayout(actions)
        self._update_buttons()

    @staticmethod
    def _item_id(item: QListWidgetItem) -> str:
        return str(item.data(Qt.ItemDataRole.UserRole))

    def set_courses(self, courses: Sequence[Course]) -> None:
        selected = self.selected_course_id()
        self.list_widget.clear()
        for course in courses:
            item = QListWidgetItem(describe_course(course))
            item.setData(Qt.ItemDataRole.UserRole, course.id)
            item.setToolTip(course.name)
            self.list_widget.addItem(item)
            if course.id == selected:
                item.setSelected(True)
        self.stack.setCurrentIndex(1 if courses else 0)
        self._update_buttons()

    def selected_course_id(self) -> str | None:
        items = self.list_widget.selectedItems()
        return self._item_id(items[0]) if items else None

    def course_count(self) -> int:
        return self.list_widget.count()

    def _update_buttons(self) -> None:
        has_selection = self.selected_course_id() is not None
        self.edit_button.setEnabled(has_selection)
        self.remove_button.setEnabled(has_selection)

    def _emit_edit(self) -> None:
        course_id = self.selected_course_id()
        if course_id is not None:
            self.edit_requested.emit(course_id)

    def _emit_remove(self) -> None:
        course_id = self.selected_course_id()
        if course_id is not None:
            self.remove_requested.emit(course_id)
