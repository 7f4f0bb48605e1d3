# -*- coding: utf-8 -*-
"""Course entry form with inline validation."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cgpatracker.constants import COURSE_NAME_MAX_LENGTH, CREDIT_UNITS_MAX, CREDIT_UNITS_MIN
from cgpatracker.core.validation import CourseValidationError, build_course
from cgpatracker.models.course import Course, Grade


class CourseFormWidget(QWidget):
    """Collect name, credit units and grade; emit a validated Course."""

    course_submitted = pyqtSignal(object)
    course_edited = pyqtSignal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("panelCard")
        self._editing_id: str | None = None

        self.title_label = QLabel("Add New Course")
        self.title_label.setObjectName("sectionTitle")

        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("Introduction to Computer Science")
        self.name_input.setMaxLength(COURSE_NAME_MAX_LENGTH)
        self.credits_input = QComboBox()
        self.credits_input.addItem("Select credit units", None)
        for units in range(CREDIT_UNITS_MIN, CREDIT_UNITS_MAX + 1):
            self.credits_input.addItem(f"{units} {'Unit' if units == 1 else 'Units'}", units)
        self.grade_input = QComboBox()
        self.grade_input.addItem("Select grade", None)
        for grade in Grade:
            self.grade_input.addItem(f"{grade.value} ({grade.points} points)", grade.value)

        self._error_labels: dict[str, QLabel] = {}
        form = QFormLayout()
        form.setSpacing(6)
        for key, label_text, field in (
            ("name", "Course Name*", self.name_input),
            ("credit_units", "Credit Units*", self.credits_input),
            ("grade", "Grade*", self.grade_input),
        ):
            error_label = QLabel("")
            error_label.setObjectName("errorText")
            error_label.hide()
            self._error_labels[key] = error_label
            column = QVBoxLayout()
            column.setSpacing(2)
            column.addWidget(field)
            column.addWidget(error_label)
            form.addRow(label_text, column)

        self.submit_button = QPushButton("Add Course")
        self.submit_button.setObjectName("primaryButton")
        self.submit_button.clicked.connect(self.submit)
        self.cancel_button = QPushButton("Cancel Edit")
        self.cancel_button.setObjectName("secondaryButton")
        self.cancel_button.clicked.connect(self.clear)
        self.cancel_button.hide()
        self.name_input.returnPressed.connect(self.submit)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.cancel_button)
        buttons.addWidget(self.submit_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)
        layout.addWidget(self.title_label)
        layout.addLayout(form)
        layout.addLayout(buttons)

    @property
    def editing_id(self) -> str | None:
        return self._editing_id

    def _fields(self) -> dict[str, QWidget]:
        return {"name": self.name_input, "credit_units": self.credits_input, "grade": self.grade_input}

    def show_errors(self, errors: dict[str, str]) -> None:
        for key, field in self._fields().items():
            message = errors.get(key, "")
            label = self._error_labels[key]
            label.setText(message)
            label.setVisible(bool(message))
            field.setProperty("invalid", bool(message))
            field.style().unpolish(field)
            field.style().polish(field)

    def errors(self) -> dict[str, str]:
        return {key: label.text() for key, label in self._error_labels.items() if label.text()}

    def submit(self) -> Course | None:
        """Validate the fields and emit the course; returns None when invalid."""
        try:
            course = build_course(
                self.name_input.text(),
                self.credits_input.currentData(),
                self.grade_input.currentData(),
                course_id=self._editing_id,
            )
        except CourseValidationError as e:
            self.show_errors(e.errors)
            return None
        self.show_errors({})
        if self._editing_id is None:
            self.course_submitted.emit(course)
        else:
            self.course_edited.emit(course)
        self.clear()
        return course

    def load_course(self, course: Course) -> None:
        """Switch to edit mode for an existing course."""
        self._editing_id = course.id
        self.name_input.setText(course.name)
        self.credits_input.setCurrentIndex(self.credits_input.findData(course.credit_units))
        self.grade_input.setCurrentIndex(self.grade_input.findData(course.grade.value))
        self.title_label.setText("Edit Course")
        self.submit_button.setText("Save Changes")
        self.cancel_button.show()
        self.show_errors({})

    def clear(self) -> None:
        self._editing_id = None
        self.name_input.clear()
        self.credits_input.setCurrentIndex(0)
        self.grade_input.setCurrentIndex(0)
        self.title_label.setText("Add New Course")
        self.submit_button.setText("Add Course")
        self.cancel_button.hide()
