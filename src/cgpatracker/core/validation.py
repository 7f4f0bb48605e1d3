# -*- coding: utf-8 -*-
"""Course form validation and record construction."""

from __future__ import annotations

import uuid
from typing import Any

from cgpatracker.constants import COURSE_NAME_MAX_LENGTH, CREDIT_UNITS_MAX, CREDIT_UNITS_MIN
from cgpatracker.models.course import Course, Grade


class CourseValidationError(ValueError):
    """Raised when course form input is invalid. ``errors`` maps field to message."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()))


def new_course_id() -> str:
    return uuid.uuid4().hex


def _parse_credit_units(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and value.strip().lstrip("+-").isdigit():
        return int(value.strip())
    return None


def validate_course_input(name: Any, credit_units: Any, grade: Any) -> dict[str, str]:
    """Return field errors for a course form submission; empty when valid."""
    errors: dict[str, str] = {}

    name_text = str(name or "").strip()
    if not name_text:
        errors["name"] = "Course name is required"
    elif len(name_text) > COURSE_NAME_MAX_LENGTH:
        errors["name"] = f"Course name must not exceed {COURSE_NAME_MAX_LENGTH} characters"

    if credit_units is None or (isinstance(credit_units, str) and not credit_units.strip()):
        errors["credit_units"] = "Credit units are required"
    else:
        parsed = _parse_credit_units(credit_units)
        if parsed is None or not CREDIT_UNITS_MIN <= parsed <= CREDIT_UNITS_MAX:
            errors["credit_units"] = (
                f"Credit units must be a whole number between {CREDIT_UNITS_MIN} and {CREDIT_UNITS_MAX}"
            )

    if grade is None or (isinstance(grade, str) and not grade.strip()):
        errors["grade"] = "Grade is required"
    else:
        try:
            Grade.parse(grade)
        except ValueError:
            errors["grade"] = "Grade must be one of " + ", ".join(g.value for g in Grade)

    return errors


def build_course(name: Any, credit_units: Any, grade: Any, course_id: str | None = None) -> Course:
    """Validate form input and return a ready-to-store course record."""
    errors = validate_course_input(name, credit_units, grade)
    if errors:
        raise CourseValidationError(errors)
    return Course(
        id=course_id or new_course_id(),
        name=str(name).strip(),
        credit_units=_parse_credit_units(credit_units),  # type: ignore[arg-type]
        grade=Grade.parse(grade),
    )
