# -*- coding: utf-8 -*-
"""Tests for the course form validation contract."""

from __future__ import annotations

import pytest

from cgpatracker.core.validation import CourseValidationError, build_course, validate_course_input
from cgpatracker.models.course import Grade


def test_valid_input_has_no_errors() -> None:
    assert validate_course_input("Calculus", 4, "A") == {}


@pytest.mark.parametrize("name", ["", "   ", None])
def test_name_required(name) -> None:
    assert validate_course_input(name, 3, "A")["name"] == "Course name is required"


def test_name_length_limit() -> None:
    assert validate_course_input("x" * 50, 3, "A") == {}
    assert "50 characters" in validate_course_input("x" * 51, 3, "A")["name"]


@pytest.mark.parametrize("credits", [0, 7, -1, 2.5, "abc", True])
def test_credit_units_range(credits) -> None:
    assert "between 1 and 6" in validate_course_input("Calculus", credits, "A")["credit_units"]


@pytest.mark.parametrize("credits", [None, ""])
def test_credit_units_required(credits) -> None:
    assert validate_course_input("Calculus", credits, "A")["credit_units"] == "Credit units are required"


def test_credit_units_accepts_numeric_string() -> None:
    assert validate_course_input("Calculus", "6", "A") == {}


def test_grade_required_and_closed_set() -> None:
    assert validate_course_input("Calculus", 3, None)["grade"] == "Grade is required"
    assert "A, B, C, D, F" in validate_course_input("Calculus", 3, "E")["grade"]


def test_build_course_trims_and_generates_id() -> None:
    first = build_course("  Calculus  ", "4", "a")
    second = build_course("Calculus", 4, Grade.A)
    assert first.name == "Calculus"
    assert first.credit_units == 4
    assert first.grade is Grade.A
    assert first.id and second.id and first.id != second.id


def test_build_course_keeps_given_id() -> None:
    assert build_course("Calculus", 4, "A", course_id="keep").id == "keep"


def test_build_course_raises_with_all_field_errors() -> None:
    with pytest.raises(CourseValidationError) as excinfo:
        build_course("", 9, "Z")
    assert set(excinfo.value.errors) == {"name", "credit_units", "grade"}
