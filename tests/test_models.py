# -*- coding: utf-8 -*-
"""Tests for course and grade models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from cgpatracker.models.course import GRADE_POINTS, Course, Grade


def test_grade_points_cover_every_grade() -> None:
    assert set(GRADE_POINTS) == set(Grade)
    assert [g.points for g in Grade] == [5, 4, 3, 2, 0]


def test_grade_parse_accepts_lower_case() -> None:
    assert Grade.parse(" b ") is Grade.B


def test_grade_parse_rejects_unknown_letter() -> None:
    with pytest.raises(ValueError):
        Grade.parse("E")


def test_course_totals(calculus: Course) -> None:
    assert calculus.grade_points == 5
    assert calculus.total_points == 20


def test_course_is_immutable(calculus: Course) -> None:
    with pytest.raises(FrozenInstanceError):
        calculus.name = "Changed"  # type: ignore[misc]


def test_course_dict_round_trip(calculus: Course) -> None:
    data = calculus.to_dict()
    assert data == {"id": "c1", "name": "Calculus", "creditUnits": 4, "grade": "A"}
    assert Course.from_dict(data) == calculus


def test_course_from_dict_rejects_fractional_credits() -> None:
    with pytest.raises(ValueError):
        Course.from_dict({"id": "x", "name": "X", "creditUnits": 2.5, "grade": "A"})


@pytest.mark.parametrize("credits", [0, -3])
def test_course_from_dict_rejects_non_positive_credits(credits: int) -> None:
    with pytest.raises(ValueError, match="positive"):
        Course.from_dict({"id": "x", "name": "X", "creditUnits": credits, "grade": "A"})


def test_course_from_dict_rejects_blank_name() -> None:
    with pytest.raises(ValueError, match="empty"):
        Course.from_dict({"id": "x", "name": "  ", "creditUnits": 3, "grade": "A"})
