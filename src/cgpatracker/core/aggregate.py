# -*- coding: utf-8 -*-
"""CGPA computation over a course list."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from cgpatracker.models.aggregate import Aggregate
from cgpatracker.models.course import Course


CGPA_CLASSES: tuple[tuple[float, str], ...] = (
    (4.5, "First Class"),
    (3.5, "Second Class Upper"),
    (2.5, "Second Class Lower"),
    (1.5, "Third Class"),
)


def round_half_up(value: float, places: int = 2) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_aggregate(courses: Iterable[Course]) -> Aggregate:
    """Return credit and point totals plus the CGPA rounded to 2 places."""
    total_credits = 0
    total_points = 0
    for course in courses:
        total_credits += course.credit_units
        total_points += course.credit_units * course.grade.points

    cgpa = total_points / total_credits if total_credits > 0 else 0.0
    return Aggregate(
        total_credits=total_credits,
        total_points=total_points,
        cgpa=round_half_up(cgpa),
    )


def classify_cgpa(cgpa: float) -> str:
    """Map a CGPA on the 5-point scale to its degree class."""
    for threshold, label in CGPA_CLASSES:
        if cgpa >= threshold:
            return label
    if cgpa > 0:
        return "Pass"
    return "N/A"
