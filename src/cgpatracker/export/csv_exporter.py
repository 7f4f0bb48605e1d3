# -*- coding: utf-8 -*-
"""CSV rendering of a course list and its summary."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence

from cgpatracker.models.aggregate import Aggregate
from cgpatracker.models.course import Course


CSV_HEADER = ("Course Name", "Credit Units", "Grade", "Grade Points", "Total Points")


def format_number(value: float) -> str:
    """Render numbers without a trailing ``.0`` (4.0 -> "4", 4.33 -> "4.33")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_csv(courses: Sequence[Course], aggregate: Aggregate) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for course in courses:
        writer.writerow(
            [
                course.name,
                course.credit_units,
                course.grade.value,
                course.grade_points,
                course.total_points,
            ]
        )
    writer.writerow([])
    writer.writerow(["Summary"])
    writer.writerow(["Total Credit Units", format_number(aggregate.total_credits)])
    writer.writerow(["Total Grade Points", format_number(aggregate.total_points)])
    writer.writerow(["CGPA", format_number(aggregate.cgpa)])
    return buffer.getvalue()
