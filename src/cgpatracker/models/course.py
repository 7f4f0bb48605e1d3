# -*- coding: utf-8 -*-
"""Course record and grade scale data model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Grade(str, Enum):
    """Closed set of letter grades accepted on a course record."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def points(self) -> int:
        return GRADE_POINTS[self]

    @property
    def description(self) -> str:
        return GRADE_DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: Grade | str) -> Grade:
        """Return the grade for a letter, accepting lower case input."""
        if isinstance(value, Grade):
            return value
        letter = str(value).strip().upper()
        try:
            return cls(letter)
        except ValueError:
            raise ValueError(f"Unknown grade: {value!r}") from None


GRADE_POINTS: dict[Grade, int] = {
    Grade.A: 5,
    Grade.B: 4,
    Grade.C: 3,
    Grade.D: 2,
    Grade.F: 0,
}

GRADE_DESCRIPTIONS: dict[Grade, str] = {
    Grade.A: "Excellent",
    Grade.B: "Very Good",
    Grade.C: "Good",
    Grade.D: "Pass",
    Grade.F: "Fail",
}


@dataclass(frozen=True)
class Course:
    """A single course entry on the student's record.

    Records are immutable: the update command swaps in a new record with the
    same ``id``, so history snapshots can share instances safely.
    """

    id: str
    name: str
    credit_units: int
    grade: Grade

    @property
    def grade_points(self) -> int:
        return self.grade.points

    @property
    def total_points(self) -> int:
        return self.credit_units * self.grade.points

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the persisted snapshot field names."""
        return {
            "id": self.id,
            "name": self.name,
            "creditUnits": self.credit_units,
            "grade": self.grade.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Course:
        if not isinstance(data, dict):
            raise ValueError(f"Expected course object, got {type(data).__name__}")
        credit_units = data["creditUnits"]
        if isinstance(credit_units, bool) or not isinstance(credit_units, int):
            raise ValueError(f"creditUnits must be an integer, got {credit_units!r}")
        if credit_units < 1:
            raise ValueError(f"creditUnits must be positive, got {credit_units}")
        name = str(data["name"])
        if not name.strip():
            raise ValueError("Course name must not be empty")
        return cls(
            id=str(data["id"]),
            name=name,
            credit_units=credit_units,
            grade=Grade.parse(data["grade"]),
        )
