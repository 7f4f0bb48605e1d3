# -*- coding: utf-8 -*-
"""Aggregate statistics data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Aggregate:
    """Totals derived from the current course list."""

    total_credits: int = 0
    total_points: int = 0
    cgpa: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalCredits": self.total_credits,
            "totalPoints": self.total_points,
            "cgpa": self.cgpa,
        }
