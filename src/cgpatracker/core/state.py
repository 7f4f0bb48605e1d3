# -*- coding: utf-8 -*-
"""Application state container and its persisted snapshot format."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from cgpatracker.models.course import Course

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a persisted snapshot does not describe a valid state."""


def _empty_history() -> tuple[tuple[Course, ...], ...]:
    return ((),)


@dataclass(frozen=True)
class AppState:
    """Immutable state value; every transition produces a new instance.

    ``courses`` always equals ``history[history_index]``; both are tuples.
    """

    courses: tuple[Course, ...] = ()
    history: tuple[tuple[Course, ...], ...] = field(default_factory=_empty_history)
    history_index: int = 0
    dark_mode: bool = False

    @property
    def can_undo(self) -> bool:
        return self.history_index > 0

    @property
    def can_redo(self) -> bool:
        return self.history_index < len(self.history) - 1

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "courses": [course.to_dict() for course in self.courses],
            "history": [[course.to_dict() for course in entry] for entry in self.history],
            "historyIndex": self.history_index,
            "darkMode": self.dark_mode,
        }

    @classmethod
    def from_snapshot(cls, data: Any) -> AppState:
        """Rebuild a state from its persisted form.

        The visible course list is taken from the history entry at the cursor.
        """
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot must be a JSON object")
        try:
            history = tuple(tuple(Course.from_dict(item) for item in entry) for entry in data["history"])
            history_index = data["historyIndex"]
            dark_mode = data.get("darkMode", False)
            stored_courses = tuple(Course.from_dict(item) for item in data.get("courses", []))
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed snapshot: {exc}") from exc

        if not history:
            raise SnapshotError("Snapshot history is empty")
        if isinstance(history_index, bool) or not isinstance(history_index, int):
            raise SnapshotError(f"historyIndex must be an integer, got {history_index!r}")
        if not 0 <= history_index < len(history):
            raise SnapshotError(f"historyIndex {history_index} out of range for {len(history)} entries")
        if not isinstance(dark_mode, bool):
            raise SnapshotError(f"darkMode must be a boolean, got {dark_mode!r}")

        courses = history[history_index]
        if stored_courses != courses:
            logger.warning("Snapshot course list differs from history cursor entry; using history entry")
        return cls(courses=courses, history=history, history_index=history_index, dark_mode=dark_mode)
