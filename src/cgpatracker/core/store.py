# -*- coding: utf-8 -*-
"""Course state store with undo/redo history and write-through persistence."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from cgpatracker.constants import DEFAULT_STATE_FILE, STATE_STORAGE_KEY
from cgpatracker.core.actions import MUTATING_ACTIONS, Action, reduce
from cgpatracker.core.aggregate import compute_aggregate
from cgpatracker.core.state import AppState
from cgpatracker.core.storage import JsonFileStorage, MemoryStorage, StoragePort
from cgpatracker.models.aggregate import Aggregate
from cgpatracker.models.course import Course

logger = logging.getLogger(__name__)


StateListener = Callable[[AppState], None]


class CourseStateStore:
    """Single source of truth for courses, edit history and the theme flag.

    Commands run synchronously: reduce, swap state, persist, notify. The
    durable copy is read once, in the constructor.
    """

    def __init__(
        self,
        storage: StoragePort,
        storage_key: str = STATE_STORAGE_KEY,
        record_noop_commands: bool = True,
    ) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._record_noop_commands = record_noop_commands
        self._listeners: list[StateListener] = []
        self.last_persist_error: Exception | None = None
        self._state = self._load()

    def _load(self) -> AppState:
        try:
            raw = self._storage.get_item(self._storage_key)
        except OSError:
            logger.exception("Could not read saved state; starting empty")
            return AppState()
        if raw is None:
            logger.info("No saved state under %s; starting empty", self._storage_key)
            return AppState()
        try:
            state = AppState.from_snapshot(json.loads(raw))
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError and SnapshotError are ValueErrors; deep nesting raises RecursionError
            logger.error("Error loading saved state, falling back to defaults: %s", exc)
            return AppState()
        logger.info(
            "Loaded saved state: %d courses, history %d/%d",
            len(state.courses),
            state.history_index + 1,
            len(state.history),
        )
        return state

    def _persist(self) -> None:
        payload = json.dumps(self._state.to_snapshot(), ensure_ascii=False, separators=(",", ":"))
        try:
            self._storage.set_item(self._storage_key, payload)
        except OSError as exc:
            self.last_persist_error = exc
            logger.exception("Failed to persist state under %s", self._storage_key)
        else:
            self.last_persist_error = None

    def dispatch(self, action: Action) -> AppState:
        """Apply an action, persist the result and notify listeners."""
        previous = self._state
        self._state = reduce(previous, action, record_noop_commands=self._record_noop_commands)
        if self._state is previous:
            logger.debug("%s was a no-op", action.type.value)
        elif action.type in MUTATING_ACTIONS:
            logger.debug(
                "%s committed: %d courses, cursor %d of %d",
                action.type.value,
                len(self._state.courses),
                self._state.history_index,
                len(self._state.history) - 1,
            )
        self._persist()
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener %r failed", listener)
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a callback for every transition and return its unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Commands

    def add_course(self, course: Course) -> None:
        self.dispatch(Action.add(course))

    def remove_course(self, course_id: str) -> None:
        self.dispatch(Action.remove(course_id))

    def update_course(self, course: Course) -> None:
        self.dispatch(Action.update(course))

    def reset_all(self) -> None:
        self.dispatch(Action.reset())

    def undo(self) -> None:
        self.dispatch(Action.undo())

    def redo(self) -> None:
        self.dispatch(Action.redo())

    def toggle_dark_mode(self) -> None:
        self.dispatch(Action.toggle_dark_mode())

    # Queries

    def compute_aggregate(self) -> Aggregate:
        return compute_aggregate(self._state.courses)

    def find_course(self, course_id: str) -> Course | None:
        for course in self._state.courses:
            if course.id == course_id:
                return course
        return None

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def courses(self) -> list[Course]:
        return list(self._state.courses)

    @property
    def history(self) -> list[list[Course]]:
        return [list(entry) for entry in self._state.history]

    @property
    def history_index(self) -> int:
        return self._state.history_index

    @property
    def dark_mode(self) -> bool:
        return self._state.dark_mode

    @property
    def can_undo(self) -> bool:
        return self._state.can_undo

    @property
    def can_redo(self) -> bool:
        return self._state.can_redo


def create_store(
    config: dict[str, Any],
    state_file: str | Path | None = None,
    ephemeral: bool = False,
) -> CourseStateStore:
    """Build a store wired to the storage described by ``config``."""
    storage_config = config.get("storage", {})
    storage: StoragePort
    if ephemeral:
        storage = MemoryStorage()
    else:
        storage = JsonFileStorage(state_file or storage_config.get("state_file", DEFAULT_STATE_FILE))
    return CourseStateStore(
        storage,
        storage_key=storage_config.get("state_key", STATE_STORAGE_KEY),
        record_noop_commands=bool(config.get("history", {}).get("record_noop_commands", True)),
    )
