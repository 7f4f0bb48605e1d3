# -*- coding: utf-8 -*-
"""Store actions and the pure reducer that applies them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from cgpatracker.core.state import AppState
from cgpatracker.models.course import Course


class ActionType(str, Enum):
    ADD_COURSE = "add_course"
    REMOVE_COURSE = "remove_course"
    UPDATE_COURSE = "update_course"
    RESET_ALL = "reset_all"
    UNDO = "undo"
    REDO = "redo"
    TOGGLE_DARK_MODE = "toggle_dark_mode"


MUTATING_ACTIONS = frozenset(
    {
        ActionType.ADD_COURSE,
        ActionType.REMOVE_COURSE,
        ActionType.UPDATE_COURSE,
        ActionType.RESET_ALL,
    }
)


@dataclass(frozen=True)
class Action:
    """A command for the store. ``course`` or ``course_id`` is set as the type needs."""

    type: ActionType
    course: Course | None = None
    course_id: str | None = None

    @classmethod
    def add(cls, course: Course) -> Action:
        return cls(ActionType.ADD_COURSE, course=course)

    @classmethod
    def remove(cls, course_id: str) -> Action:
        return cls(ActionType.REMOVE_COURSE, course_id=course_id)

    @classmethod
    def update(cls, course: Course) -> Action:
        return cls(ActionType.UPDATE_COURSE, course=course)

    @classmethod
    def reset(cls) -> Action:
        return cls(ActionType.RESET_ALL)

    @classmethod
    def undo(cls) -> Action:
        return cls(ActionType.UNDO)

    @classmethod
    def redo(cls) -> Action:
        return cls(ActionType.REDO)

    @classmethod
    def toggle_dark_mode(cls) -> Action:
        return cls(ActionType.TOGGLE_DARK_MODE)


def _commit(state: AppState, courses: tuple[Course, ...]) -> AppState:
    # Truncate any undone branch, append, advance to the end.
    history = state.history[: state.history_index + 1] + (courses,)
    return replace(state, courses=courses, history=history, history_index=len(history) - 1)


def _remove(courses: tuple[Course, ...], course_id: str | None) -> tuple[Course, ...]:
    for index, course in enumerate(courses):
        if course.id == course_id:
            return courses[:index] + courses[index + 1 :]
    return courses


def _update(courses: tuple[Course, ...], updated: Course) -> tuple[Course, ...]:
    return tuple(updated if course.id == updated.id else course for course in courses)


def reduce(state: AppState, action: Action, record_noop_commands: bool = True) -> AppState:
    """Return the state that results from applying ``action`` to ``state``.

    Returns ``state`` itself when the action changes nothing, so callers can
    use identity to detect a no-op.
    """
    if action.type is ActionType.ADD_COURSE:
        if action.course is None:
            raise ValueError("add_course requires a course")
        return _commit(state, state.courses + (action.course,))

    if action.type is ActionType.REMOVE_COURSE:
        courses = _remove(state.courses, action.course_id)
        if courses == state.courses and not record_noop_commands:
            return state
        return _commit(state, courses)

    if action.type is ActionType.UPDATE_COURSE:
        if action.course is None:
            raise ValueError("update_course requires a course")
        courses = _update(state.courses, action.course)
        if courses == state.courses and not record_noop_commands:
            return state
        return _commit(state, courses)

    if action.type is ActionType.RESET_ALL:
        return _commit(state, ())

    if action.type is ActionType.UNDO:
        if not state.can_undo:
            return state
        index = state.history_index - 1
        return replace(state, courses=state.history[index], history_index=index)

    if action.type is ActionType.REDO:
        if not state.can_redo:
            return state
        index = state.history_index + 1
        return replace(state, courses=state.history[index], history_index=index)

    if action.type is ActionType.TOGGLE_DARK_MODE:
        return replace(state, dark_mode=not state.dark_mode)

    raise ValueError(f"Unsupported action: {action.type!r}")
