# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from cgpatracker.core.storage import MemoryStorage  # noqa: E402
from cgpatracker.core.store import CourseStateStore  # noqa: E402
from cgpatracker.models.course import Course, Grade  # noqa: E402


def make_course(course_id: str, name: str, credit_units: int, grade: str) -> Course:
    return Course(id=course_id, name=name, credit_units=credit_units, grade=Grade(grade))


@pytest.fixture
def calculus() -> Course:
    return make_course("c1", "Calculus", 4, "A")


@pytest.fixture
def history_course() -> Course:
    return make_course("c2", "History", 2, "C")


@pytest.fixture
def physics() -> Course:
    return make_course("c3", "Physics", 3, "B")


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(memory_storage: MemoryStorage) -> CourseStateStore:
    return CourseStateStore(memory_storage)


@pytest.fixture
def populated_store(store: CourseStateStore, calculus: Course, history_course: Course) -> CourseStateStore:
    store.add_course(calculus)
    store.add_course(history_course)
    return store


@pytest.fixture
def default_config() -> dict:
    from cgpatracker.config import get_default_config

    return get_default_config()


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
