# -*- coding: utf-8 -*-
"""Durable key-value storage used to persist store snapshots."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from cgpatracker.utils.file_utils import read_json_file, write_json_file

logger = logging.getLogger(__name__)


class StoragePort(Protocol):
    """Minimal string key-value interface the store persists through."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process storage for tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})
        self.write_count = 0

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self.write_count += 1


class JsonFileStorage:
    """Key-value pairs kept as one JSON object on disk.

    Values are opaque strings. A missing file reads as empty; a file that is not
    a JSON object is logged and treated as empty so startup can continue.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = read_json_file(self.path)
        except (OSError, ValueError, RecursionError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        return {str(key): value for key, value in data.items() if isinstance(value, str)}

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        write_json_file(self.path, items)
        logger.debug("Wrote %d bytes for key %s to %s", len(value), key, self.path)
