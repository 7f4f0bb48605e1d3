# -*- coding: utf-8 -*-
"""File helpers with UTF-8 defaults and atomic replacement."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def ensure_dir(path: str | Path) -> Path:
    """Create a directory if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def _atomic_write(path: Path, payload: bytes) -> Path:
    ensure_dir(path.parent)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return path


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON file that must contain an object."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object in {file_path}")
    return data


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Write JSON with indentation, replacing the target atomically."""
    payload = json.dumps(data, indent=2, ensure_ascii=True) + "\n"
    return _atomic_write(Path(path), payload.encode("utf-8"))


def write_text_file(path: str | Path, content: str) -> Path:
    """Write a UTF-8 text file."""
    return _atomic_write(Path(path), content.encode("utf-8"))


def write_bytes_file(path: str | Path, content: bytes) -> Path:
    return _atomic_write(Path(path), content)
