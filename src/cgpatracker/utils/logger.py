# -*- coding: utf-8 -*-
"""Session logging for console + file output."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def setup_session_logging(
    base_dir: str | Path,
    app_name: str,
    file_logging: bool = True,
) -> Path | None:
    """Configure root logging once per process and return the session log path.

    Console output is INFO unless ``CGPA_DEBUG`` is set; the session file always
    records DEBUG so store transitions can be traced after the fact.
    """
    root = logging.getLogger()
    if getattr(root, "_cgpatracker_logging_configured", False):
        return getattr(root, "_cgpatracker_session_log", None)

    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        "%(asctime)s %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.DEBUG if _env_bool("CGPA_DEBUG") else logging.INFO)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    session_log_path: Path | None = None
    if file_logging:
        logs_dir = Path(base_dir) / "logs"
        safe_app_name = app_name.lower().replace(" ", "-")
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        session_log_path = logs_dir / f"{safe_app_name}-{timestamp}.log"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
            root.info("Session log file established: %s", session_log_path)
        except OSError as e:
            root.error("Failed to establish session log file: %s", e)
            session_log_path = None

    root._cgpatracker_logging_configured = True  # type: ignore[attr-defined]
    root._cgpatracker_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path
