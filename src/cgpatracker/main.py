# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QMessageBox

from cgpatracker.config import ConfigError, load_config
from cgpatracker.constants import APP_NAME, APP_TITLE
from cgpatracker.core.store import create_store
from cgpatracker.export.exporter import Exporter
from cgpatracker.gui.controller import AppController
from cgpatracker.gui.main_window import MainWindow
from cgpatracker.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Log uncaught errors before handing them to the default hook."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)
    if QApplication.instance():
        QMessageBox.critical(None, APP_TITLE, f"An unexpected error occurred:\n{exc_value}")
    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cgpa-gui", description=APP_TITLE)
    parser.add_argument("--config", type=Path, default=None, help="Path to settings JSON")
    parser.add_argument("--state-file", type=Path, default=None, help="Override the saved state file")
    parser.add_argument("--ephemeral", action="store_true", help="Keep state in memory only")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Start the GUI application."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    try:
        settings = load_config(args.config)
    except (ConfigError, ValueError, OSError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    log_settings = settings.get("logging", {})
    session_log_path = setup_session_logging(
        Path(log_settings.get("log_dir", ".")),
        APP_NAME,
        file_logging=bool(log_settings.get("file_logging", True)),
    )
    logger = logging.getLogger(__name__)
    sys.excepthook = global_exception_handler

    app = QApplication(sys.argv[:1])
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    store = create_store(settings, state_file=args.state_file, ephemeral=args.ephemeral)
    controller = AppController(store, Exporter.from_config(settings))
    window = MainWindow(settings=settings, controller=controller)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
