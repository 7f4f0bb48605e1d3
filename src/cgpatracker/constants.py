# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "cgpa-tracker"
APP_TITLE = "CGPA Calculator"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_STATE_FILE = "cgpa_state.json"
STATE_STORAGE_KEY = "cgpaState"

DEFAULT_CSV_FILENAME = "CGPA_Report.csv"
DEFAULT_PDF_FILENAME = "CGPA_Report.pdf"

COURSE_NAME_MAX_LENGTH = 50
CREDIT_UNITS_MIN = 1
CREDIT_UNITS_MAX = 6

CGPA_FORMULA = "CGPA = Total Grade Points / Total Credit Units"

DEFAULT_HOTKEYS = {
    "undo": "Ctrl+Z",
    "redo": "Ctrl+Y",
    "reset": "Ctrl+Shift+R",
    "toggle_theme": "Ctrl+T",
    "export_pdf": "Ctrl+P",
    "export_csv": "Ctrl+E",
}
