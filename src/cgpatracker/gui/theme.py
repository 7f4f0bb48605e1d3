# -*- coding: utf-8 -*-
"""Light and dark stylesheets for the main window."""

from __future__ import annotations

_TEMPLATE = """
QMainWindow, QWidget {{
    background: {background};
    color: {text};
    font-family: "Segoe UI", "Noto Sans", sans-serif;
    font-size: 12px;
}}
QLabel#appTitle {{
    font-size: 22px;
    font-weight: 700;
    color: {title};
}}
QLabel#sectionTitle {{
    font-size: 14px;
    font-weight: 700;
    color: {title};
}}
QLabel#mutedText {{
    color: {muted};
}}
QLabel#errorText {{
    color: #f87171;
}}
QLabel#cgpaValue {{
    font-size: 34px;
    font-weight: 800;
    color: {accent};
}}
QLabel#statValue {{
    font-size: 20px;
    font-weight: 700;
}}
QWidget#panelCard {{
    background: {card};
    border: 1px solid {border};
    border-radius: 10px;
}}
QLineEdit, QComboBox, QListWidget {{
    background: {card};
    border: 1px solid {border};
    border-radius: 6px;
    padding: 4px 6px;
}}
QLineEdit[invalid="true"], QComboBox[invalid="true"] {{
    border-color: #f87171;
}}
QPushButton#primaryButton {{
    background: {accent};
    color: white;
    border: 1px solid {accent};
    border-radius: 8px;
    padding: 7px 14px;
    font-weight: 700;
}}
QPushButton#secondaryButton {{
    background: {card};
    border: 1px solid {border};
    border-radius: 8px;
    padding: 7px 12px;
}}
QPushButton#dangerButton {{
    background: {card};
    color: #dc2626;
    border: 1px solid #fca5a5;
    border-radius: 8px;
    padding: 7px 12px;
}}
QPushButton:disabled {{
    color: {muted};
}}
"""

LIGHT_PALETTE = {
    "background": "#f3f5f8",
    "text": "#1f2937",
    "title": "#0f172a",
    "muted": "#6b7280",
    "card": "#ffffff",
    "border": "#d0d7e2",
    "accent": "#8b5cf6",
}

DARK_PALETTE = {
    "background": "#0f172a",
    "text": "#e5e7eb",
    "title": "#f8fafc",
    "muted": "#94a3b8",
    "card": "#1e293b",
    "border": "#334155",
    "accent": "#a78bfa",
}


def stylesheet_for(dark_mode: bool) -> str:
    return _TEMPLATE.format(**(DARK_PALETTE if dark_mode else LIGHT_PALETTE))
