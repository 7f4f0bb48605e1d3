# -*- coding: utf-8 -*-
"""CGPA summary card."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QGridLayout, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from cgpatracker.constants import CGPA_FORMULA
from cgpatracker.core.aggregate import classify_cgpa
from cgpatracker.export.csv_exporter import format_number
from cgpatracker.models.aggregate import Aggregate


class SummaryWidget(QWidget):
    """Display totals, the CGPA and its class, with export buttons."""

    export_pdf_requested = pyqtSignal()
    export_csv_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("panelCard")

        self.title_label = QLabel("CGPA Summary")
        self.title_label.setObjectName("sectionTitle")
        self.formula_label = QLabel(CGPA_FORMULA)
        self.formula_label.setObjectName("mutedText")

        self.credits_value = QLabel("0")
        self.credits_value.setObjectName("statValue")
        self.points_value = QLabel("0")
        self.points_value.setObjectName("statValue")
        stats = QGridLayout()
        for column, (caption, value_label) in enumerate(
            (("Total Credits", self.credits_value), ("Total Points", self.points_value))
        ):
            caption_label = QLabel(caption)
            caption_label.setObjectName("mutedText")
            stats.addWidget(caption_label, 0, column)
            stats.addWidget(value_label, 1, column)

        caption = QLabel("Your CGPA")
        caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.cgpa_value = QLabel("0.00")
        self.cgpa_value.setObjectName("cgpaValue")
        self.cgpa_value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.class_label = QLabel("N/A")
        self.class_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.export_csv_button = QPushButton("Export as CSV")
        self.export_csv_button.setObjectName("secondaryButton")
        self.export_csv_button.clicked.connect(lambda: self.export_csv_requested.emit())
        self.export_pdf_button = QPushButton("Export as PDF")
        self.export_pdf_button.setObjectName("secondaryButton")
        self.export_pdf_button.clicked.connect(lambda: self.export_pdf_requested.emit())
        footer = QHBoxLayout()
        footer.addStretch(1)
        footer.addWidget(self.export_csv_button)
        footer.addWidget(self.export_pdf_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(8)
        layout.addWidget(self.title_label)
        layout.addWidget(self.formula_label)
        layout.addLayout(stats)
        layout.addWidget(caption)
        layout.addWidget(self.cgpa_value)
        layout.addWidget(self.class_label)
        layout.addStretch(1)
        layout.addLayout(footer)

    def set_aggregate(self, aggregate: Aggregate) -> None:
        self.credits_value.setText(str(aggregate.total_credits))
        self.points_value.setText(format_number(aggregate.total_points))
        self.cgpa_value.setText(f"{aggregate.cgpa:.2f}")
        self.class_label.setText(classify_cgpa(aggregate.cgpa))
