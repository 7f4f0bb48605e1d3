# -*- coding: utf-8 -*-
"""Write CSV and PDF reports for the current course list."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from cgpatracker.constants import DEFAULT_CSV_FILENAME, DEFAULT_PDF_FILENAME
from cgpatracker.export.csv_exporter import render_csv
from cgpatracker.export.pdf_report import generate_report_pdf
from cgpatracker.models.aggregate import Aggregate
from cgpatracker.models.course import Course
from cgpatracker.utils.file_utils import ensure_dir, write_bytes_file, write_text_file

logger = logging.getLogger(__name__)


class NothingToExportError(RuntimeError):
    """Raised when an export is requested for an empty course list."""

    def __init__(self) -> None:
        super().__init__("No data to export. Please add some courses before exporting.")


class Exporter:
    """Export the course list and summary into the configured output directory."""

    def __init__(
        self,
        output_dir: str | Path = "exports",
        csv_filename: str = DEFAULT_CSV_FILENAME,
        pdf_filename: str = DEFAULT_PDF_FILENAME,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.csv_filename = csv_filename
        self.pdf_filename = pdf_filename

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> Exporter:
        export = config.get("export", {})
        return cls(
            output_dir=export.get("output_dir", "exports"),
            csv_filename=export.get("csv_filename", DEFAULT_CSV_FILENAME),
            pdf_filename=export.get("pdf_filename", DEFAULT_PDF_FILENAME),
        )

    def default_path(self, kind: str) -> Path:
        filename = self.csv_filename if kind == "csv" else self.pdf_filename
        return self.output_dir / filename

    def _target(self, path: str | Path | None, kind: str) -> Path:
        target = Path(path) if path is not None else self.default_path(kind)
        ensure_dir(target.parent)
        return target

    def export_csv(
        self,
        courses: Sequence[Course],
        aggregate: Aggregate,
        path: str | Path | None = None,
    ) -> Path:
        if not courses:
            logger.warning("CSV export skipped: no courses")
            raise NothingToExportError()
        target = write_text_file(self._target(path, "csv"), render_csv(courses, aggregate))
        logger.info("Exported %d courses to CSV: %s", len(courses), target)
        return target

    def export_pdf(
        self,
        courses: Sequence[Course],
        aggregate: Aggregate,
        path: str | Path | None = None,
    ) -> Path:
        if not courses:
            logger.warning("PDF export skipped: no courses")
            raise NothingToExportError()
        target = write_bytes_file(self._target(path, "pdf"), generate_report_pdf(courses, aggregate))
        logger.info("Exported %d courses to PDF: %s", len(courses), target)
        return target
