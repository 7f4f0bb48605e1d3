# -*- coding: utf-8 -*-
"""PDF report generation with reportlab.

Builds a single A4 report: title block, course table, CGPA summary and the
grade-scale reference table.

Example usage:
    from cgpatracker.export.pdf_report import generate_report_pdf

    pdf_bytes = generate_report_pdf(store.courses, store.compute_aggregate())
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from cgpatracker.constants import APP_NAME, CGPA_FORMULA
from cgpatracker.core.aggregate import classify_cgpa
from cgpatracker.export.csv_exporter import format_number
from cgpatracker.models.aggregate import Aggregate
from cgpatracker.models.course import Course, Grade

MARGIN = 14 * mm

COLOR_HEADER = colors.Color(139 / 255, 92 / 255, 246 / 255)
COLOR_ALT_ROW = colors.Color(245 / 255, 245 / 255, 249 / 255)
COLOR_GRID = colors.HexColor("#D0D7E2")

REPORT_TITLE = "CGPA Calculation Report"


def _table_style(alternate_rows: bool) -> TableStyle:
    commands = [
        ("BACKGROUND", (0, 0), (-1, 0), COLOR_HEADER),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("ALIGN", (1, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.25, COLOR_GRID),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
    ]
    if alternate_rows:
        commands.append(("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, COLOR_ALT_ROW]))
    return TableStyle(commands)


def create_course_table(courses: Sequence[Course], cell_style: ParagraphStyle) -> Table:
    rows: list[list] = [["Course Name", "Credits", "Grade", "Grade Points", "Total Points"]]
    for course in courses:
        rows.append(
            [
                Paragraph(escape(course.name), cell_style),
                course.credit_units,
                course.grade.value,
                course.grade_points,
                course.total_points,
            ]
        )
    table = Table(rows, colWidths=[72 * mm, 22 * mm, 22 * mm, 28 * mm, 28 * mm], repeatRows=1)
    table.setStyle(_table_style(alternate_rows=True))
    return table


def create_grade_scale_table() -> Table:
    rows: list[list] = [["Grade", "Points", "Description"]]
    for grade in Grade:
        rows.append([grade.value, f"{grade.points:.1f}", grade.description])
    table = Table(rows, colWidths=[25 * mm, 25 * mm, 45 * mm], hAlign="LEFT")
    table.setStyle(_table_style(alternate_rows=False))
    return table


def create_summary_section(aggregate: Aggregate, styles) -> list:
    body = styles["BodyText"]
    small = ParagraphStyle("Formula", parent=body, fontSize=9, textColor=colors.HexColor("#4B5563"))
    return [
        Paragraph("CGPA Summary", styles["Heading2"]),
        Paragraph(f"Total Credit Units: {aggregate.total_credits}", body),
        Paragraph(f"Total Grade Points: {format_number(aggregate.total_points)}", body),
        Paragraph(f"CGPA = {format_number(aggregate.cgpa)}", body),
        Paragraph(f"Class: {classify_cgpa(aggregate.cgpa)}", body),
        Spacer(1, 3 * mm),
        Paragraph(f"Formula: {CGPA_FORMULA}", small),
    ]


def generate_report_pdf(
    courses: Sequence[Course],
    aggregate: Aggregate,
    generated_on: date | None = None,
) -> bytes:
    """Render the CGPA report and return the PDF bytes."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        topMargin=MARGIN,
        bottomMargin=MARGIN,
        title=REPORT_TITLE,
        author=APP_NAME,
    )
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle("ReportTitle", parent=styles["Title"], fontSize=20, alignment=TA_CENTER)
    subtitle_style = ParagraphStyle("ReportDate", parent=styles["Normal"], fontSize=12, alignment=TA_CENTER)
    cell_style = ParagraphStyle("Cell", parent=styles["BodyText"], fontSize=10, leading=12)

    when = generated_on or date.today()
    elements = [
        Paragraph(REPORT_TITLE, title_style),
        Paragraph(f"Generated on {when.strftime('%Y-%m-%d')}", subtitle_style),
        Spacer(1, 8 * mm),
        create_course_table(courses, cell_style),
        Spacer(1, 10 * mm),
        *create_summary_section(aggregate, styles),
        Spacer(1, 8 * mm),
        Paragraph("Grade Scale:", styles["Heading3"]),
        create_grade_scale_table(),
    ]
    doc.build(elements)
    return buffer.getvalue()
