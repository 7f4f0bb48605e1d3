# -*- coding: utf-8 -*-
"""CLI commands for managing courses and exporting CGPA reports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from cgpatracker.config import ConfigError, load_config
from cgpatracker.core.aggregate import classify_cgpa
from cgpatracker.core.store import CourseStateStore, create_store
from cgpatracker.core.validation import CourseValidationError, build_course
from cgpatracker.export.csv_exporter import format_number
from cgpatracker.export.exporter import Exporter, NothingToExportError
from cgpatracker.models.course import Course

app = typer.Typer(help="Track courses and calculate your CGPA")
logger = logging.getLogger(__name__)


@dataclass
class CliContext:
    settings: dict[str, Any]
    store: CourseStateStore


def _ctx(ctx: typer.Context) -> CliContext:
    return ctx.obj


def _describe(course: Course) -> str:
    unit_label = "Credit" if course.credit_units == 1 else "Credits"
    return (
        f"{course.name} - {course.credit_units} {unit_label}, "
        f"Grade {course.grade.value} ({course.grade_points}.0)"
    )


def _fail(message: str, code: int = 1) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code)


@app.callback()
def main(
    ctx: typer.Context,
    config: Path = typer.Option(None, "--config", help="Path to settings JSON"),
    state_file: Path = typer.Option(None, "--state-file", help="Override the saved state file"),
    verbose: bool = typer.Option(False, help="Verbose output"),
) -> None:
    """Load settings and the saved course state for this invocation."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        settings = load_config(config)
    except (ConfigError, ValueError, OSError) as e:
        _fail(f"Invalid settings: {e}", code=2)
    ctx.obj = CliContext(settings=settings, store=create_store(settings, state_file=state_file))


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Course name (max 50 characters)"),
    credits: str = typer.Argument(..., help="Credit units, 1 to 6"),
    grade: str = typer.Argument(..., help="Letter grade: A, B, C, D or F"),
) -> None:
    """Add a course."""
    store = _ctx(ctx).store
    try:
        course = build_course(name, credits, grade)
    except CourseValidationError as e:
        for message in e.errors.values():
            typer.echo(message, err=True)
        raise typer.Exit(1)
    store.add_course(course)
    typer.echo(f"Course Added: {course.name} has been added to your course list. [id: {course.id}]")


@app.command()
def update(
    ctx: typer.Context,
    course_id: str = typer.Argument(..., help="Id of the course to change"),
    name: str = typer.Option(None, help="New course name"),
    credits: str = typer.Option(None, help="New credit units"),
    grade: str = typer.Option(None, help="New letter grade"),
) -> None:
    """Change fields of an existing course."""
    store = _ctx(ctx).store
    existing = store.find_course(course_id)
    if existing is None:
        _fail(f"No course with id {course_id}")
    try:
        course = build_course(
            name if name is not None else existing.name,
            credits if credits is not None else existing.credit_units,
            grade if grade is not None else existing.grade,
            course_id=existing.id,
        )
    except CourseValidationError as e:
        for message in e.errors.values():
            typer.echo(message, err=True)
        raise typer.Exit(1)
    store.update_course(course)
    typer.echo(f"Course Updated: {_describe(course)}")


@app.command()
def remove(
    ctx: typer.Context,
    course_id: str = typer.Argument(..., help="Id of the course to remove"),
) -> None:
    """Remove a course."""
    store = _ctx(ctx).store
    existing = store.find_course(course_id)
    store.remove_course(course_id)
    if existing is None:
        typer.echo(f"No course with id {course_id}; course list unchanged.")
    else:
        typer.echo(f"Course Removed: {existing.name} has been removed from your course list.")


@app.command("list")
def list_courses(ctx: typer.Context) -> None:
    """Show the course list."""
    courses = _ctx(ctx).store.courses
    if not courses:
        typer.echo("No courses added yet.")
        return
    for course in courses:
        typer.echo(f"{course.id}  {_describe(course)}")


@app.command()
def summary(ctx: typer.Context) -> None:
    """Show total credits, total points and CGPA."""
    aggregate = _ctx(ctx).store.compute_aggregate()
    typer.echo(f"Total Credits: {aggregate.total_credits}")
    typer.echo(f"Total Points: {format_number(aggregate.total_points)}")
    typer.echo(f"CGPA: {aggregate.cgpa:.2f}")
    typer.echo(f"Class: {classify_cgpa(aggregate.cgpa)}")


@app.command()
def undo(ctx: typer.Context) -> None:
    """Undo the last course change."""
    store = _ctx(ctx).store
    if not store.can_undo:
        typer.echo("Nothing to undo.")
        return
    store.undo()
    typer.echo(f"Undone. {len(store.courses)} courses in list.")


@app.command()
def redo(ctx: typer.Context) -> None:
    """Redo the last undone course change."""
    store = _ctx(ctx).store
    if not store.can_redo:
        typer.echo("Nothing to redo.")
        return
    store.redo()
    typer.echo(f"Redone. {len(store.courses)} courses in list.")


@app.command()
def reset(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Remove all courses (undoable)."""
    store = _ctx(ctx).store
    if not store.courses:
        typer.echo("There are no courses to reset.")
        return
    if not yes:
        typer.confirm(f"Remove all {len(store.courses)} courses?", abort=True)
    store.reset_all()
    typer.echo("All Courses Reset: all courses have been removed.")


@app.command()
def theme(ctx: typer.Context) -> None:
    """Toggle dark mode for the GUI."""
    store = _ctx(ctx).store
    store.toggle_dark_mode()
    typer.echo(f"Dark mode: {'on' if store.dark_mode else 'off'}")


@app.command()
def history(ctx: typer.Context) -> None:
    """Show the undo history, marking the current entry."""
    store = _ctx(ctx).store
    for index, entry in enumerate(store.history):
        marker = "*" if index == store.history_index else " "
        names = ", ".join(course.name for course in entry) or "(empty)"
        typer.echo(f"{marker} {index}: {names}")


@app.command("export-csv")
def export_csv(
    ctx: typer.Context,
    output_path: Path = typer.Argument(None, help="Output CSV path (default from settings)"),
) -> None:
    """Export the course list and summary as CSV."""
    cli = _ctx(ctx)
    try:
        target = Exporter.from_config(cli.settings).export_csv(
            cli.store.courses, cli.store.compute_aggregate(), output_path
        )
    except NothingToExportError as e:
        _fail(str(e))
    typer.echo(f"CSV report saved to: {target}")


@app.command("export-pdf")
def export_pdf(
    ctx: typer.Context,
    output_path: Path = typer.Argument(None, help="Output PDF path (default from settings)"),
) -> None:
    """Export the CGPA report as PDF."""
    cli = _ctx(ctx)
    try:
        target = Exporter.from_config(cli.settings).export_pdf(
            cli.store.courses, cli.store.compute_aggregate(), output_path
        )
    except NothingToExportError as e:
        _fail(str(e))
    typer.echo(f"PDF report saved to: {target}")


if __name__ == "__main__":
    app()
