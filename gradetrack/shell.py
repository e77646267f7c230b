# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
gradetrack Interactive Shell

Menu-driven loop over a single Roster. Every menu entry maps to one
Roster or store operation; failures are reported and the loop continues.
"""

from __future__ import annotations

import logging
from typing import Optional

import click

from gradetrack.report import format_listing, format_summary
from gradetrack.roster import InvalidGradeError, Roster
from gradetrack.store import RosterIOError, export_file, import_file

logger = logging.getLogger(__name__)

MENU = """
Menu:
1) Add new student
2) Add grade to student
3) Remove student
4) Show summary report
5) Export to CSV
6) Import from CSV
7) List students
0) Exit"""


def _ask(text: str, default: str = "") -> str:
    return click.prompt(text, default=default, show_default=bool(default)).strip()


class GradeShell:
    """Interactive front end for a Roster."""

    def __init__(self, roster: Roster, data_file: Optional[str] = None,
                 decimals: int = 2):
        self.roster = roster
        self.data_file = data_file or ""
        self.decimals = decimals
        self.handlers = {
            "1": self.add_student,
            "2": self.add_grade,
            "3": self.remove_student,
            "4": self.show_summary,
            "5": self.export_csv,
            "6": self.import_csv,
            "7": self.list_students,
        }

    def run(self) -> None:
        click.echo("=== Student Grade Tracker ===")
        try:
            while True:
                click.echo(MENU)
                choice = _ask("Choose")
                if choice == "0":
                    break
                handler = self.handlers.get(choice)
                if handler is None:
                    click.echo("Invalid option. Try again.")
                    continue
                handler()
        except click.Abort:
            # end of input
            click.echo()
        click.echo("Goodbye!")

    # ── Menu actions ─────────────────────────────────────────────────

    def add_student(self) -> None:
        name = _ask("Enter student name")
        if not name:
            click.echo("Name cannot be empty.")
            return
        if self.roster.add_student(name):
            click.echo(f"Added student: {name}")
        else:
            click.echo("Student already exists. Use a different name or update existing.")

    def add_grade(self) -> None:
        name = _ask("Enter student name")
        if not name:
            click.echo("Name cannot be empty.")
            return
        record = self.roster.find_by_name(name)
        if record is None:
            answer = _ask("Student not found. Add them first? (y/n)")
            if answer.lower() != "y":
                return
            self.roster.add_student(name)
            record = self.roster.find_by_name(name)

        raw = _ask("Enter grade (numeric)")
        try:
            grade = float(raw)
        except ValueError:
            click.echo("Invalid number.")
            return
        try:
            self.roster.add_grade(record, grade)
        except InvalidGradeError:
            click.echo("Grade must be >= 0")
            return
        click.echo(f"Added grade {grade} to {record.name}")

    def remove_student(self) -> None:
        name = _ask("Enter student name to remove")
        if self.roster.remove_student(name):
            click.echo("Removed.")
        else:
            click.echo("Student not found.")

    def show_summary(self) -> None:
        click.echo(format_summary(self.roster, self.decimals))

    def export_csv(self) -> None:
        filename = _ask("Enter filename to export (e.g., students.csv)", self.data_file)
        if not filename:
            click.echo("Filename empty.")
            return
        try:
            export_file(self.roster, filename)
        except RosterIOError as e:
            logger.debug(f"Export failed: {e}")
            click.echo(f"Error exporting CSV: {e.cause}")
            return
        click.echo(f"Exported to {filename}")

    def import_csv(self) -> None:
        filename = _ask("Enter filename to import (e.g., students.csv)", self.data_file)
        if not filename:
            click.echo("Filename empty.")
            return
        try:
            count = import_file(filename, self.roster)
        except RosterIOError as e:
            logger.debug(f"Import failed: {e}")
            click.echo(f"Error importing CSV: {e.cause}")
            return
        click.echo(f"Imported {count} lines from CSV.")

    def list_students(self) -> None:
        click.echo(format_listing(self.roster, self.decimals))
