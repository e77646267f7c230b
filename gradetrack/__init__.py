# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
gradetrack — Student Grade Tracker

In-memory roster of students and their grades, with per-student and
roster-wide statistics and a plain-text import/export format.
"""

from gradetrack.roster import InvalidGradeError, Roster, StudentRecord
from gradetrack.store import (
    DELIMITER,
    RosterIOError,
    export_all,
    export_file,
    import_all,
    import_file,
)

__version__ = "0.1.0"

__all__ = [
    "Roster",
    "StudentRecord",
    "InvalidGradeError",
    "RosterIOError",
    "DELIMITER",
    "export_all",
    "import_all",
    "export_file",
    "import_file",
]
