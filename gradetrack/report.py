"""
gradetrack — Report Formatting

Terminal and JSON renderings of a roster.

Usage:
    gradetrack summary students.csv
    gradetrack summary students.csv --json
    gradetrack list students.csv
"""

from __future__ import annotations

from typing import Any, Optional

from gradetrack.roster import Roster, StudentRecord


# ── Colors (ANSI) ───────────────────────────────────────────────────

class C:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    CYAN = "\033[36m"

    @classmethod
    def disable(cls):
        """Disable colors (for non-TTY output)."""
        for attr in ["RESET", "BOLD", "DIM", "GREEN", "YELLOW", "RED", "CYAN"]:
            setattr(cls, attr, "")


# ── Terminal formatters ──────────────────────────────────────────────

def format_stat(value: Optional[float], decimals: int = 2) -> str:
    """Format a statistic, showing N/A when it is undefined."""
    if value is None:
        return "N/A"
    return f"{value:.{decimals}f}"


def format_record(record: StudentRecord, decimals: int = 2) -> str:
    """One-line description of a student and their statistics."""
    if not record.scores:
        return f"{record.name}: No grades"
    return (
        f"{record.name} | Grades: {record.scores} | "
        f"Avg: {format_stat(record.average, decimals)} | "
        f"High: {format_stat(record.highest, decimals)} | "
        f"Low: {format_stat(record.lowest, decimals)}"
    )


def format_listing(roster: Roster, decimals: int = 2) -> str:
    """All students, sorted by name."""
    if not roster.has_students():
        return "No students in the tracker yet."
    return "\n".join(format_record(r, decimals) for r in roster.list_all())


def format_summary(roster: Roster, decimals: int = 2) -> str:
    """Student list followed by the roster-wide statistics."""
    if not roster.has_students():
        return "No students."

    lines = []
    lines.append("")
    lines.append(f"{C.BOLD}--- Student List ---{C.RESET}")
    lines.append(format_listing(roster, decimals))
    lines.append("")
    lines.append(f"{C.BOLD}--- Overall Statistics ---{C.RESET}")
    for label, value in (
        ("Overall Average", roster.overall_average()),
        ("Overall Highest", roster.overall_highest()),
        ("Overall Lowest ", roster.overall_lowest()),
    ):
        color = C.DIM if value is None else C.CYAN
        lines.append(f"{label}: {color}{format_stat(value, decimals)}{C.RESET}")
    return "\n".join(lines)


# ── JSON ─────────────────────────────────────────────────────────────

def summary_dict(roster: Roster) -> dict[str, Any]:
    """Summary as plain data; undefined statistics become None (null)."""
    return {
        "students": [
            {
                "name": r.name,
                "scores": list(r.scores),
                "average": r.average,
                "highest": r.highest,
                "lowest": r.lowest,
            }
            for r in roster.list_all()
        ],
        "overall": {
            "average": roster.overall_average(),
            "highest": roster.overall_highest(),
            "lowest": roster.overall_lowest(),
        },
    }
