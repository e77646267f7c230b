"""
gradetrack — Record Store

Reads and writes a roster as delimited text, one student per line:

    name,score1,score2,...

No header row and no quoting. A name containing the delimiter will not
survive a round trip.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, Union

from gradetrack.roster import Roster

logger = logging.getLogger(__name__)

DELIMITER = ","


class RosterIOError(Exception):
    """Reading or writing a roster file failed."""

    def __init__(self, path, cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


# ── Text format ──────────────────────────────────────────────────────

def format_line(name: str, scores: Iterable[float]) -> str:
    """Render a single record line (without the newline)."""
    fields = [name]
    fields.extend(repr(float(s)) for s in scores)
    return DELIMITER.join(fields)


def export_all(roster: Roster) -> str:
    """Render every record, in storage order, as newline-terminated lines."""
    return "".join(format_line(r.name, r.scores) + "\n" for r in roster)


def _parse_scores(fields: list[str]) -> list[float]:
    scores = []
    for token in fields:
        try:
            scores.append(float(token))
        except ValueError:
            logger.debug(f"Skipping malformed score field {token!r}")
    return scores


def import_lines(lines: Iterable[str], roster: Roster) -> int:
    """
    Merge record lines into a roster.

    Each non-blank line creates the named student if needed and then
    replaces that student's scores. Unparsable score fields are dropped
    without failing the line.

    Returns:
        Number of non-blank lines processed.
    """
    count = 0
    for line in lines:
        if not line.strip():
            continue
        parts = line.rstrip("\r\n").split(DELIMITER)
        name = parts[0].strip()

        record = roster.find_by_name(name)
        if record is None:
            roster.add_student(name)
            record = roster.find_by_name(name)

        roster.set_grades(record, _parse_scores(parts[1:]))
        count += 1
    return count


def import_all(text: str, roster: Roster) -> int:
    """Merge the records in ``text`` into a roster. See import_lines."""
    # line breaks are \n, \r\n or \r only, as when reading a file
    return import_lines(io.StringIO(text, newline=None), roster)


# ── Files ────────────────────────────────────────────────────────────

PathLike = Union[str, Path]


def export_file(roster: Roster, path: PathLike) -> None:
    """Write the roster to ``path``, replacing any existing file."""
    text = export_all(roster)
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise RosterIOError(path, e) from e
    logger.info(f"Exported {len(roster)} students to {path}")


def import_file(path: PathLike, roster: Roster) -> int:
    """
    Import records from ``path`` into the roster.

    Lines are applied as they are read. If reading fails partway, the
    lines before the failure stay imported. Undecodable bytes become
    U+FFFD rather than failing the import.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            count = import_lines(f, roster)
    except OSError as e:
        raise RosterIOError(path, e) from e
    logger.info(f"Imported {count} lines from {path}")
    return count
