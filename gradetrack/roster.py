"""
gradetrack — Roster

Holds the student records and computes statistics over their scores.

Key outputs:
    - per-record:  average / highest / lowest of one student's scores
    - aggregate:   the same reductions over every score in the roster

Statistics over an empty score set return None rather than NaN, so a
missing value can't leak into downstream arithmetic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

logger = logging.getLogger(__name__)


class InvalidGradeError(ValueError):
    """Raised when a negative grade is added to a record."""


# ── Reductions ───────────────────────────────────────────────────────

def mean(values: Iterable[float]) -> Optional[float]:
    """Arithmetic mean, or None for an empty sequence."""
    total = 0.0
    count = 0
    # plain left-to-right addition; sum() compensates on 3.12+
    for v in values:
        total += v
        count += 1
    if count == 0:
        return None
    return total / count


def highest(values: Iterable[float]) -> Optional[float]:
    return max(values, default=None)


def lowest(values: Iterable[float]) -> Optional[float]:
    return min(values, default=None)


# ── Data classes ─────────────────────────────────────────────────────

def name_key(name: str) -> str:
    """Case-insensitive lookup key for a student name."""
    return name.strip().lower()


@dataclass
class StudentRecord:
    """A named student and the scores recorded for them, in entry order."""
    name: str
    scores: list[float] = field(default_factory=list)

    def __post_init__(self):
        self.name = self.name.strip()

    @property
    def key(self) -> str:
        return name_key(self.name)

    @property
    def average(self) -> Optional[float]:
        return mean(self.scores)

    @property
    def highest(self) -> Optional[float]:
        return highest(self.scores)

    @property
    def lowest(self) -> Optional[float]:
        return lowest(self.scores)


class RosterView:
    """
    Lazy, restartable view of a roster sorted by name.

    Sorting happens on each iteration, so the view reflects the roster
    as it is when iterated. Python's sort is stable: names that compare
    equal case-insensitively keep their insertion order.
    """

    def __init__(self, records: dict[str, StudentRecord]):
        self._records = records

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(sorted(self._records.values(), key=lambda r: r.name.lower()))

    def __len__(self) -> int:
        return len(self._records)


# ── Roster ───────────────────────────────────────────────────────────

class Roster:
    """Collection of StudentRecords keyed by case-insensitive name."""

    def __init__(self):
        # insertion-ordered; this is the storage (and export) order
        self._records: dict[str, StudentRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(list(self._records.values()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name_key(name) in self._records

    def add_student(self, name: str) -> bool:
        """
        Add a student with no scores.

        Returns False (and leaves the roster alone) if a student with the
        same name, ignoring case, already exists.
        """
        record = StudentRecord(name)
        if record.key in self._records:
            logger.warning(f"Student already exists: {record.name}")
            return False
        self._records[record.key] = record
        logger.debug(f"Added student {record.name}")
        return True

    def remove_student(self, name: str) -> bool:
        record = self._records.pop(name_key(name), None)
        if record is None:
            logger.debug(f"No student named {name.strip()!r} to remove")
            return False
        logger.debug(f"Removed student {record.name}")
        return True

    def find_by_name(self, name: str) -> Optional[StudentRecord]:
        return self._records.get(name_key(name))

    def add_grade(self, record: StudentRecord, value: float) -> None:
        """Append a grade to a record. Negative grades are rejected."""
        value = float(value)
        if value < 0:
            raise InvalidGradeError(f"Grade cannot be negative: {value}")
        record.scores.append(value)

    def set_grades(self, record: StudentRecord, values: Iterable[float]) -> None:
        """Replace a record's scores wholesale. Used by import; no validation."""
        record.scores = list(values)

    # per-record statistics

    def average(self, record: StudentRecord) -> Optional[float]:
        return record.average

    def highest(self, record: StudentRecord) -> Optional[float]:
        return record.highest

    def lowest(self, record: StudentRecord) -> Optional[float]:
        return record.lowest

    # aggregate statistics

    def all_scores(self) -> Iterator[float]:
        """Every score in the roster, in storage order."""
        for record in self._records.values():
            yield from record.scores

    def overall_average(self) -> Optional[float]:
        return mean(self.all_scores())

    def overall_highest(self) -> Optional[float]:
        return highest(self.all_scores())

    def overall_lowest(self) -> Optional[float]:
        return lowest(self.all_scores())

    def list_all(self) -> RosterView:
        return RosterView(self._records)

    def has_students(self) -> bool:
        return bool(self._records)
