"""Student records and the dash-separated text format they are stored in."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

DEFAULT_LIMIT = 100
FIELD_SEPARATOR = "-"
FIELD_COUNT = 6

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))"
)


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _leading_float(text: str) -> float:
    """Parse the number at the start of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


@dataclass
class Student:
    """One student: id, name, year of birth and three scores."""

    student_id: str = ""
    name: str = ""
    birth_year: int = 0
    score1: float = 0.0
    score2: float = 0.0
    score3: float = 0.0

    def average(self) -> float:
        """Mean of the three scores."""
        return (self.score1 + self.score2 + self.score3) / 3.0

    def format_row(self) -> str:
        """Tab-separated display row with scores to two decimals."""
        return (
            f"{self.student_id}\t{self.name}\t{self.birth_year}\t"
            f"{self.score1:.2f}\t{self.score2:.2f}\t{self.score3:.2f}\t"
            f"DTB: {self.average():.2f}"
        )

    def to_record(self) -> str:
        """Dash-separated line as written to a data file."""
        return FIELD_SEPARATOR.join(
            [
                self.student_id,
                self.name,
                str(self.birth_year),
                format(self.score1, "g"),
                format(self.score2, "g"),
                format(self.score3, "g"),
            ]
        )

    @classmethod
    def from_line(cls, line: str) -> "Student":
        """Build a student from an ``id-name-year-s1-s2-s3`` line.

        Raises ValueError when a numeric field is missing or malformed.
        """
        fields = line.split(FIELD_SEPARATOR)[:FIELD_COUNT]
        fields += [""] * (FIELD_COUNT - len(fields))
        student_id, name, year, s1, s2, s3 = fields
        return cls(
            student_id,
            name,
            _leading_int(year),
            _leading_float(s1),
            _leading_float(s2),
            _leading_float(s3),
        )


def is_student_line(line: str) -> bool:
    """True when the line starts with a digit, i.e. holds a student id."""
    return bool(line) and line[0] in "0123456789"


def parse_students(lines: Iterable[str], limit: int = DEFAULT_LIMIT) -> list[Student]:
    """Parse student lines, skipping others, keeping at most ``limit`` students."""
    students: list[Student] = []
    for line in lines:
        if len(students) >= limit:
            break
        line = line.rstrip("\n")
        if is_student_line(line):
            students.append(Student.from_line(line))
    return students


def read_students(path: str | Path, limit: int = DEFAULT_LIMIT) -> list[Student]:
    """Read up to ``limit`` students from a data file."""
    with open(path, encoding="utf-8") as handle:
        return parse_students(handle, limit)