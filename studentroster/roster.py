"""A class roster: load, query, edit, sort and save students."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from .models import DEFAULT_LIMIT, Student, read_students

TABLE_HEADER = "\t DANH SACH SINH VIEN "


class Roster:
    """An ordered collection of at most ``capacity`` students."""

    def __init__(
        self, students: Iterable[Student] = (), capacity: int = DEFAULT_LIMIT
    ) -> None:
        self.capacity = capacity
        self.students: list[Student] = list(students)[:capacity]

    def __len__(self) -> int:
        return len(self.students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)

    @property
    def is_full(self) -> bool:
        return len(self.students) >= self.capacity

    def load(self, path: str | Path) -> int:
        """Append students from a data file up to capacity; return how many."""
        room = self.capacity - len(self.students)
        if room <= 0:
            return 0
        loaded = read_students(path, room)
        self.students.extend(loaded)
        return len(loaded)

    def find_by_name(self, name: str) -> list[Student]:
        """Students whose name matches exactly."""
        return [s for s in self.students if s.name == name]

    def above_average(self, threshold: float) -> list[Student]:
        """Students whose average is strictly greater than ``threshold``."""
        return [s for s in self.students if s.average() > threshold]

    def remove(self, student_id: str) -> Student:
        """Remove and return the first student with this id.

        Raises KeyError when there is none.
        """
        for position, student in enumerate(self.students):
            if student.student_id == student_id:
                return self.students.pop(position)
        raise KeyError(student_id)

    def sort_by_average_desc(self) -> None:
        """Order students by average, highest first, by pairwise exchange."""
        items = self.students
        for i in range(len(items) - 1):
            for j in range(i + 1, len(items)):
                if items[i].average() < items[j].average():
                    items[i], items[j] = items[j], items[i]

    def format_table(self) -> str:
        """Header line followed by one display row per student."""
        return "\n".join([TABLE_HEADER, *(s.format_row() for s in self.students)])

    def save(self, path: str | Path) -> None:
        """Write every student as a dash-separated line."""
        with open(path, "w", encoding="utf-8") as handle:
            for student in self.students:
                handle.write(student.to_record() + "\n")