"""Student record model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A single student record.

    ``id`` is the sole sort and search key inside a registry. ``semester`` is
    not range-checked. Records are never mutated once stored; replacing one
    means delete + re-insert.
    """

    id: int
    name: str
    semester: int

    def display_line(self) -> str:
        return f"ID: {self.id} | Name: {self.name} | Semester: {self.semester}"
