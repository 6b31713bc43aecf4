"""Capacity-bounded registry of student records kept sorted by id.

Records live in a plain list whose length is the logical ``count``. The list is
strictly increasing by ``Student.id`` between operations; inserts and deletes
shift the tail in place rather than re-sorting.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Iterator
from operator import attrgetter

from roster.models.student import Student
from roster.registry.models import InsertOutcome

logger = logging.getLogger(__name__)

NOT_FOUND = -1

_student_id = attrgetter("id")


class SortedRegistry:
    """Fixed-capacity, id-sorted collection of ``Student`` records."""

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._records: list[Student] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return len(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self._capacity

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.enumerate())

    def __contains__(self, student_id: object) -> bool:
        if not isinstance(student_id, int):
            return False
        return self.binary_search_index(student_id) != NOT_FOUND

    def __repr__(self) -> str:
        return f"SortedRegistry(count={self.count}, capacity={self._capacity})"

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert(self, student: Student) -> bool:
        """Insert a student, keeping the sequence sorted by id.

        Returns False without changing anything when the registry is full or
        the id is already stored.
        """
        return bool(self.insert_with_outcome(student))

    def insert_with_outcome(self, student: Student) -> InsertOutcome:
        """Insert a student and report why it was accepted or rejected."""
        if self.is_full:
            logger.debug("Rejected id=%s: registry full (%d)", student.id, self._capacity)
            return InsertOutcome.FULL
        if self.binary_search_index(student.id) != NOT_FOUND:
            logger.debug("Rejected id=%s: duplicate", student.id)
            return InsertOutcome.DUPLICATE

        # First slot whose id is strictly greater than the new one
        index = bisect_right(self._records, student.id, key=_student_id)
        self._records.insert(index, student)
        logger.debug("Inserted id=%s at index %d (count=%d)", student.id, index, self.count)
        return InsertOutcome.INSERTED

    def delete(self, student_id: int) -> bool:
        """Delete the student with ``student_id``. Returns False if absent."""
        index = self.binary_search_index(student_id)
        if index == NOT_FOUND:
            logger.debug("Delete id=%s: not found", student_id)
            return False
        del self._records[index]
        logger.debug("Deleted id=%s from index %d (count=%d)", student_id, index, self.count)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def binary_search_index(self, student_id: int) -> int:
        """Return the index of ``student_id`` in the sequence, or ``NOT_FOUND``.

        Shared by the duplicate check in insert, delete, and search.
        """
        left = 0
        right = len(self._records) - 1
        while left <= right:
            mid = left + (right - left) // 2
            mid_id = self._records[mid].id
            if mid_id == student_id:
                return mid
            if mid_id < student_id:
                left = mid + 1
            else:
                right = mid - 1
        return NOT_FOUND

    def search(self, student_id: int) -> Student | None:
        """Return the stored student with ``student_id``, or None."""
        index = self.binary_search_index(student_id)
        return self._records[index] if index != NOT_FOUND else None

    def enumerate(self) -> list[Student]:
        """All stored students in ascending id order. Empty when count is 0."""
        return list(self._records)
