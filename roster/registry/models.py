"""Registry result models."""

from __future__ import annotations

from enum import Enum


class InsertOutcome(Enum):
    """Why an insert did or did not change the registry."""

    INSERTED = "inserted"
    FULL = "full"  # count already equals capacity
    DUPLICATE = "duplicate"  # id already stored

    def __bool__(self) -> bool:
        return self is InsertOutcome.INSERTED

    @property
    def reason(self) -> str:
        if self is InsertOutcome.FULL:
            return "capacity full"
        if self is InsertOutcome.DUPLICATE:
            return "duplicate ID"
        return ""
