"""Registry — the in-memory, id-sorted store for student records.

The registry provides:
- Insertion with duplicate and capacity rejection
- Deletion by id
- Point lookup via binary search
- Enumeration in ascending id order
"""

from roster.registry.models import InsertOutcome
from roster.registry.sorted_registry import SortedRegistry

__all__ = ["InsertOutcome", "SortedRegistry"]
