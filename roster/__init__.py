"""Capacity-bounded, id-sorted registry of student records."""

__version__ = "0.1.0"
