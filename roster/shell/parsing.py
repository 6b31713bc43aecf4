"""Parsing of user-entered numbers."""

from __future__ import annotations

import re

_INT_RE = re.compile(r"[+-]?[0-9]+")


class InvalidNumberError(ValueError):
    """User input that is not a base-10 integer."""

    def __init__(self, text: str):
        super().__init__(f"Not an integer: {text!r}")
        self.text = text


def parse_int(text: str) -> int:
    """Parse ``text`` as a signed base-10 integer, ignoring surrounding whitespace."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        raise InvalidNumberError(text)
    try:
        return int(stripped)
    except ValueError:
        # longer than the interpreter's int string conversion limit
        raise InvalidNumberError(text) from None
