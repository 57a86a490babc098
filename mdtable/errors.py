"""Exceptions raised while building tables."""
from __future__ import annotations

__all__ = [
    "MarkdownTableError",
    "ColumnCountMismatch",
]


class MarkdownTableError(ValueError):
    """Base class for errors raised by :mod:`mdtable`."""


class ColumnCountMismatch(MarkdownTableError):
    """Raised when a body row does not have as many cells as the header."""

    def __init__(self, row_index: int, expected: int, actual: int) -> None:
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid row length at row {row_index}, expected {expected} got {actual}."
        )

    def __reduce__(self):
        return (type(self), (self.row_index, self.expected, self.actual))
