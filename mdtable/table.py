"""Row and table types for building pipe-delimited markdown tables.

A :class:`Table` owns one header :class:`Row` and an ordered sequence of body
rows.  Every body row must have as many cells as the header; the check runs
once when the table is created and a :class:`ColumnCountMismatch` is raised on
the first offending row.  Tables never change after construction, so
:meth:`Table.render` always produces the same text.

Callers plug their own record types in by implementing :class:`ToRow`::

    @dataclass
    class User:
        name: str
        age: int

        def to_row(self) -> Row:
            return Row([self.name, self.age])

    print(Table(Row(["Name", "Age"]), users))
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Protocol, Tuple, Union, overload, runtime_checkable

from .errors import ColumnCountMismatch

__all__ = [
    "Row",
    "ToRow",
    "as_row",
    "Table",
    "TableBuilder",
    "markdown_table",
]

logger = logging.getLogger(__name__)

_CELL_SEPARATOR = " | "
_LINE_START = "| "
_LINE_END = " |"


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Row:
    """One line of a table: an ordered tuple of text cells."""

    cells: Tuple[str, ...]

    def __init__(self, cells: Iterable[Any] = ()) -> None:
        object.__setattr__(self, "cells", tuple(_to_text(c) for c in cells))

    @classmethod
    def of(cls, *cells: Any) -> "Row":
        return cls(cells)

    @property
    def width(self) -> int:
        return len(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[str]:
        return iter(self.cells)

    @overload
    def __getitem__(self, index: int) -> str: ...
    @overload
    def __getitem__(self, index: slice) -> Tuple[str, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[str, Tuple[str, ...]]:
        return self.cells[index]


@runtime_checkable
class ToRow(Protocol):
    """Anything that knows how to present itself as a table row."""

    def to_row(self) -> Row: ...


def as_row(value: Any) -> Row:
    """Return ``value`` as a :class:`Row`.

    Accepts an existing row, an object implementing :class:`ToRow`, or any
    other iterable of cell values.  Plain strings are rejected because they
    would otherwise be split into one cell per character.
    """

    if isinstance(value, Row):
        return value
    if isinstance(value, ToRow):
        row = value.to_row()
        if not isinstance(row, Row):
            raise TypeError(
                f"{type(value).__name__}.to_row() returned {type(row).__name__}, expected Row"
            )
        return row
    if isinstance(value, (str, bytes)):
        raise TypeError("A row must be a sequence of cells, not a single string")
    try:
        return Row(value)
    except TypeError as exc:
        raise TypeError(f"Cannot convert {type(value).__name__} to a table row") from exc


def _check_width(header: Row, row: Row, index: int) -> None:
    if row.width != header.width:
        logger.debug(
            "Rejecting row %d: %d cells, header has %d", index, row.width, header.width
        )
        raise ColumnCountMismatch(index, header.width, row.width)


class Table:
    """A header row plus body rows that all share the header's column count."""

    __slots__ = ("_header", "_rows")

    def __init__(self, header: Any, rows: Iterable[Any] = ()) -> None:
        head = as_row(header)
        body = tuple(as_row(r) for r in rows)
        for index, row in enumerate(body):
            _check_width(head, row, index)
        self._header = head
        self._rows = body
        logger.debug("Built table with %d columns and %d rows", head.width, len(body))

    @property
    def header(self) -> Row:
        return self._header

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._header.width

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._header == other._header and self._rows == other._rows

    def __hash__(self) -> int:
        return hash((self._header, self._rows))

    def __repr__(self) -> str:
        return f"Table(header={self._header!r}, rows={len(self._rows)})"

    def with_row(self, row: Any) -> "Table":
        """Return a new table with ``row`` appended; this table is unchanged."""

        new_row = as_row(row)
        _check_width(self._header, new_row, len(self._rows))
        return Table(self._header, self._rows + (new_row,))

    def column_widths(self) -> List[int]:
        """Return the padded width of each column.

        A column is as wide as its longest cell, header included.  Lengths are
        counted in code points, not terminal display cells.
        """

        widths = [len(cell) for cell in self._header]
        for row in self._rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))
        return widths

    def render(self) -> str:
        """Return the table as pipe-delimited markdown, without a trailing newline.

        A table with no columns renders as an empty string.
        """

        if self.width == 0:
            return ""
        widths = self.column_widths()

        def fmt_row(cells: Iterable[str]) -> str:
            padded = (cell.ljust(w) for cell, w in zip(cells, widths))
            return _LINE_START + _CELL_SEPARATOR.join(padded) + _LINE_END

        out = [fmt_row(self._header), fmt_row("-" * max(w, 1) for w in widths)]
        out += [fmt_row(row) for row in self._rows]
        return "\n".join(out)

    def __str__(self) -> str:
        return self.render()


class TableBuilder:
    """Collect rows one at a time, then freeze them into a :class:`Table`.

    Each row is checked against the header as it is added, so a bad row is
    reported where it is produced.  A builder belongs to a single owner and
    is not safe to share between threads.
    """

    def __init__(self, header: Any) -> None:
        self._header = as_row(header)
        self._rows: List[Row] = []

    @property
    def header(self) -> Row:
        return self._header

    def __len__(self) -> int:
        return len(self._rows)

    def add_row(self, row: Any) -> "TableBuilder":
        new_row = as_row(row)
        _check_width(self._header, new_row, len(self._rows))
        self._rows.append(new_row)
        return self

    def add_rows(self, rows: Iterable[Any]) -> "TableBuilder":
        for row in rows:
            self.add_row(row)
        return self

    def build(self) -> Table:
        return Table(self._header, self._rows)


def markdown_table(header: Iterable[Any], rows: Iterable[Any], title: Optional[str] = None) -> str:
    """Render ``header`` and ``rows`` in one call.

    If ``title`` is given it is emitted as a ``####`` heading line above the
    table.
    """

    rendered = Table(as_row(header), rows).render()
    if title:
        return f"#### {title}\n{rendered}"
    return rendered
