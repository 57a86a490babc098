"""Build pipe-delimited markdown tables from row-like data."""
from .errors import ColumnCountMismatch, MarkdownTableError
from .table import (
    Row,
    Table,
    TableBuilder,
    ToRow,
    as_row,
    markdown_table,
)

__version__ = "1.0.0"

__all__ = [
    "ColumnCountMismatch",
    "MarkdownTableError",
    "Row",
    "Table",
    "TableBuilder",
    "ToRow",
    "as_row",
    "markdown_table",
]
