"""
modules/io_tools.py

Functions for loading header and body rows from CSV or JSON files.
"""
from __future__ import annotations

import csv
import json
import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Tuple

from mdtable import MarkdownTableError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","

_SUFFIX_FORMATS = {
    ".csv": "csv",
    ".tsv": "csv",
    ".json": "json",
}

Rows = List[List[str]]


class InputFormatError(MarkdownTableError):
    """Raised when an input file cannot be read as a table."""


class OutputWriteError(MarkdownTableError):
    """Raised when a rendered table cannot be written to disk."""


def default_delimiter() -> str:
    """Return the CSV delimiter to use when none is given on the command line."""

    return os.environ.get("MDTABLE_CSV_DELIMITER", DEFAULT_DELIMITER)


def guess_format(path: Path) -> str:
    """Infer ``csv`` or ``json`` from the file suffix."""
    fmt = _SUFFIX_FORMATS.get(path.suffix.lower())
    if fmt is None:
        raise InputFormatError(
            f"Cannot infer input format from '{path.name}'; pass --format csv|json"
        )
    return fmt


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def read_csv(path: Path, delimiter: Optional[str] = None, has_header: bool = True) -> Tuple[List[str], Rows]:
    """
    Read a delimited text file.

    Args:
        path: File to read.
        delimiter: Field delimiter; falls back to default_delimiter().
        has_header: If False, generate "Column N" headers from the first record.

    Returns:
        (header, rows) with all cells as strings.
    """
    if delimiter is None:
        delimiter = "\t" if path.suffix.lower() == ".tsv" else default_delimiter()
    if len(delimiter) != 1:
        raise InputFormatError(f"CSV delimiter must be a single character, got {delimiter!r}")
    try:
        with path.open(newline="", encoding="utf-8") as handle:
            records = [rec for rec in csv.reader(handle, delimiter=delimiter) if rec]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise InputFormatError(f"Failed to read {path}: {e}") from e

    if not records:
        raise InputFormatError(f"{path} contains no records")

    if has_header:
        header, rows = records[0], records[1:]
    else:
        header = [f"Column {i}" for i in range(1, len(records[0]) + 1)]
        rows = records
    logger.debug("Read %d rows from %s", len(rows), path)
    return header, rows


def read_json(path: Path) -> Tuple[List[str], Rows]:
    """
    Read a JSON array of objects or of arrays.

    For objects the header is the key order of the first object and missing
    keys become empty cells; for arrays the first array is the header.
    """
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, UnicodeDecodeError) as e:
        raise InputFormatError(f"Failed to read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputFormatError(f"Failed to parse JSON in {path}: {e}") from e

    if not isinstance(data, list) or not data:
        raise InputFormatError(f"{path} must contain a non-empty JSON array")

    first = data[0]
    if isinstance(first, dict):
        header = [str(k) for k in first]
        rows = []
        for i, obj in enumerate(data):
            if not isinstance(obj, dict):
                raise InputFormatError(f"Item {i} in {path} is not an object")
            rows.append([_cell(obj.get(k)) for k in first])
    elif isinstance(first, list):
        header = [_cell(c) for c in first]
        rows = []
        for i, item in enumerate(data[1:], 1):
            if not isinstance(item, list):
                raise InputFormatError(f"Item {i} in {path} is not an array")
            rows.append([_cell(c) for c in item])
    else:
        raise InputFormatError(f"{path} must contain JSON objects or arrays")

    logger.debug("Read %d rows from %s", len(rows), path)
    return header, rows


def load_rows(
    path: Path,
    fmt: Optional[str] = None,
    delimiter: Optional[str] = None,
    has_header: bool = True,
) -> Tuple[List[str], Rows]:
    """Load (header, rows) from ``path`` in the given or inferred format."""
    fmt = fmt or guess_format(path)
    logger.info("Loading %s input from %s", fmt, path)
    if fmt == "csv":
        return read_csv(path, delimiter=delimiter, has_header=has_header)
    if fmt == "json":
        return read_json(path)
    raise InputFormatError(f"Unsupported input format: {fmt}")


def write_table(path: Path, text: str) -> None:
    """Write rendered table text to ``path`` with a trailing newline, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Failed to write {path}: {e}") from e
    logger.debug("Wrote %d characters to %s", len(text) + 1, path)
