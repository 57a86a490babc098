#!/usr/bin/env python3

__VERSION__ = "1.0.0"
__DESCRIPTION__ = "Render CSV or JSON rows as a markdown table."
__AUTHOR__ = "Erick Samera (erick.samera@kpu.ca)"

import sys

import argparse
import logging
from pathlib import Path

from typing import List, Optional

from mdtable import MarkdownTableError, Row, Table
from modules.formatting import preview_markdown
from modules.io_tools import load_rows, write_table

logger = logging.getLogger(__name__)


def render_command(args) -> int:
    header, rows = load_rows(
        args.input,
        fmt=args.format,
        delimiter=args.delimiter,
        has_header=not args.no_header,
    )
    table = Table(Row(header), rows)
    text = table.render()

    if args.output:
        write_table(args.output, text)
        logger.info("Table with %d rows written to %s", len(table), args.output)
    else:
        print(text)

    if args.preview:
        preview_markdown(text)
    return 0


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging to the console and, optionally, a plain log file."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Console handler
    c_handler = logging.StreamHandler()
    c_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    c_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root.addHandler(c_handler)

    # File handler
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        f_handler = logging.FileHandler(log_file, encoding="utf-8")
        f_handler.setLevel(logging.DEBUG)
        f_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(f_handler)
        logger.debug("Logging initialized at %s", log_file)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="md-table",
        description=f"md-table v{__VERSION__} | {__DESCRIPTION__}",
        epilog=f"{__AUTHOR__}")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__VERSION__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- RENDER SUBCOMMAND ---
    render = subparsers.add_parser("render", help="Render an input file as a markdown table")
    render.add_argument("--input", type=Path, required=True, help="CSV/TSV or JSON file with the rows")
    render.add_argument("--format", choices=["csv", "json"], default=None,
                        help="Input format (default: inferred from the file suffix)")
    render.add_argument("--delimiter", default=None,
                        help="CSV delimiter (default: $MDTABLE_CSV_DELIMITER or ',')")
    render.add_argument("--no-header", action="store_true",
                        help="CSV input has no header record; columns are named 'Column N'")
    render.add_argument("--output", type=Path, default=None, help="Write the table to this file instead of stdout")
    render.add_argument("--preview", action="store_true", help="Also show a formatted preview in the terminal")
    render.add_argument("--log-file", type=Path, default=None, help="Also write a debug log to this file")
    render.add_argument("--verbose", action="store_true")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=getattr(args, "verbose", False), log_file=getattr(args, "log_file", None))

    try:
        return render_command(args)
    except MarkdownTableError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[INFO] Cancelled by user.")
        sys.exit(1)
