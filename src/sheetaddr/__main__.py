"""CLI entry point for sheetaddr.

Usage:
    python -m sheetaddr range <a1_range>
    python -m sheetaddr rows <row_span>
    python -m sheetaddr cols <column_span>
    python -m sheetaddr filter <file> <expression> [--range A1] [--json]
    python -m sheetaddr convert <input> <output> [--from D] [--to D]
    python -m sheetaddr stats <file> [--range A1:B10] [--json]

All commands work on local text; nothing here talks to Google Sheets.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from sheetaddr.config import Settings, get_settings
from sheetaddr.delimited import (
    detect_delimiter,
    format_delimited,
    parse_delimited,
    resolve_delimiter,
)
from sheetaddr.dimensions import format_column_span, format_row_span
from sheetaddr.exceptions import (
    SheetAddrError,
    require_address,
    require_column_span,
    require_filter,
    require_row_span,
)
from sheetaddr.filters import apply_filter
from sheetaddr.logging import configure_logging
from sheetaddr.stats import compute_stats, slice_range


def _read_table(
    path: Path, delimiter_name: str | None, settings: Settings
) -> tuple[list[list[str]], str]:
    content = path.read_text(encoding="utf-8")
    if delimiter_name:
        delimiter = resolve_delimiter(delimiter_name)
    else:
        delimiter = detect_delimiter(path, content, settings.default_delimiter)
    logger.debug("Reading {} with delimiter {!r}", path, delimiter)
    return parse_delimited(content, delimiter), delimiter


def cmd_range(args: argparse.Namespace, settings: Settings) -> int:
    """Print the grid coordinates of an A1 range."""
    sheet, grid_range = require_address(args.range)
    output: dict[str, Any] = {}
    if sheet is not None:
        output["sheetName"] = sheet
    output.update(grid_range.to_api())
    output["a1"] = grid_range.to_a1()
    print(json.dumps(output, indent=2))
    return 0


def cmd_rows(args: argparse.Namespace, settings: Settings) -> int:
    """Print the zero-based span of a row range."""
    span = require_row_span(args.span)
    output = {
        "dimension": "ROWS",
        "startIndex": span.start,
        "endIndex": span.end,
        "a1": format_row_span(span),
    }
    print(json.dumps(output, indent=2))
    return 0


def cmd_cols(args: argparse.Namespace, settings: Settings) -> int:
    """Print the zero-based span of a column range."""
    span = require_column_span(args.span)
    output = {
        "dimension": "COLUMNS",
        "startIndex": span.start,
        "endIndex": span.end,
        "a1": format_column_span(span),
    }
    print(json.dumps(output, indent=2))
    return 0


def cmd_filter(args: argparse.Namespace, settings: Settings) -> int:
    """Filter the rows of a CSV/TSV file, keeping the header."""
    compound = require_filter(args.expression)
    column_offset = 0
    if args.range:
        _, grid_range = require_address(args.range)
        column_offset = grid_range.start_col

    path = Path(args.file)
    if not path.exists():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1

    rows, delimiter = _read_table(path, args.delimiter, settings)
    if not rows:
        print("Error: No data found in file", file=sys.stderr)
        return 1

    filtered = apply_filter(rows, compound, column_offset)
    logger.info("{} of {} data rows match {}", len(filtered) - 1, len(rows) - 1, compound)

    if args.json:
        print(json.dumps(filtered, indent=2))
    else:
        print(format_delimited(filtered, delimiter))
    return 0


def cmd_convert(args: argparse.Namespace, settings: Settings) -> int:
    """Re-encode a delimited file, e.g. CSV to TSV."""
    source = Path(args.input)
    target = Path(args.output)
    if not source.exists():
        print(f"Error: File not found: {source}", file=sys.stderr)
        return 1

    rows, _ = _read_table(source, args.from_delimiter, settings)
    if not rows:
        print("Error: No data found in file", file=sys.stderr)
        return 1

    if args.to_delimiter:
        delimiter = resolve_delimiter(args.to_delimiter)
    else:
        delimiter = "\t" if target.suffix.lower() == ".tsv" else ","

    if target.exists() and not args.force:
        print(
            f"Warning: File \"{target}\" already exists and will be overwritten.",
            file=sys.stderr,
        )

    target.write_text(format_delimited(rows, delimiter), encoding="utf-8")
    columns = len(rows[0]) if rows else 0
    print(f"Converted {len(rows)} rows, {columns} columns to {target}")
    return 0


def cmd_stats(args: argparse.Namespace, settings: Settings) -> int:
    """Print statistics over the numeric cells of a file."""
    path = Path(args.file)
    if not path.exists():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1

    rows, _ = _read_table(path, args.delimiter, settings)
    label = path.name
    if args.range:
        _, grid_range = require_address(args.range)
        rows = slice_range(rows, grid_range)
        label = f"{path.name}!{grid_range.to_a1()}"

    stats = compute_stats(rows, precision=settings.stats_precision)
    if stats is None:
        print("Error: No numeric values found in range", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({**stats.to_dict(), "range": label}, indent=2))
        return 0

    print(f"Statistics for {label}:")
    print(f"  Count:   {stats.count}")
    print(f"  Sum:     {stats.sum}")
    print(f"  Average: {stats.avg}")
    print(f"  Median:  {stats.median}")
    print(f"  Min:     {stats.min}")
    print(f"  Max:     {stats.max}")
    print(f"  Std Dev: {stats.std_dev}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetaddr",
        description="Parse A1 notation and filter or convert CSV/TSV files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # range subcommand
    range_parser = subparsers.add_parser(
        "range",
        help="Show grid coordinates for an A1 range (e.g. Sheet1!A1:D10)",
    )
    range_parser.add_argument("range", help="Cell or range in A1 notation")
    range_parser.set_defaults(func=cmd_range)

    # rows subcommand
    rows_parser = subparsers.add_parser(
        "rows",
        help="Show zero-based indices for a row range (e.g. 5:10)",
    )
    rows_parser.add_argument("span", help="Row number or row range")
    rows_parser.set_defaults(func=cmd_rows)

    # cols subcommand
    cols_parser = subparsers.add_parser(
        "cols",
        help="Show zero-based indices for a column range (e.g. B:D)",
    )
    cols_parser.add_argument("span", help="Column letter or column range")
    cols_parser.set_defaults(func=cmd_cols)

    # filter subcommand
    filter_parser = subparsers.add_parser(
        "filter",
        help="Filter rows of a CSV/TSV file (header row is always kept)",
    )
    filter_parser.add_argument("file", help="Path to CSV or TSV file")
    filter_parser.add_argument(
        "expression",
        help='Filter expression, e.g. "C>100" or "A=foo AND B<50"',
    )
    filter_parser.add_argument(
        "-r",
        "--range",
        default=None,
        help="Range the file was exported from; its first column sets the letters",
    )
    filter_parser.add_argument(
        "-d",
        "--delimiter",
        default=None,
        help="Delimiter: comma, tab, pipe (default: auto-detect)",
    )
    filter_parser.add_argument(
        "--json",
        action="store_true",
        help="Print rows as JSON",
    )
    filter_parser.set_defaults(func=cmd_filter)

    # convert subcommand
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert between CSV and TSV",
    )
    convert_parser.add_argument("input", help="Source file")
    convert_parser.add_argument("output", help="Destination file")
    convert_parser.add_argument(
        "--from",
        dest="from_delimiter",
        default=None,
        help="Source delimiter: comma, tab, pipe (default: auto-detect)",
    )
    convert_parser.add_argument(
        "--to",
        dest="to_delimiter",
        default=None,
        help="Destination delimiter (default: from the output file extension)",
    )
    convert_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing file without warning",
    )
    convert_parser.set_defaults(func=cmd_convert)

    # stats subcommand
    stats_parser = subparsers.add_parser(
        "stats",
        help="Count, sum, average, median, min, max and std dev of numeric cells",
    )
    stats_parser.add_argument("file", help="Path to CSV or TSV file")
    stats_parser.add_argument(
        "-r",
        "--range",
        default=None,
        help="Only analyze this part of the file (e.g. B2:B100)",
    )
    stats_parser.add_argument(
        "-d",
        "--delimiter",
        default=None,
        help="Delimiter: comma, tab, pipe (default: auto-detect)",
    )
    stats_parser.add_argument(
        "--json",
        action="store_true",
        help="Print statistics as JSON",
    )
    stats_parser.set_defaults(func=cmd_stats)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(
        json_logs=settings.json_logs,
        log_level="DEBUG" if args.verbose else settings.log_level,
    )

    try:
        result: int = args.func(args, settings)
        return result
    except SheetAddrError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
