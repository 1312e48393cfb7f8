"""Exceptions raised when user input cannot be turned into coordinates.

The parsers themselves return None for malformed input. The require_*
helpers below are for callers that want a ready-made error message echoing
the original text.
"""

from __future__ import annotations

from sheetaddr.address import GridRange, parse_address, split_sheet_prefix
from sheetaddr.dimensions import DimensionSpan, parse_column_span, parse_row_span
from sheetaddr.filters import CompoundFilter, parse_filter


class SheetAddrError(ValueError):
    """Base exception for sheetaddr input errors."""

    pass


class InvalidRangeError(SheetAddrError):
    """Raised when a cell range, row span or column span is malformed."""

    def __init__(self, text: str, expected: str = "A1 or A1:D10") -> None:
        self.text = text
        self.expected = expected
        super().__init__(f"Invalid range: {text}. Use format like {expected}")


class InvalidFilterError(SheetAddrError):
    """Raised when a filter expression is malformed."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Invalid filter: {text}. Use format like C>100 or A=foo AND B<50"
        )


def require_address(text: str) -> tuple[str | None, GridRange]:
    """Parse ``[Sheet!]A1[:D10]``, raising InvalidRangeError on failure.

    Returns:
        Tuple of (sheet name or None, GridRange)
    """
    sheet, cells = split_sheet_prefix(text)
    grid_range = parse_address(cells)
    if grid_range is None:
        raise InvalidRangeError(text)
    return sheet, grid_range


def require_column_span(text: str) -> DimensionSpan:
    span = parse_column_span(text)
    if span is None:
        raise InvalidRangeError(text, expected="B or B:D")
    return span


def require_row_span(text: str) -> DimensionSpan:
    span = parse_row_span(text)
    if span is None:
        raise InvalidRangeError(text, expected="5 or 5:10")
    return span


def require_filter(text: str) -> CompoundFilter:
    compound = parse_filter(text)
    if compound is None:
        raise InvalidFilterError(text)
    return compound
