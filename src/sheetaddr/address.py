"""A1 address parsing.

Turns cell references (``B12``) and cell ranges (``A1:D10``) into
zero-based, half-open grid coordinates, and renders them back.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from loguru import logger

from sheetaddr.columns import column_to_index, index_to_column

_CELL_RE = re.compile(r"([A-Z]+)(\d+)", re.IGNORECASE | re.ASCII)
_RANGE_RE = re.compile(r"([A-Z]+)(\d+):([A-Z]+)(\d+)", re.IGNORECASE | re.ASCII)
_SPREADSHEET_URL_RE = re.compile(r"/spreadsheets/d/([a-zA-Z0-9_-]+)")


@dataclass(frozen=True)
class CellAddress:
    """A single zero-based cell coordinate."""

    row: int
    col: int

    def to_a1(self) -> str:
        return cell_to_a1(self.row, self.col)


@dataclass(frozen=True)
class GridRange:
    """A rectangular region with exclusive end bounds.

    ``A1`` is ``GridRange(start_row=0, end_row=1, start_col=0, end_col=1)``.
    """

    start_row: int
    end_row: int
    start_col: int
    end_col: int

    @property
    def row_count(self) -> int:
        return self.end_row - self.start_row

    @property
    def column_count(self) -> int:
        return self.end_col - self.start_col

    @property
    def is_single_cell(self) -> bool:
        return self.row_count == 1 and self.column_count == 1

    def to_a1(self) -> str:
        """Render the range in canonical A1 notation (``A1`` or ``A1:C3``)."""
        start = cell_to_a1(self.start_row, self.start_col)
        if self.is_single_cell:
            return start
        return f"{start}:{cell_to_a1(self.end_row - 1, self.end_col - 1)}"

    def to_api(self, sheet_id: int | None = None) -> dict[str, Any]:
        """Return the Sheets API ``GridRange`` representation."""
        result: dict[str, Any] = {}
        if sheet_id is not None:
            result["sheetId"] = sheet_id
        result.update(
            {
                "startRowIndex": self.start_row,
                "endRowIndex": self.end_row,
                "startColumnIndex": self.start_col,
                "endColumnIndex": self.end_col,
            }
        )
        return result


def cell_to_a1(row: int, col: int) -> str:
    """Convert zero-based row and column indices to A1 notation.

    Examples:
        (0, 0) -> A1, (0, 1) -> B1, (9, 2) -> C10
    """
    return f"{index_to_column(col)}{row + 1}"


def parse_cell(text: str) -> CellAddress | None:
    """Parse a single cell reference such as ``B12``.

    Returns None when the text is not a single cell.
    """
    match = _CELL_RE.fullmatch(text)
    if not match:
        logger.debug("Rejected cell reference {!r}", text)
        return None
    letters, digits = match.groups()
    col = column_to_index(letters)
    if col is None:
        return None
    return CellAddress(row=int(digits) - 1, col=col)


def parse_address(text: str) -> GridRange | None:
    """Parse a cell (``A1``) or cell range (``A1:D10``) into a GridRange.

    Matching is case-insensitive. The sheet-name prefix (``Sheet1!``) must
    already be removed; see split_sheet_prefix().

    A range whose second cell precedes the first (``C3:A1``) is returned
    as written, without swapping the corners.

    Returns:
        The parsed GridRange, or None if the text is not a valid address.
    """
    range_match = _RANGE_RE.fullmatch(text)
    if range_match:
        start_letters, start_digits, end_letters, end_digits = range_match.groups()
        start_col = column_to_index(start_letters)
        end_col = column_to_index(end_letters)
        if start_col is None or end_col is None:
            return None
        return GridRange(
            start_row=int(start_digits) - 1,
            end_row=int(end_digits),
            start_col=start_col,
            end_col=end_col + 1,
        )

    cell = parse_cell(text)
    if cell is None:
        logger.debug("Rejected address {!r}", text)
        return None
    return GridRange(
        start_row=cell.row,
        end_row=cell.row + 1,
        start_col=cell.col,
        end_col=cell.col + 1,
    )


def split_sheet_prefix(text: str) -> tuple[str | None, str]:
    """Split ``Sheet!A1:B2`` into the sheet name and the cell part.

    Quoted sheet names (``'My Sheet'!A1``) are unquoted, with doubled
    quotes collapsed. Text without ``!`` has no sheet name.

    Examples:
        "Sales!A1:B2" -> ("Sales", "A1:B2")
        "'Q1 ''24'!C3" -> ("Q1 '24", "C3")
        "A1" -> (None, "A1")
    """
    sheet, sep, cells = text.rpartition("!")
    if not sep:
        return None, text
    if len(sheet) >= 2 and sheet.startswith("'") and sheet.endswith("'"):
        sheet = sheet[1:-1].replace("''", "'")
    return sheet, cells


def parse_spreadsheet_id(id_or_url: str) -> str:
    """Extract spreadsheet ID from a URL or return as-is if already an ID."""
    # https://docs.google.com/spreadsheets/d/SPREADSHEET_ID/edit...
    match = _SPREADSHEET_URL_RE.search(id_or_url)
    if match:
        return match.group(1)
    return id_or_url
