"""sheetaddr - A1 notation, row filters and CSV/TSV for Google Sheets tools.

This library holds the pure parsing layer shared by spreadsheet command
handlers: A1 addresses and row/column spans to zero-based coordinates,
a small row-filter language, and the delimited-text codec used by
import and export.
"""

__version__ = "0.1.0"

from loguru import logger

from sheetaddr.address import (
    CellAddress,
    GridRange,
    cell_to_a1,
    parse_address,
    parse_cell,
    parse_spreadsheet_id,
    split_sheet_prefix,
)
from sheetaddr.columns import column_to_index, index_to_column
from sheetaddr.delimited import (
    detect_delimiter,
    format_delimited,
    parse_delimited,
    resolve_delimiter,
)
from sheetaddr.dimensions import (
    DimensionSpan,
    format_column_span,
    format_row_span,
    parse_column_span,
    parse_row_span,
)
from sheetaddr.exceptions import (
    InvalidFilterError,
    InvalidRangeError,
    SheetAddrError,
)
from sheetaddr.filters import (
    Combinator,
    CompoundFilter,
    FilterCondition,
    Operator,
    apply_filter,
    evaluate_condition,
    parse_filter,
)

logger.disable("sheetaddr")

__all__ = [
    "CellAddress",
    "Combinator",
    "CompoundFilter",
    "DimensionSpan",
    "FilterCondition",
    "GridRange",
    "InvalidFilterError",
    "InvalidRangeError",
    "Operator",
    "SheetAddrError",
    "__version__",
    "apply_filter",
    "cell_to_a1",
    "column_to_index",
    "detect_delimiter",
    "evaluate_condition",
    "format_column_span",
    "format_delimited",
    "format_row_span",
    "index_to_column",
    "parse_address",
    "parse_cell",
    "parse_column_span",
    "parse_delimited",
    "parse_filter",
    "parse_row_span",
    "parse_spreadsheet_id",
    "resolve_delimiter",
    "split_sheet_prefix",
]
