"""Row-only and column-only span parsing (``5:10``, ``B:D``)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Literal

from loguru import logger

from sheetaddr.columns import column_to_index, index_to_column

Dimension = Literal["ROWS", "COLUMNS"]

_COLUMN_SPAN_RE = re.compile(r"([A-Z]+)(?::([A-Z]+))?", re.IGNORECASE | re.ASCII)
_ROW_SPAN_RE = re.compile(r"(\d+)(?::(\d+))?", re.ASCII)


@dataclass(frozen=True)
class DimensionSpan:
    """A zero-based, half-open run of rows or columns."""

    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start

    def to_api(self, sheet_id: int, dimension: Dimension) -> dict[str, Any]:
        """Return the Sheets API ``DimensionRange`` representation."""
        return {
            "sheetId": sheet_id,
            "dimension": dimension,
            "startIndex": self.start,
            "endIndex": self.end,
        }


def parse_column_span(text: str) -> DimensionSpan | None:
    """Parse ``B`` or ``B:D`` into a column span.

    Examples:
        "B" -> DimensionSpan(1, 2), "B:D" -> DimensionSpan(1, 4)
    """
    match = _COLUMN_SPAN_RE.fullmatch(text)
    if not match:
        logger.debug("Rejected column span {!r}", text)
        return None

    first, second = match.groups()
    start = column_to_index(first)
    if start is None:
        return None
    if second is None:
        return DimensionSpan(start=start, end=start + 1)

    last = column_to_index(second)
    if last is None:
        return None
    return DimensionSpan(start=start, end=last + 1)


def parse_row_span(text: str) -> DimensionSpan | None:
    """Parse ``5`` or ``5:10`` (1-indexed, inclusive) into a row span.

    Examples:
        "5" -> DimensionSpan(4, 5), "5:10" -> DimensionSpan(4, 10)
    """
    match = _ROW_SPAN_RE.fullmatch(text)
    if not match:
        logger.debug("Rejected row span {!r}", text)
        return None

    first, second = match.groups()
    start = int(first) - 1
    if second is None:
        return DimensionSpan(start=start, end=start + 1)
    return DimensionSpan(start=start, end=int(second))


def format_column_span(span: DimensionSpan) -> str:
    """Render a column span as ``B`` or ``B:D``."""
    first = index_to_column(span.start)
    if span.size == 1:
        return first
    return f"{first}:{index_to_column(span.end - 1)}"


def format_row_span(span: DimensionSpan) -> str:
    """Render a row span as ``5`` or ``5:10``."""
    if span.size == 1:
        return str(span.start + 1)
    return f"{span.start + 1}:{span.end}"
