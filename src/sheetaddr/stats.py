"""Summary statistics over the numeric cells of a range."""

from __future__ import annotations

import math
import statistics
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from sheetaddr.address import GridRange
from sheetaddr.utils import parse_number


@dataclass(frozen=True)
class RangeStats:
    count: int
    sum: float
    avg: float
    median: float
    min: float
    max: float
    std_dev: float

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["stdDev"] = data.pop("std_dev")
        return data


def _numeric_values(data: Sequence[Sequence[str | None]]) -> list[float]:
    values: list[float] = []
    for row in data:
        for cell in row:
            number = parse_number(cell)
            if number is not None:
                values.append(number)
    return values


def compute_stats(
    data: Sequence[Sequence[str | None]], precision: int = 2
) -> RangeStats | None:
    """Compute count, sum, average, median, min, max and std dev.

    Every cell that parses as a number contributes, wherever it sits in
    the grid. The standard deviation is the population one.

    Returns:
        RangeStats, or None if no cell is numeric
    """
    values = _numeric_values(data)
    if not values:
        return None

    total = math.fsum(values)
    return RangeStats(
        count=len(values),
        sum=round(total, precision),
        avg=round(total / len(values), precision),
        median=round(statistics.median(values), precision),
        min=min(values),
        max=max(values),
        std_dev=round(statistics.pstdev(values), precision),
    )


def slice_range(
    data: Sequence[Sequence[str]], grid_range: GridRange
) -> list[list[str]]:
    """Return the part of ``data`` covered by ``grid_range``.

    ``data`` is treated as starting at A1. Cells past the end of a ragged
    row are omitted rather than padded.
    """
    start_row = max(grid_range.start_row, 0)
    start_col = max(grid_range.start_col, 0)
    return [
        list(row[start_col : grid_range.end_col])
        for row in data[start_row : grid_range.end_row]
    ]
