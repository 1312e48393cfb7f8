"""Small helpers shared by the filter and statistics modules."""

from __future__ import annotations

import math


def parse_number(text: str | None) -> float | None:
    """Parse cell text as a finite number.

    Surrounding whitespace is ignored. ``nan``, ``inf`` and Python's
    ``1_000`` digit grouping are not numbers in a spreadsheet cell.

    Examples:
        "15" -> 15.0, " -2.5 " -> -2.5, "1e3" -> 1000.0, "abc" -> None
    """
    if not text or "_" in text:
        return None
    try:
        number = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number
