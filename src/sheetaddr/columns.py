"""Column letter <-> zero-based index conversion.

Spreadsheet columns use bijective base-26: there is no zero letter, so
``Z`` is followed by ``AA`` rather than ``BA``.
"""

from __future__ import annotations

import re

from loguru import logger

_LETTERS_RE = re.compile(r"[A-Za-z]+")


def column_to_index(letters: str) -> int | None:
    """Convert column letter(s) to a zero-based column index.

    Input is case-insensitive. Returns None for empty input or anything
    that is not made up of ASCII letters.

    Examples:
        A -> 0, Z -> 25, AA -> 26, ZZ -> 701, AAA -> 702
    """
    if not _LETTERS_RE.fullmatch(letters):
        logger.debug("Rejected column letters {!r}", letters)
        return None

    result = 0
    for char in letters.upper():
        result = result * 26 + (ord(char) - ord("A") + 1)
    return result - 1


def index_to_column(index: int) -> str:
    """Convert a zero-based column index to column letter(s).

    Examples:
        0 -> A, 25 -> Z, 26 -> AA, 701 -> ZZ, 702 -> AAA
    """
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")

    result = ""
    while index >= 0:
        result = chr(ord("A") + (index % 26)) + result
        index = index // 26 - 1
    return result
