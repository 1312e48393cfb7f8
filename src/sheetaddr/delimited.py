"""CSV/TSV reading and writing for import and export.

Parsing is deliberately forgiving: unbalanced quotes never raise, the
remaining characters are consumed as field content.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import PurePath

_LINE_SPLIT_RE = re.compile(r"\r?\n")

DELIMITER_NAMES = {
    "comma": ",",
    "tab": "\t",
    "pipe": "|",
}


def parse_delimited(content: str, delimiter: str = ",") -> list[list[str]]:
    """Parse CSV/TSV content into a 2D grid.

    Blank lines are skipped and every field is stripped of surrounding
    whitespace. Inside quotes, ``""`` is a literal quote and the delimiter
    does not split.

    Args:
        content: File content
        delimiter: Single-character field separator

    Returns:
        2D list of cell values
    """
    rows: list[list[str]] = []

    for line in _LINE_SPLIT_RE.split(content):
        if not line.strip():
            continue

        cells: list[str] = []
        current: list[str] = []
        in_quotes = False
        i = 0
        while i < len(line):
            char = line[i]
            if char == '"':
                if in_quotes and line[i + 1 : i + 2] == '"':
                    current.append('"')
                    i += 1
                else:
                    in_quotes = not in_quotes
            elif char == delimiter and not in_quotes:
                cells.append("".join(current).strip())
                current = []
            else:
                current.append(char)
            i += 1
        cells.append("".join(current).strip())
        rows.append(cells)

    return rows


def _escape_csv_cell(cell: str, delimiter: str) -> str:
    if delimiter == "," and ("," in cell or '"' in cell or "\n" in cell):
        return '"' + cell.replace('"', '""') + '"'
    return cell


def format_delimited(
    data: Sequence[Sequence[str | None]], delimiter: str = ","
) -> str:
    """Serialize a 2D grid as CSV/TSV.

    Only comma-delimited output is quoted; tab- and pipe-delimited output
    writes cells verbatim.
    """
    return "\n".join(
        delimiter.join(_escape_csv_cell(cell or "", delimiter) for cell in row)
        for row in data
    )


def resolve_delimiter(name: str) -> str:
    """Map ``comma``/``tab``/``pipe`` to the character; pass others through."""
    return DELIMITER_NAMES.get(name.lower(), name)


def detect_delimiter(
    path: str | PurePath | None, content: str = "", default: str = ","
) -> str:
    """Guess the delimiter of a file from its extension, then its content."""
    suffix = PurePath(path).suffix.lower() if path else ""
    if suffix == ".tsv":
        return "\t"
    if "\t" in content and "," not in content:
        return "\t"
    if "|" in content and "," not in content:
        return "|"
    return default
