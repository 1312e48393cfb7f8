"""Row filter expressions such as ``C>100`` or ``A=foo AND B<50``.

Grammar::

    filter    := condition (combinator condition)*
    condition := LETTERS operator VALUE
    operator  := ">=" | "<=" | "!=" | "=" | ">" | "<"
    combinator:= AND | OR            (case-insensitive, whitespace around)

Combinators have no precedence. Conditions are folded strictly left to
right, so ``A AND B OR C`` means ``(A AND B) OR C`` and ``A OR B AND C``
means ``(A OR B) AND C``.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from sheetaddr.columns import column_to_index
from sheetaddr.utils import parse_number


class Operator(Enum):
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="


class Combinator(Enum):
    AND = "AND"
    OR = "OR"


_COMBINATOR_SPLIT_RE = re.compile(r"(?:^|\s+)(AND|OR)(?:\s+|$)", re.IGNORECASE)
# Two-character operators first so ">=" never matches as ">" + "=VALUE".
_CONDITION_RE = re.compile(
    r"([A-Z]+)\s*(>=|<=|!=|=|>|<)\s*(.+)", re.IGNORECASE | re.ASCII | re.DOTALL
)

_NUMERIC_COMPARE: dict[Operator, Callable[[float, float], bool]] = {
    Operator.EQ: operator.eq,
    Operator.NE: operator.ne,
    Operator.GT: operator.gt,
    Operator.LT: operator.lt,
    Operator.GE: operator.ge,
    Operator.LE: operator.le,
}


@dataclass(frozen=True)
class FilterCondition:
    """A single ``<column> <operator> <value>`` comparison."""

    column: str
    operator: Operator
    value: str

    def __str__(self) -> str:
        return f"{self.column}{self.operator.value}{self.value}"


@dataclass(frozen=True)
class CompoundFilter:
    """Conditions joined by combinators, evaluated left to right.

    ``combinators`` always has exactly ``len(conditions) - 1`` entries.
    """

    conditions: tuple[FilterCondition, ...]
    combinators: tuple[Combinator, ...] = ()

    def __post_init__(self) -> None:
        if not self.conditions:
            raise ValueError("CompoundFilter needs at least one condition")
        if len(self.combinators) != len(self.conditions) - 1:
            raise ValueError(
                f"Expected {len(self.conditions) - 1} combinators, "
                f"got {len(self.combinators)}"
            )

    def __str__(self) -> str:
        parts = [str(self.conditions[0])]
        for combinator, condition in zip(
            self.combinators, self.conditions[1:], strict=True
        ):
            parts.append(f"{combinator.value} {condition}")
        return " ".join(parts)


def parse_filter(expr: str) -> CompoundFilter | None:
    """Parse a filter expression.

    Returns None if any part of the expression is malformed; there is no
    partial result.

    Examples:
        "C>100" -> one condition
        "A=foo AND B<50" -> two conditions joined by AND
    """
    parts = _COMBINATOR_SPLIT_RE.split(expr.strip())
    segments = parts[0::2]
    combinators = [Combinator(word.upper()) for word in parts[1::2]]

    conditions: list[FilterCondition] = []
    for segment in segments:
        condition = _parse_condition(segment)
        if condition is None:
            logger.bind(expression=expr).debug(
                "Rejected filter segment {!r}", segment
            )
            return None
        conditions.append(condition)

    return CompoundFilter(conditions=tuple(conditions), combinators=tuple(combinators))


def _parse_condition(segment: str) -> FilterCondition | None:
    match = _CONDITION_RE.fullmatch(segment.strip())
    if not match:
        return None
    column, op, value = match.groups()
    value = value.strip()
    if not value:
        return None
    return FilterCondition(column=column.upper(), operator=Operator(op), value=value)


def evaluate_condition(
    row: Sequence[str], condition: FilterCondition, column_offset: int = 0
) -> bool:
    """Evaluate one condition against a row.

    Args:
        row: Cell values of the row, starting at ``column_offset``
        condition: The comparison to apply
        column_offset: Zero-based column index of the row's first cell
            (the start column of the fetched range)

    Returns:
        The comparison result. A column outside the row is False.
    """
    column = column_to_index(condition.column)
    if column is None:
        return False
    index = column - column_offset
    if index < 0 or index >= len(row):
        return False

    cell = row[index] if row[index] is not None else ""
    cell_number = parse_number(cell)
    value_number = parse_number(condition.value)
    if cell_number is not None and value_number is not None:
        return _NUMERIC_COMPARE[condition.operator](cell_number, value_number)

    if condition.operator is Operator.EQ:
        return cell.lower() == condition.value.lower()
    if condition.operator is Operator.NE:
        return cell.lower() != condition.value.lower()
    # Ordering is only defined for numbers.
    return False


def matches(
    row: Sequence[str], compound: CompoundFilter, column_offset: int = 0
) -> bool:
    """Fold a row's condition results left to right, without precedence."""
    result = evaluate_condition(row, compound.conditions[0], column_offset)
    for combinator, condition in zip(
        compound.combinators, compound.conditions[1:], strict=True
    ):
        current = evaluate_condition(row, condition, column_offset)
        if combinator is Combinator.AND:
            result = result and current
        else:
            result = result or current
    return result


def apply_filter(
    data: Sequence[Sequence[str]], compound: CompoundFilter, column_offset: int = 0
) -> list[list[str]]:
    """Filter tabular data, always keeping the header row.

    Args:
        data: Rows of cell values; row 0 is the header
        compound: Parsed filter
        column_offset: Zero-based start column of the range ``data`` was
            fetched from

    Returns:
        The header followed by every row the filter accepts.
    """
    if not data:
        return []

    header, *rows = data
    kept = [list(row) for row in rows if matches(row, compound, column_offset)]
    logger.debug("Filter {!s} kept {}/{} rows", compound, len(kept), len(rows))
    return [list(header), *kept]
