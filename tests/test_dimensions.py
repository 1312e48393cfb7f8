"""Tests for sheetaddr.dimensions module."""

from sheetaddr.dimensions import (
    DimensionSpan,
    format_column_span,
    format_row_span,
    parse_column_span,
    parse_row_span,
)


class TestColumnSpan:
    def test_single_column(self) -> None:
        assert parse_column_span("A") == DimensionSpan(start=0, end=1)
        assert parse_column_span("AA") == DimensionSpan(start=26, end=27)

    def test_range(self) -> None:
        assert parse_column_span("B:D") == DimensionSpan(start=1, end=4)
        assert parse_column_span("A:Z") == DimensionSpan(start=0, end=26)

    def test_lowercase(self) -> None:
        assert parse_column_span("b:d") == DimensionSpan(start=1, end=4)

    def test_invalid(self) -> None:
        assert parse_column_span("") is None
        assert parse_column_span("B:") is None
        assert parse_column_span("B1") is None
        assert parse_column_span("1:2") is None
        assert parse_column_span("B-D") is None

    def test_reversed_not_validated(self) -> None:
        assert parse_column_span("D:B") == DimensionSpan(start=3, end=2)


class TestRowSpan:
    def test_single_row(self) -> None:
        assert parse_row_span("5") == DimensionSpan(start=4, end=5)
        assert parse_row_span("1") == DimensionSpan(start=0, end=1)

    def test_range(self) -> None:
        assert parse_row_span("5:10") == DimensionSpan(start=4, end=10)
        assert parse_row_span("1:1") == DimensionSpan(start=0, end=1)

    def test_invalid(self) -> None:
        assert parse_row_span("") is None
        assert parse_row_span("A") is None
        assert parse_row_span("5:") is None
        assert parse_row_span("-1") is None
        assert parse_row_span("5 : 10") is None


class TestSpanHelpers:
    def test_size(self) -> None:
        assert DimensionSpan(4, 10).size == 6

    def test_to_api(self) -> None:
        span = DimensionSpan(4, 10)
        assert span.to_api(7, "ROWS") == {
            "sheetId": 7,
            "dimension": "ROWS",
            "startIndex": 4,
            "endIndex": 10,
        }

    def test_format_column_span(self) -> None:
        assert format_column_span(DimensionSpan(1, 2)) == "B"
        assert format_column_span(DimensionSpan(1, 4)) == "B:D"

    def test_format_row_span(self) -> None:
        assert format_row_span(DimensionSpan(4, 5)) == "5"
        assert format_row_span(DimensionSpan(4, 10)) == "5:10"

    def test_format_roundtrip(self) -> None:
        for text in ("C", "B:AA"):
            span = parse_column_span(text)
            assert span is not None
            assert format_column_span(span) == text
        for text in ("3", "5:10"):
            span = parse_row_span(text)
            assert span is not None
            assert format_row_span(span) == text
