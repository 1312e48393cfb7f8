"""Tests for range statistics."""

import pytest

from sheetaddr.address import GridRange
from sheetaddr.stats import RangeStats, compute_stats, slice_range
from sheetaddr.utils import parse_number


class TestComputeStats:
    def test_basic(self) -> None:
        stats = compute_stats([["1", "2"], ["3", "4"]])
        assert stats == RangeStats(
            count=4,
            sum=10,
            avg=2.5,
            median=2.5,
            min=1,
            max=4,
            std_dev=1.12,
        )

    def test_skips_non_numeric(self, sales_rows: list[list[str]]) -> None:
        stats = compute_stats(sales_rows)
        assert stats is not None
        # 5, 120.50, 15, 80, 25, 300
        assert stats.count == 6
        assert stats.sum == pytest.approx(545.5)
        assert stats.min == 5
        assert stats.max == 300

    def test_odd_median(self) -> None:
        stats = compute_stats([["7"], ["1"], ["3"]])
        assert stats is not None
        assert stats.median == 3

    def test_precision(self) -> None:
        stats = compute_stats([["1"], ["2"], ["2"]], precision=4)
        assert stats is not None
        assert stats.avg == 1.6667
        assert stats.std_dev == 0.4714

    def test_no_numbers(self) -> None:
        assert compute_stats([["a", "b"], [""]]) is None
        assert compute_stats([]) is None

    def test_to_dict_keys(self) -> None:
        stats = compute_stats([["2"]])
        assert stats is not None
        assert stats.to_dict() == {
            "count": 1,
            "sum": 2,
            "avg": 2,
            "median": 2,
            "min": 2,
            "max": 2,
            "stdDev": 0,
        }


class TestSliceRange:
    def test_slice(self) -> None:
        data = [["a", "b", "c"], ["1", "2", "3"], ["4", "5", "6"]]
        assert slice_range(data, GridRange(1, 3, 1, 3)) == [["2", "3"], ["5", "6"]]

    def test_ragged_rows_not_padded(self) -> None:
        data = [["a", "b", "c"], ["1"]]
        assert slice_range(data, GridRange(0, 2, 1, 3)) == [["b", "c"], []]

    def test_past_the_end(self) -> None:
        data = [["a"]]
        assert slice_range(data, GridRange(5, 10, 0, 1)) == []


class TestParseNumber:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("15", 15.0),
            (" -2.5 ", -2.5),
            ("1e3", 1000.0),
            (".5", 0.5),
        ],
    )
    def test_numbers(self, text: str, expected: float) -> None:
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", None, "abc", "1,000", "1_000", "nan", "inf", "-Infinity"])
    def test_not_numbers(self, text: str | None) -> None:
        assert parse_number(text) is None
