"""Tests for month arithmetic."""

import pytest
from datetime import date, datetime

from conftest import make_transaction
from ledger.engine.periods import (
    in_period,
    month_interval,
    month_label,
    month_of,
    shift_month,
    trailing_months,
    window_of,
)


class TestShiftMonth:
    """Tests for shift_month."""

    def test_backwards_across_year(self):
        assert shift_month(2024, 3, -5) == (2023, 10)

    def test_forwards_across_year(self):
        assert shift_month(2023, 11, 3) == (2024, 2)

    def test_zero_offset(self):
        assert shift_month(2024, 1, 0) == (2024, 1)

    def test_many_years(self):
        assert shift_month(2024, 1, -25) == (2021, 12)


class TestMonthInterval:
    """Tests for month_interval and MonthInterval."""

    def test_bounds_are_first_and_last_instant(self):
        interval = month_interval(2024, 2)
        assert interval.start == datetime(2024, 2, 1, 0, 0, 0)
        assert interval.end == datetime(2024, 2, 29, 23, 59, 59, 999999)

    def test_contains_is_inclusive(self):
        interval = month_interval(2024, 3)
        assert interval.contains(date(2024, 3, 1))
        assert interval.contains(date(2024, 3, 31))
        assert not interval.contains(date(2024, 2, 29))
        assert not interval.contains(date(2024, 4, 1))

    def test_date_range_is_iso(self):
        assert month_interval(2023, 12).date_range() == ("2023-12-01", "2023-12-31")

    def test_month_of(self):
        assert month_of(date(2024, 3, 15)) == month_interval(2024, 3)


class TestTrailingMonths:
    """Tests for trailing_months."""

    def test_six_months_roll_over_year(self):
        intervals = trailing_months(date(2024, 3, 15), 6)
        assert [(i.year, i.month) for i in intervals] == [
            (2023, 10), (2023, 11), (2023, 12), (2024, 1), (2024, 2), (2024, 3),
        ]

    def test_last_interval_ends_at_reference_month_end(self):
        intervals = trailing_months(date(2024, 3, 15), 3)
        assert intervals[-1].end_date == date(2024, 3, 31)

    def test_single_month(self):
        assert trailing_months(date(2024, 3, 15), 1) == [month_interval(2024, 3)]

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_is_empty(self, count):
        assert trailing_months(date(2024, 3, 15), count) == []

    def test_window_of(self):
        intervals = trailing_months(date(2024, 3, 15), 6)
        assert window_of(intervals) == ("2023-10-01", "2024-03-31")
        assert window_of([]) is None


class TestInPeriod:
    """Tests for in_period and month_label."""

    def test_keeps_order_and_boundaries(self):
        inside_last = make_transaction(1, day=date(2024, 3, 31))
        outside = make_transaction(2, day=date(2024, 4, 1))
        inside_first = make_transaction(3, day=date(2024, 3, 1))

        result = in_period([inside_last, outside, inside_first], month_interval(2024, 3))
        assert result == [inside_last, inside_first]

    def test_month_label(self):
        assert month_label(month_interval(2023, 10)) == "October 2023"
        assert month_label(month_interval(2023, 10), "%m/%Y") == "10/2023"
