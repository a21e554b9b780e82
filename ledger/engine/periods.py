"""
Period Utilities

Calendar-month arithmetic shared by every time-based builder.
All functions are pure: the same arguments always give the same months.
"""

import calendar
from datetime import date, datetime, time
from typing import Iterable, Optional

from ledger.models.ledger import Transaction
from ledger.models.reports import MonthInterval


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """
    Move (year, month) by offset months, rolling over year boundaries.

    shift_month(2024, 3, -5) == (2023, 10)
    """
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_interval(year: int, month: int) -> MonthInterval:
    """The full calendar month, first instant to last instant."""
    last_day = calendar.monthrange(year, month)[1]
    return MonthInterval(
        year=year,
        month=month,
        start=datetime.combine(date(year, month, 1), time.min),
        end=datetime.combine(date(year, month, last_day), time.max),
    )


def month_of(day: date) -> MonthInterval:
    """The month containing day."""
    return month_interval(day.year, day.month)


def trailing_months(reference: date, count: int) -> list[MonthInterval]:
    """
    The count calendar months ending with the reference date's month.

    Oldest first. A reference of 2024-03-15 with count 6 yields
    October 2023 through March 2024. count <= 0 yields no months.
    """
    if count <= 0:
        return []

    return [
        month_interval(*shift_month(reference.year, reference.month, offset))
        for offset in range(1 - count, 1)
    ]


def window_of(intervals: list[MonthInterval]) -> Optional[tuple[str, str]]:
    """ISO bounds spanning a run of months; None when there are none."""
    if not intervals:
        return None
    return intervals[0].start_date.isoformat(), intervals[-1].end_date.isoformat()


def in_period(
    transactions: Iterable[Transaction],
    interval: MonthInterval,
) -> list[Transaction]:
    """Transactions dated inside the interval, in their original order."""
    return [t for t in transactions if interval.contains(t.date)]


def month_label(interval: MonthInterval, fmt: str = "%B %Y") -> str:
    """Display label for a month, e.g. 'October 2023'."""
    return interval.start.strftime(fmt)
