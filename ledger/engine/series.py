"""
Monthly Series Builder

Income, expense and net per month across a trailing window, oldest
month first. Feeds the income vs. expense bars and the balance trend.
"""

from bisect import bisect_left, bisect_right
from datetime import date
from typing import Iterable

from ledger.engine.periods import month_label, trailing_months
from ledger.engine.totals import period_totals
from ledger.models.ledger import Transaction
from ledger.models.reports import MonthlySeriesEntry


def monthly_series(
    transactions: Iterable[Transaction],
    reference: date,
    months: int,
    label_format: str = "%B %Y",
) -> list[MonthlySeriesEntry]:
    """
    Build one entry per month for the months ending at reference.

    Transactions outside the window are ignored. Each month's figures
    are exactly period_totals() of the transactions dated in it, both
    month boundaries included.
    """
    intervals = trailing_months(reference, months)
    if not intervals:
        return []

    # Sort once, then slice each month out by date
    ordered = sorted(transactions, key=lambda t: t.date)
    dates = [t.date for t in ordered]

    series = []
    for interval in intervals:
        lo = bisect_left(dates, interval.start_date)
        hi = bisect_right(dates, interval.end_date)
        totals = period_totals(ordered[lo:hi])
        series.append(
            MonthlySeriesEntry(
                period=interval,
                label=month_label(interval, label_format),
                income=totals.income,
                expense=totals.expense,
                net=totals.net,
            )
        )

    return series
