"""
Ledger Reporter

Composes the builders into the views each page renders.

GUARANTEES:
- Reads only the snapshot it was given; no storage access
- Never raises for missing references, odd amounts or empty input
- Same snapshot and arguments, same result
"""

from datetime import date
from typing import Optional

from ledger.config.settings import EngineSettings
from ledger.engine.breakdown import category_breakdown
from ledger.engine.budgets import budget_summary
from ledger.engine.export import build_export
from ledger.engine.goals import goals_progress
from ledger.engine.listing import recent_transactions, transaction_lines
from ledger.engine.periods import in_period, month_interval, month_of, trailing_months
from ledger.engine.series import monthly_series
from ledger.engine.totals import period_totals, total_balance
from ledger.models.ledger import LedgerSnapshot, Transaction
from ledger.models.reports import (
    AnalysisReport,
    BudgetSummary,
    CategorySlice,
    DashboardSummary,
    ExportDocument,
    GoalProgress,
    MonthInterval,
    TransactionLine,
)


class LedgerReporter:
    """
    Builds page views from one ledger snapshot.

    The snapshot may hold more transactions than a view needs; each
    view narrows them to its own period first.
    """

    def __init__(
        self,
        snapshot: LedgerSnapshot,
        settings: Optional[EngineSettings] = None,
    ):
        self._snapshot = snapshot
        self._settings = settings or EngineSettings()

    @property
    def snapshot(self) -> LedgerSnapshot:
        return self._snapshot

    def _breakdown(self, transactions: list[Transaction]) -> list[CategorySlice]:
        return category_breakdown(
            transactions,
            self._snapshot.categories,
            fallback_name=self._settings.fallback_category_name,
            fallback_color=self._settings.fallback_category_color,
        )

    def transactions(self, interval: Optional[MonthInterval] = None) -> list[TransactionLine]:
        """Listing rows, optionally narrowed to one month."""
        transactions = self._snapshot.transactions
        if interval is not None:
            transactions = in_period(transactions, interval)

        return transaction_lines(
            transactions,
            self._snapshot.categories,
            self._snapshot.accounts,
            uncategorized_label=self._settings.uncategorized_label,
            missing_account_label=self._settings.missing_account_label,
        )

    def dashboard(self, reference: date) -> DashboardSummary:
        """Overview for the month containing reference."""
        period = month_of(reference)
        transactions = in_period(self._snapshot.transactions, period)

        return DashboardSummary(
            period=period,
            total_balance=total_balance(self._snapshot.accounts),
            totals=period_totals(transactions),
            breakdown=self._breakdown(transactions),
            recent=recent_transactions(
                transactions,
                self._snapshot.categories,
                self._snapshot.accounts,
                limit=self._settings.recent_transactions_limit,
                uncategorized_label=self._settings.uncategorized_label,
                missing_account_label=self._settings.missing_account_label,
            ),
        )

    def analysis(self, reference: date, months: Optional[int] = None) -> AnalysisReport:
        """Trend over the trailing months plus totals for the whole window."""
        months = self._settings.default_series_months if months is None else months
        intervals = trailing_months(reference, months)
        if not intervals:
            return AnalysisReport()

        window_start = intervals[0].start_date
        window_end = intervals[-1].end_date
        transactions = [
            t for t in self._snapshot.transactions
            if window_start <= t.date <= window_end
        ]

        return AnalysisReport(
            series=monthly_series(
                transactions,
                reference,
                months,
                label_format=self._settings.month_label_format,
            ),
            breakdown=self._breakdown(transactions),
            totals=period_totals(transactions),
        )

    def budgets(self, month: int, year: int) -> BudgetSummary:
        """Budget page for one month."""
        period = month_interval(year, month)
        budgets = [b for b in self._snapshot.budgets if b.month == month and b.year == year]

        return budget_summary(
            month,
            year,
            budgets,
            in_period(self._snapshot.transactions, period),
            self._snapshot.categories,
            removed_label=self._settings.removed_category_label,
        )

    def goals(self) -> list[GoalProgress]:
        return goals_progress(self._snapshot.goals)

    def export(self, day: date) -> ExportDocument:
        """Every snapshot transaction, in snapshot order, as CSV."""
        return build_export(
            self._snapshot.transactions,
            self._snapshot.categories,
            self._snapshot.accounts,
            day,
            delimiter=self._settings.export_delimiter,
            prefix=self._settings.export_filename_prefix,
        )
