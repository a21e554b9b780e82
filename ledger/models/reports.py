"""
Report Models

Derived, display-ready values produced by the builders in ledger.engine.
Nothing here is ever persisted; each instance is recomputed from a
snapshot whenever a page is rendered.
"""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ledger.models.ledger import TransactionType


class ReportModel(BaseModel):
    """Base for derived values; immutable once built."""

    model_config = ConfigDict(frozen=True)


# =============================================================================
# PERIODS
# =============================================================================

class MonthInterval(ReportModel):
    """
    One calendar month, from the first instant of day 1
    to the last instant of its last day.
    """

    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    start: dt.datetime = Field(
        ...,
        description="Midnight of the first day"
    )
    end: dt.datetime = Field(
        ...,
        description="Last microsecond of the last day"
    )

    @property
    def start_date(self) -> dt.date:
        return self.start.date()

    @property
    def end_date(self) -> dt.date:
        return self.end.date()

    def contains(self, day: dt.date) -> bool:
        """Both boundaries are inclusive."""
        return self.start_date <= day <= self.end_date

    def date_range(self) -> tuple[str, str]:
        """ISO bounds used to request this month from the store."""
        return self.start_date.isoformat(), self.end_date.isoformat()


# =============================================================================
# TOTALS AND SERIES
# =============================================================================

class PeriodTotals(ReportModel):
    """Income and expense magnitudes for a set of transactions."""

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


class MonthlySeriesEntry(ReportModel):
    """One point of the income vs. expense trend."""

    period: MonthInterval
    label: str
    income: Decimal
    expense: Decimal
    net: Decimal


# =============================================================================
# CATEGORY BREAKDOWN
# =============================================================================

class CategorySlice(ReportModel):
    """
    Expense total for one category.

    category_id is None for the fallback group that collects
    expenses with a missing or deleted category.
    """

    category_id: Optional[str] = None
    name: str
    value: Decimal
    color: str


# =============================================================================
# BUDGETS
# =============================================================================

class BudgetProgress(ReportModel):
    """Spend against one budget record."""

    budget_id: str
    category_id: str
    category_name: str
    category_color: Optional[str] = None
    month: int
    year: int
    limit: Decimal
    spent: Decimal
    percent: int = Field(..., ge=0, le=100)
    is_over: bool
    overage: Decimal

    @property
    def remaining(self) -> Decimal:
        """What is left before the limit; zero once exceeded."""
        return max(self.limit - self.spent, Decimal("0"))


class BudgetSummary(ReportModel):
    """All budgets of one month with their combined totals."""

    month: int
    year: int
    total_budgeted: Decimal = Decimal("0")
    total_spent: Decimal = Decimal("0")
    items: list[BudgetProgress] = Field(default_factory=list)

    @property
    def over_budget_count(self) -> int:
        return sum(1 for item in self.items if item.is_over)


# =============================================================================
# GOALS
# =============================================================================

class GoalProgress(ReportModel):
    """Display values for one savings goal."""

    goal_id: str
    title: str
    description: Optional[str] = None
    target_amount: Decimal
    current_amount: Decimal = Field(
        ...,
        description="Saved amount as displayed (never negative)"
    )
    percent: int = Field(..., ge=0, le=100)
    remaining: Decimal
    target_date: Optional[dt.date] = None
    is_completed: bool = False


# =============================================================================
# LISTINGS
# =============================================================================

class TransactionLine(ReportModel):
    """A transaction joined with its account and category names."""

    transaction_id: str
    date: dt.date
    description: str
    type: TransactionType
    amount: Decimal = Field(
        ...,
        description="Magnitude of the stored amount"
    )
    sign: str = Field(
        ...,
        description="'+ ' for income, '- ' for expense, empty for transfers"
    )
    account_name: str
    category_name: str
    is_recurring: bool = False
    installment_label: Optional[str] = None


# =============================================================================
# PAGE-LEVEL VIEWS
# =============================================================================

class DashboardSummary(ReportModel):
    """Figures shown on the overview page for one month."""

    period: MonthInterval
    total_balance: Decimal
    totals: PeriodTotals
    breakdown: list[CategorySlice] = Field(default_factory=list)
    recent: list[TransactionLine] = Field(default_factory=list)


class AnalysisReport(ReportModel):
    """Trend, breakdown and totals over a trailing window of months."""

    series: list[MonthlySeriesEntry] = Field(default_factory=list)
    breakdown: list[CategorySlice] = Field(default_factory=list)
    totals: PeriodTotals = Field(default_factory=PeriodTotals)


class ExportDocument(ReportModel):
    """A text document ready to hand to the download sink."""

    filename: str
    content: str
    row_count: int = Field(..., ge=0)
    media_type: str = "text/csv;charset=utf-8"

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")
