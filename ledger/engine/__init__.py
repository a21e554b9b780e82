"""
Aggregation engine.

Pure builders that turn a ledger snapshot into display values.
None of them perform I/O or keep state between calls.
"""

from ledger.engine.amounts import clamped_percentage, magnitude, to_amount
from ledger.engine.breakdown import category_breakdown
from ledger.engine.budgets import (
    budget_progress,
    budget_summary,
    budgetable_categories,
    budgets_progress,
    spent_by_category,
)
from ledger.engine.export import (
    EXPORT_COLUMNS,
    build_export,
    export_filename,
    export_transactions,
)
from ledger.engine.goals import describe_goal, goal_progress, goals_progress
from ledger.engine.listing import (
    categories_for_type,
    installment_label,
    recent_transactions,
    transaction_lines,
)
from ledger.engine.lookup import LedgerLookup, ResolvedCategory
from ledger.engine.periods import (
    in_period,
    month_interval,
    month_label,
    month_of,
    shift_month,
    trailing_months,
    window_of,
)
from ledger.engine.reporter import LedgerReporter
from ledger.engine.series import monthly_series
from ledger.engine.totals import period_totals, total_balance

__all__ = [
    # Amount rules
    "clamped_percentage",
    "magnitude",
    "to_amount",
    # Periods
    "in_period",
    "month_interval",
    "month_label",
    "month_of",
    "shift_month",
    "trailing_months",
    "window_of",
    # Lookup
    "LedgerLookup",
    "ResolvedCategory",
    # Builders
    "budget_progress",
    "budget_summary",
    "budgetable_categories",
    "budgets_progress",
    "build_export",
    "categories_for_type",
    "category_breakdown",
    "describe_goal",
    "export_filename",
    "export_transactions",
    "EXPORT_COLUMNS",
    "goal_progress",
    "goals_progress",
    "installment_label",
    "monthly_series",
    "period_totals",
    "recent_transactions",
    "spent_by_category",
    "total_balance",
    "transaction_lines",
    # Facade
    "LedgerReporter",
]
