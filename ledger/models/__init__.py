"""
Data Models Package

This package contains all Pydantic models used in Personal Ledger.
Ledger entities come in from the store; report models go out to the UI.
"""

from ledger.models.ledger import (
    Account,
    AccountType,
    Budget,
    Category,
    CategoryType,
    Goal,
    LedgerRecord,
    LedgerSnapshot,
    Transaction,
    TransactionType,
)
from ledger.models.reports import (
    AnalysisReport,
    BudgetProgress,
    BudgetSummary,
    CategorySlice,
    DashboardSummary,
    ExportDocument,
    GoalProgress,
    MonthInterval,
    MonthlySeriesEntry,
    PeriodTotals,
    TransactionLine,
)
from ledger.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "Account",
    "AccountType",
    "Budget",
    "Category",
    "CategoryType",
    "Goal",
    "LedgerRecord",
    "LedgerSnapshot",
    "Transaction",
    "TransactionType",
    # Report models
    "AnalysisReport",
    "BudgetProgress",
    "BudgetSummary",
    "CategorySlice",
    "DashboardSummary",
    "ExportDocument",
    "GoalProgress",
    "MonthInterval",
    "MonthlySeriesEntry",
    "PeriodTotals",
    "TransactionLine",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
