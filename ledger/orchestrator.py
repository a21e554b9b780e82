"""
Main Orchestrator for Personal Ledger

This module ties the store, the audit log and the report engine
together and defines the page flows:
1. Read (fetch the window a page needs → snapshot → build the view)
2. Write (insert / update / delete a record on the user's behalf)

DESIGN DECISION: The orchestrator is the only place that touches storage.
The engine receives a finished snapshot and never calls back, so a view
is always computed from one consistent read.

Storage failures are audited and re-raised; deciding how to present
them is the UI's job. Data-quality problems never raise - the engine
resolves them to fallbacks.
"""

from datetime import date
from typing import Any, Optional
from uuid import UUID

from ledger.audit import AuditLogger, create_correlation_id
from ledger.config import EngineSettings, get_settings
from ledger.engine import LedgerReporter
from ledger.engine.periods import month_interval, month_of, trailing_months, window_of
from ledger.models.ledger import LedgerRecord, LedgerSnapshot
from ledger.models.reports import (
    AnalysisReport,
    BudgetSummary,
    DashboardSummary,
    ExportDocument,
    GoalProgress,
    TransactionLine,
)
from ledger.services.storage import (
    EntityKind,
    LedgerStorageInterface,
    StorageError,
)


class LedgerOrchestrator:
    """
    Runs page loads and edits for one storage backend.

    Every public call gets a correlation id (or uses the one passed in)
    so the snapshot load and the report it fed can be traced together.
    """

    def __init__(
        self,
        storage: LedgerStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[EngineSettings] = None,
    ):
        self._storage = storage
        self._audit_logger = audit_logger
        self._settings = settings or get_settings().engine

    # =========================================================================
    # READS
    # =========================================================================

    async def load_snapshot(
        self,
        user_id: str,
        window: Optional[tuple[str, str]] = None,
        budget_month: Optional[tuple[int, int]] = None,
        include_goals: bool = False,
        correlation_id: Optional[UUID] = None,
    ) -> LedgerSnapshot:
        """
        Fetch what a page needs in one go.

        Args:
            user_id: Owner of the ledger
            window: Inclusive (start, end) ISO dates for transactions;
                    None skips transactions
            budget_month: (month, year) of budgets to fetch; None skips budgets
            include_goals: Whether to fetch goals
            correlation_id: Correlation ID for auditing
        """
        correlation_id = correlation_id or create_correlation_id()

        try:
            accounts = await self._storage.list_accounts(user_id)
            categories = await self._storage.list_categories(user_id)
            transactions = (
                await self._storage.list_transactions(user_id, *window)
                if window else []
            )
            budgets = (
                await self._storage.list_budgets(user_id, *budget_month)
                if budget_month else []
            )
            goals = await self._storage.list_goals(user_id) if include_goals else []
        except StorageError as e:
            if self._audit_logger:
                await self._audit_logger.log_storage_error(
                    operation="load_snapshot",
                    error_message=str(e),
                    correlation_id=correlation_id,
                )
            raise

        snapshot = LedgerSnapshot(
            accounts=tuple(accounts),
            categories=tuple(categories),
            transactions=tuple(transactions),
            budgets=tuple(budgets),
            goals=tuple(goals),
        )

        if self._audit_logger:
            await self._audit_logger.log_snapshot_loaded(
                user_id=user_id,
                counts={
                    "accounts": len(snapshot.accounts),
                    "categories": len(snapshot.categories),
                    "transactions": len(snapshot.transactions),
                    "budgets": len(snapshot.budgets),
                    "goals": len(snapshot.goals),
                },
                window=window,
                correlation_id=correlation_id,
            )

        return snapshot

    async def _report_built(
        self,
        report: str,
        user_id: str,
        correlation_id: UUID,
        details: Optional[dict] = None,
    ) -> None:
        if self._audit_logger:
            await self._audit_logger.log_report_built(
                report=report,
                user_id=user_id,
                correlation_id=correlation_id,
                details=details,
            )

    async def dashboard(
        self,
        user_id: str,
        reference: date,
        correlation_id: Optional[UUID] = None,
    ) -> DashboardSummary:
        """Overview page for the month containing reference."""
        correlation_id = correlation_id or create_correlation_id()
        period = month_of(reference)

        snapshot = await self.load_snapshot(
            user_id,
            window=period.date_range(),
            correlation_id=correlation_id,
        )
        summary = LedgerReporter(snapshot, self._settings).dashboard(reference)

        await self._report_built("dashboard", user_id, correlation_id)
        return summary

    async def transactions(
        self,
        user_id: str,
        month: int,
        year: int,
        correlation_id: Optional[UUID] = None,
    ) -> list[TransactionLine]:
        """Transactions page for one month."""
        correlation_id = correlation_id or create_correlation_id()
        period = month_interval(year, month)

        snapshot = await self.load_snapshot(
            user_id,
            window=period.date_range(),
            correlation_id=correlation_id,
        )
        lines = LedgerReporter(snapshot, self._settings).transactions(period)

        await self._report_built(
            "transactions",
            user_id,
            correlation_id,
            details={"row_count": len(lines)},
        )
        return lines

    async def analysis(
        self,
        user_id: str,
        reference: date,
        months: Optional[int] = None,
        correlation_id: Optional[UUID] = None,
    ) -> AnalysisReport:
        """Analysis page: trailing months ending at reference."""
        correlation_id = correlation_id or create_correlation_id()
        months = self._settings.default_series_months if months is None else months

        snapshot = await self.load_snapshot(
            user_id,
            window=window_of(trailing_months(reference, months)),
            correlation_id=correlation_id,
        )
        report = LedgerReporter(snapshot, self._settings).analysis(reference, months)

        await self._report_built(
            "analysis",
            user_id,
            correlation_id,
            details={"months": months},
        )
        return report

    async def budgets(
        self,
        user_id: str,
        month: int,
        year: int,
        correlation_id: Optional[UUID] = None,
    ) -> BudgetSummary:
        """Budgets page for one month."""
        correlation_id = correlation_id or create_correlation_id()

        snapshot = await self.load_snapshot(
            user_id,
            window=month_interval(year, month).date_range(),
            budget_month=(month, year),
            correlation_id=correlation_id,
        )
        summary = LedgerReporter(snapshot, self._settings).budgets(month, year)

        await self._report_built(
            "budgets",
            user_id,
            correlation_id,
            details={"over_budget": summary.over_budget_count},
        )
        return summary

    async def goals(
        self,
        user_id: str,
        correlation_id: Optional[UUID] = None,
    ) -> list[GoalProgress]:
        """Goals page."""
        correlation_id = correlation_id or create_correlation_id()

        snapshot = await self.load_snapshot(
            user_id,
            include_goals=True,
            correlation_id=correlation_id,
        )
        progress = LedgerReporter(snapshot, self._settings).goals()

        await self._report_built("goals", user_id, correlation_id)
        return progress

    async def export(
        self,
        user_id: str,
        start_date: str,
        end_date: str,
        today: date,
        correlation_id: Optional[UUID] = None,
    ) -> ExportDocument:
        """CSV of the transactions in [start_date, end_date], newest first."""
        correlation_id = correlation_id or create_correlation_id()

        snapshot = await self.load_snapshot(
            user_id,
            window=(start_date, end_date),
            correlation_id=correlation_id,
        )
        document = LedgerReporter(snapshot, self._settings).export(today)

        if self._audit_logger:
            await self._audit_logger.log_export_built(
                filename=document.filename,
                row_count=document.row_count,
                user_id=user_id,
                correlation_id=correlation_id,
            )
        return document

    # =========================================================================
    # WRITES
    # =========================================================================

    async def create(
        self,
        user_id: str,
        record: LedgerRecord,
        correlation_id: Optional[UUID] = None,
    ) -> LedgerRecord:
        """Insert a record owned by user_id."""
        kind = EntityKind.of(record)
        record = record.model_copy(update={"user_id": user_id})

        try:
            stored = await self._storage.insert(record)
        except StorageError as e:
            await self._write_failed(kind, "create", e, record.id, correlation_id)
            raise

        if self._audit_logger:
            await self._audit_logger.log_record_created(
                entity_type=kind.value,
                entity_id=stored.id,
                user_id=user_id,
                correlation_id=correlation_id,
            )
        return stored

    async def update(
        self,
        user_id: str,
        kind: EntityKind,
        record_id: str,
        changes: dict[str, Any],
        correlation_id: Optional[UUID] = None,
    ) -> LedgerRecord:
        """Apply a partial update to one record."""
        try:
            stored = await self._storage.update(user_id, kind, record_id, changes)
        except StorageError as e:
            await self._write_failed(kind, "update", e, record_id, correlation_id)
            raise

        if self._audit_logger:
            await self._audit_logger.log_record_updated(
                entity_type=kind.value,
                entity_id=record_id,
                fields=list(changes),
                user_id=user_id,
                correlation_id=correlation_id,
            )
        return stored

    async def delete(
        self,
        user_id: str,
        kind: EntityKind,
        record_id: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Delete one record."""
        try:
            await self._storage.delete(user_id, kind, record_id)
        except StorageError as e:
            await self._write_failed(kind, "delete", e, record_id, correlation_id)
            raise

        if self._audit_logger:
            await self._audit_logger.log_record_deleted(
                entity_type=kind.value,
                entity_id=record_id,
                user_id=user_id,
                correlation_id=correlation_id,
            )

    async def _write_failed(
        self,
        kind: EntityKind,
        operation: str,
        error: StorageError,
        record_id: Optional[str],
        correlation_id: Optional[UUID],
    ) -> None:
        if self._audit_logger:
            await self._audit_logger.log_write_failed(
                entity_type=kind.value,
                operation=operation,
                error_message=str(error),
                entity_id=record_id,
                correlation_id=correlation_id,
            )
