"""
In-Memory Storage Implementation

Keeps the ledger in process memory. Used by the test-suite and for
local runs without a hosted backend.

Ordering follows the hosted store the app was built against:
accounts and categories by name, transactions newest first,
budgets and goals in insertion order.
"""

from datetime import date
from typing import Any, Optional
from uuid import UUID

import structlog
from pydantic import ValidationError

from ledger.models.audit import AuditEvent
from ledger.models.ledger import (
    Account,
    Budget,
    Category,
    Goal,
    LedgerRecord,
    Transaction,
)
from ledger.services.storage.interface import (
    AuditStorageInterface,
    DuplicateError,
    EntityKind,
    LedgerStorageInterface,
    NotFoundError,
    StorageError,
)


logger = structlog.get_logger(__name__)

# Fields a partial update may never touch
_IMMUTABLE_FIELDS = frozenset({"id", "user_id"})


def _parse_bound(value: Optional[str], name: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise StorageError(f"Invalid {name}: {value!r} (expected YYYY-MM-DD)") from e


class InMemoryLedgerStorage(LedgerStorageInterface):
    """Ledger storage backed by one dict per entity kind."""

    def __init__(self, records: Optional[list[LedgerRecord]] = None):
        self._tables: dict[EntityKind, dict[str, LedgerRecord]] = {
            kind: {} for kind in EntityKind
        }
        for record in records or []:
            self._tables[EntityKind.of(record)][record.id] = record

    def _owned(self, kind: EntityKind, user_id: str) -> list:
        return [r for r in self._tables[kind].values() if r.user_id == user_id]

    async def list_accounts(self, user_id: str) -> list[Account]:
        return sorted(self._owned(EntityKind.ACCOUNT, user_id), key=lambda a: a.name)

    async def list_categories(self, user_id: str) -> list[Category]:
        return sorted(self._owned(EntityKind.CATEGORY, user_id), key=lambda c: c.name)

    async def list_transactions(
        self,
        user_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> list[Transaction]:
        start = _parse_bound(start_date, "start_date")
        end = _parse_bound(end_date, "end_date")

        transactions = [
            t for t in self._owned(EntityKind.TRANSACTION, user_id)
            if (start is None or t.date >= start) and (end is None or t.date <= end)
        ]
        return sorted(transactions, key=lambda t: t.date, reverse=True)

    async def list_budgets(self, user_id: str, month: int, year: int) -> list[Budget]:
        return [
            b for b in self._owned(EntityKind.BUDGET, user_id)
            if b.month == month and b.year == year
        ]

    async def list_goals(self, user_id: str) -> list[Goal]:
        return self._owned(EntityKind.GOAL, user_id)

    async def insert(self, record: LedgerRecord) -> LedgerRecord:
        kind = EntityKind.of(record)
        table = self._tables[kind]
        if record.id in table:
            raise DuplicateError(f"{kind.value} {record.id} already exists")

        table[record.id] = record
        logger.debug("record_inserted", kind=kind.value, record_id=record.id)
        return record

    def _get_owned(self, user_id: str, kind: EntityKind, record_id: str) -> LedgerRecord:
        """A record of user_id; other users' records are reported as missing."""
        record = self._tables[kind].get(record_id)
        if record is None or record.user_id != user_id:
            raise NotFoundError(f"{kind.value} {record_id} not found")
        return record

    async def update(
        self,
        user_id: str,
        kind: EntityKind,
        record_id: str,
        changes: dict[str, Any],
    ) -> LedgerRecord:
        current = self._get_owned(user_id, kind, record_id)

        forbidden = _IMMUTABLE_FIELDS.intersection(changes)
        if forbidden:
            raise StorageError(f"Cannot change {', '.join(sorted(forbidden))} of a {kind.value}")

        # Re-validate so a bad update fails here rather than at read time
        merged = {**current.model_dump(), **changes}
        try:
            updated = kind.model.model_validate(merged)
        except ValidationError as e:
            raise StorageError(f"Invalid {kind.value} update: {e.error_count()} errors") from e

        self._tables[kind][record_id] = updated
        logger.debug("record_updated", kind=kind.value, record_id=record_id)
        return updated

    async def delete(self, user_id: str, kind: EntityKind, record_id: str) -> None:
        self._get_owned(user_id, kind, record_id)

        del self._tables[kind][record_id]
        logger.debug("record_deleted", kind=kind.value, record_id=record_id)


class InMemoryAuditStorage(AuditStorageInterface):
    """Append-only audit log held in a list."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    async def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    async def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.correlation_id == correlation_id]

    async def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]
