"""
Abstract Storage Interface

DESIGN DECISION: The ledger lives in a remote store we do not control.
We define an abstract interface for the operations the app needs so that:
1. Report code never depends on a particular backend
2. In-memory storage can stand in for testing
3. The engine only ever sees records that were already fetched

The interface is intentionally simple - we're not building a full ORM.
Filtering by owner and by an inclusive date window is all the pages need.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional
from uuid import UUID

from ledger.models.audit import AuditEvent
from ledger.models.ledger import (
    Account,
    Budget,
    Category,
    Goal,
    LedgerRecord,
    Transaction,
)


class EntityKind(str, Enum):
    """The five record kinds the store holds."""
    ACCOUNT = "account"
    CATEGORY = "category"
    TRANSACTION = "transaction"
    BUDGET = "budget"
    GOAL = "goal"

    @property
    def model(self) -> type[LedgerRecord]:
        return ENTITY_MODELS[self]

    @classmethod
    def of(cls, record: LedgerRecord) -> "EntityKind":
        """Kind of a record instance."""
        for kind, model in ENTITY_MODELS.items():
            if isinstance(record, model):
                return kind
        raise TypeError(f"Not a ledger record: {type(record).__name__}")


ENTITY_MODELS: dict[EntityKind, type[LedgerRecord]] = {
    EntityKind.ACCOUNT: Account,
    EntityKind.CATEGORY: Category,
    EntityKind.TRANSACTION: Transaction,
    EntityKind.BUDGET: Budget,
    EntityKind.GOAL: Goal,
}


class LedgerStorageInterface(ABC):
    """
    Abstract interface for ledger storage operations.

    Any backend (hosted database, local file, memory) must implement
    these methods. Reads return records owned by user_id only.
    """

    @abstractmethod
    async def list_accounts(self, user_id: str) -> list[Account]:
        """List the user's accounts, ordered by name."""
        pass

    @abstractmethod
    async def list_categories(self, user_id: str) -> list[Category]:
        """List the user's categories, ordered by name."""
        pass

    @abstractmethod
    async def list_transactions(
        self,
        user_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> list[Transaction]:
        """
        List the user's transactions within a date window.

        Args:
            user_id: Owner of the ledger
            start_date: Inclusive lower bound, YYYY-MM-DD
            end_date: Inclusive upper bound, YYYY-MM-DD

        Returns:
            Matching transactions, newest first
        """
        pass

    @abstractmethod
    async def list_budgets(
        self,
        user_id: str,
        month: int,
        year: int,
    ) -> list[Budget]:
        """List the user's budgets for one month, in creation order."""
        pass

    @abstractmethod
    async def list_goals(self, user_id: str) -> list[Goal]:
        """List the user's goals, in creation order."""
        pass

    @abstractmethod
    async def insert(self, record: LedgerRecord) -> LedgerRecord:
        """
        Persist a new record.

        Returns:
            The record as stored

        Raises:
            DuplicateError: If a record with the same id exists
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def update(
        self,
        user_id: str,
        kind: EntityKind,
        record_id: str,
        changes: dict[str, Any],
    ) -> LedgerRecord:
        """
        Apply a partial update to a record owned by user_id.

        Returns:
            The record as stored after the update

        Raises:
            NotFoundError: If the record doesn't exist or belongs to
                           another user
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str, kind: EntityKind, record_id: str) -> None:
        """
        Delete a record owned by user_id.

        Raises:
            NotFoundError: If the record doesn't exist or belongs to
                           another user
        """
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    async def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    async def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        """Get all events for a correlation ID, in chronological order."""
        pass

    @abstractmethod
    async def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """Get the most recent audit events (newest first)."""
        pass


class StorageError(Exception):
    """Base exception for storage operations. The message is the reason."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""
    pass


class DuplicateError(StorageError):
    """Attempted to insert a duplicate entity."""
    pass
