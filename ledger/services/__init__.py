"""Services package."""

from ledger.services.storage import (
    AuditStorageInterface,
    DuplicateError,
    EntityKind,
    InMemoryAuditStorage,
    InMemoryLedgerStorage,
    LedgerStorageInterface,
    NotFoundError,
    StorageError,
)

__all__ = [
    "AuditStorageInterface",
    "DuplicateError",
    "EntityKind",
    "InMemoryAuditStorage",
    "InMemoryLedgerStorage",
    "LedgerStorageInterface",
    "NotFoundError",
    "StorageError",
]
