"""
Storage Services Package

Provides the abstract interface the ledger store must satisfy and an
in-memory implementation used for tests and local runs.
"""

from ledger.services.storage.interface import (
    AuditStorageInterface,
    DuplicateError,
    EntityKind,
    LedgerStorageInterface,
    NotFoundError,
    StorageError,
)
from ledger.services.storage.memory import (
    InMemoryAuditStorage,
    InMemoryLedgerStorage,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "EntityKind",
    "LedgerStorageInterface",
    # Exceptions
    "DuplicateError",
    "NotFoundError",
    "StorageError",
    # In-memory implementation
    "InMemoryAuditStorage",
    "InMemoryLedgerStorage",
]
