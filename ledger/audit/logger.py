"""
Audit Logger

DESIGN DECISION: Every write to the ledger and every report served is logged.
This provides:
1. Complete traceability
2. Debugging capability
3. User can see history of their changes

The audit logger:
- Is async to match the storage interface
- Gracefully handles failures (doesn't crash the app if logging fails)
- Supports correlation IDs to trace the loads behind one page
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from ledger.config import get_settings
from ledger.models.audit import AuditEvent, AuditEventBuilder
from ledger.services.storage import AuditStorageInterface


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Send the JSON log lines to stderr at the given level.

    Call once at application startup. log_level defaults to the
    LOG_LEVEL application setting.
    """
    level = log_level or get_settings().app.log_level
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An audit store (for persistence and user visibility), if configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("ledger.audit")

    async def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity.value in ("error", "critical"):
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage:
            try:
                return await self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    async def log_record_created(
        self,
        entity_type: str,
        entity_id: str,
        user_id: Optional[str],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log creation of a ledger record."""
        event = AuditEventBuilder.record_created(
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_record_updated(
        self,
        entity_type: str,
        entity_id: str,
        fields: list[str],
        user_id: Optional[str],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a partial update of a ledger record."""
        event = AuditEventBuilder.record_updated(
            entity_type=entity_type,
            entity_id=entity_id,
            fields=fields,
            user_id=user_id,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_record_deleted(
        self,
        entity_type: str,
        entity_id: str,
        user_id: Optional[str],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log deletion of a ledger record."""
        event = AuditEventBuilder.record_deleted(
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_write_failed(
        self,
        entity_type: str,
        operation: str,
        error_message: str,
        entity_id: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a rejected write."""
        event = AuditEventBuilder.write_failed(
            entity_type=entity_type,
            operation=operation,
            error_message=error_message,
            entity_id=entity_id,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_snapshot_loaded(
        self,
        user_id: str,
        counts: dict[str, int],
        window: Optional[tuple[str, str]],
        correlation_id: UUID,
    ) -> None:
        """Log the records fetched for a page."""
        event = AuditEventBuilder.snapshot_loaded(
            user_id=user_id,
            counts=counts,
            window=window,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_report_built(
        self,
        report: str,
        user_id: str,
        correlation_id: UUID,
        details: Optional[dict] = None,
    ) -> None:
        """Log a report handed to the UI."""
        event = AuditEventBuilder.report_built(
            report=report,
            user_id=user_id,
            correlation_id=correlation_id,
            details=details,
        )
        await self.log(event)

    async def log_export_built(
        self,
        filename: str,
        row_count: int,
        user_id: str,
        correlation_id: UUID,
    ) -> None:
        """Log an export handed to the download sink."""
        event = AuditEventBuilder.export_built(
            filename=filename,
            row_count=row_count,
            user_id=user_id,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an error."""
        event = AuditEventBuilder.system_error(
            error_type=error_type,
            error_message=error_message,
            details=details,
            correlation_id=correlation_id,
        )
        await self.log(event)

    async def log_storage_error(
        self,
        operation: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a failed read from the ledger store."""
        event = AuditEventBuilder.storage_error(
            operation=operation,
            error_message=error_message,
            correlation_id=correlation_id,
        )
        await self.log(event)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a page load or a user edit.
    Pass it through all subsequent operations.
    """
    return uuid4()
