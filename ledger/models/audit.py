"""
Audit Models for Personal Ledger

Every write to the ledger and every report handed to the UI is logged.
This provides:
1. Traceability of what the user changed and when
2. Debugging information when a page shows something unexpected
3. A way to reconstruct which snapshot a report was built from

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

import json
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Ledger writes
    RECORD_CREATED = "record_created"
    RECORD_UPDATED = "record_updated"
    RECORD_DELETED = "record_deleted"
    WRITE_FAILED = "write_failed"

    # Reads and reports
    SNAPSHOT_LOADED = "snapshot_loaded"
    REPORT_BUILT = "report_built"
    EXPORT_BUILT = "export_built"

    # System events
    SYSTEM_ERROR = "system_error"
    STORAGE_ERROR = "storage_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'budget', 'report')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )
    user_id: Optional[str] = Field(
        default=None,
        description="Owner of the ledger the event touched"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., the loads behind one page)"
    )

    # Event details
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "user_id": self.user_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }

    def to_row(self) -> list[str]:
        """
        Flatten to a row of strings for tabular audit sinks.

        Returns columns in order:
        [event_id, timestamp, event_type, severity, entity_type, entity_id,
         user_id, correlation_id, description, details_json, error_message,
         is_user_action]
        """
        return [
            str(self.event_id),
            self.timestamp.isoformat(),
            self.event_type.value,
            self.severity.value,
            self.entity_type or "",
            self.entity_id or "",
            self.user_id or "",
            str(self.correlation_id) if self.correlation_id else "",
            self.description,
            json.dumps(self.details, default=str) if self.details else "",
            self.error_message or "",
            str(self.is_user_action),
        ]


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.record_created("budget", budget.id, user_id)
        event = AuditEventBuilder.report_built("dashboard", user_id, correlation_id)
    """

    @staticmethod
    def record_created(
        entity_type: str,
        entity_id: str,
        user_id: Optional[str],
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_CREATED,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            correlation_id=correlation_id,
            description=f"{entity_type.capitalize()} created",
            is_user_action=True,
        )

    @staticmethod
    def record_updated(
        entity_type: str,
        entity_id: str,
        fields: list[str],
        user_id: Optional[str],
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_UPDATED,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            correlation_id=correlation_id,
            description=f"{entity_type.capitalize()} updated",
            details={
                "fields": sorted(fields),
            },
            is_user_action=True,
        )

    @staticmethod
    def record_deleted(
        entity_type: str,
        entity_id: str,
        user_id: Optional[str],
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_DELETED,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            correlation_id=correlation_id,
            description=f"{entity_type.capitalize()} deleted",
            is_user_action=True,
        )

    @staticmethod
    def write_failed(
        entity_type: str,
        operation: str,
        error_message: str,
        entity_id: Optional[str] = None,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.WRITE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type=entity_type,
            entity_id=entity_id,
            correlation_id=correlation_id,
            description=f"Could not {operation} {entity_type}",
            error_message=error_message,
            details={
                "operation": operation,
            },
        )

    @staticmethod
    def snapshot_loaded(
        user_id: str,
        counts: dict[str, int],
        window: Optional[tuple[str, str]],
        correlation_id: UUID
    ) -> AuditEvent:
        details: dict[str, Any] = {"counts": counts}
        if window:
            details["start_date"], details["end_date"] = window
        return AuditEvent(
            event_type=AuditEventType.SNAPSHOT_LOADED,
            severity=AuditSeverity.DEBUG,
            entity_type="snapshot",
            user_id=user_id,
            correlation_id=correlation_id,
            description=f"Snapshot loaded with {counts.get('transactions', 0)} transactions",
            details=details,
        )

    @staticmethod
    def report_built(
        report: str,
        user_id: str,
        correlation_id: UUID,
        details: Optional[dict] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPORT_BUILT,
            entity_type="report",
            entity_id=report,
            user_id=user_id,
            correlation_id=correlation_id,
            description=f"Report built: {report}",
            details=details or {},
        )

    @staticmethod
    def export_built(
        filename: str,
        row_count: int,
        user_id: str,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPORT_BUILT,
            entity_type="export",
            entity_id=filename,
            user_id=user_id,
            correlation_id=correlation_id,
            description=f"Export built: {filename} with {row_count} rows",
            details={
                "row_count": row_count,
            },
            is_user_action=True,
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"System error: {error_type}",
            error_message=error_message,
            details=details or {},
            correlation_id=correlation_id,
        )

    @staticmethod
    def storage_error(
        operation: str,
        error_message: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"Storage error during {operation}",
            error_message=error_message,
            details={
                "operation": operation,
            },
            correlation_id=correlation_id,
        )
