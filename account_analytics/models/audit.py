"""
Audit Models for Account Analytics

Every query run through the executor is recorded as an audit event.
This gives a trace of what was asked, how ties were resolved and
what failed.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    QUERY_RECEIVED = "query_received"
    QUERY_EXECUTED = "query_executed"
    QUERY_FAILED = "query_failed"
    TIE_BREAK_APPLIED = "tie_break_applied"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # The query this event is about
    query_id: Optional[UUID] = Field(
        default=None,
        description="ID of the query this event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "query_id": str(self.query_id) if self.query_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.query_received(query_id, "find_richest")
        event = AuditEventBuilder.query_failed(query_id, "find_richest", str(e))
    """

    @staticmethod
    def query_received(
        query_id: UUID,
        query_type: str,
        account_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.QUERY_RECEIVED,
            severity=AuditSeverity.DEBUG,
            query_id=query_id,
            description=f"Query received: {query_type} over {account_count} accounts",
            details={
                "query_type": query_type,
                "account_count": account_count,
            },
        )

    @staticmethod
    def query_executed(
        query_id: UUID,
        query_type: str,
        result_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.QUERY_EXECUTED,
            query_id=query_id,
            description=f"Query executed: {query_type} returned {result_count} results",
            details={
                "query_type": query_type,
                "result_count": result_count,
            },
        )

    @staticmethod
    def query_failed(
        query_id: UUID,
        query_type: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.QUERY_FAILED,
            severity=AuditSeverity.ERROR,
            query_id=query_id,
            description=f"Query failed: {query_type}",
            error_message=error_message,
            details={
                "query_type": query_type,
            },
        )

    @staticmethod
    def tie_break_applied(
        query_id: UUID,
        policy: str,
        left_id: int,
        right_id: int,
        winner_id: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TIE_BREAK_APPLIED,
            severity=AuditSeverity.DEBUG,
            query_id=query_id,
            description=f"Balance tie between {left_id} and {right_id} resolved by {policy}",
            details={
                "policy": policy,
                "left_id": left_id,
                "right_id": right_id,
                "winner_id": winner_id,
            },
        )
