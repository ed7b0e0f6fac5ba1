"""
Data Models Package

This package contains all Pydantic models used in Account Analytics.
"""

from account_analytics.models.account import (
    Account,
    AccountQuery,
    BalanceTotal,
    QueryResult,
    QueryType,
    RichestAccount,
    Sex,
)
from account_analytics.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Account models
    "Account",
    "AccountQuery",
    "BalanceTotal",
    "QueryResult",
    "QueryType",
    "RichestAccount",
    "Sex",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
