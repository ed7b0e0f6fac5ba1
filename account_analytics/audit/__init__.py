"""Audit logging package."""

from account_analytics.audit.logger import AuditLogger

__all__ = ["AuditLogger"]
