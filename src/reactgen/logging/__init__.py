"""Audit logging package."""

from .audit import (
    AUDIT_FILENAME,
    AuditEvent,
    JsonlAuditLogger,
    sanitize_arguments,
    utc_timestamp,
)

__all__ = [
    "AUDIT_FILENAME",
    "AuditEvent",
    "JsonlAuditLogger",
    "sanitize_arguments",
    "utc_timestamp",
]
