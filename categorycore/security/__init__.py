"""Audit trail for repository operations."""

from .audit import AuditLogger

__all__ = ["AuditLogger"]
