"""Audit logging for category data access and failures."""

import hashlib
from datetime import datetime, timezone
from typing import Any, Dict, Optional, List

import structlog


SENSITIVE_KEYS = [
    "password",
    "api_key",
    "token",
    "secret",
    "credential",
    "private_key",
]


def sanitize_value(key: str, value: Any) -> Any:
    """Mask a value whose key looks sensitive, recursing into containers."""
    key_lower = key.lower()

    if any(term in key_lower for term in SENSITIVE_KEYS):
        if isinstance(value, str) and len(value) > 8:
            # Show partial value for debugging
            return f"{value[:4]}...{value[-4:]}"
        return "***REDACTED***"

    if isinstance(value, dict):
        return {k: sanitize_value(k, v) for k, v in value.items()}
    elif isinstance(value, list):
        return [sanitize_value(f"item_{i}", v) for i, v in enumerate(value)]

    return value


class AuditLogger:
    """Writes data access and error events to the ``audit`` structlog logger."""

    def __init__(self, enabled: bool = True, logger=None):
        """Initialize audit logger.

        Args:
            enabled: When False every call is a no-op
            logger: structlog logger to write to, defaults to ``audit``
        """
        self.enabled = enabled
        self.logger = logger or structlog.get_logger("audit")

    def _emit(self, level: str, event: str, log_data: Dict[str, Any]) -> None:
        if not self.enabled:
            return
        log_data["audit_timestamp"] = datetime.now(timezone.utc).isoformat()
        log_data = {key: sanitize_value(key, value) for key, value in log_data.items()}
        getattr(self.logger, level)(event, **log_data)

    def log_data_access(
        self,
        operation: str,
        resource_type: str,
        resource_id: Optional[str] = None,
        fields_accessed: Optional[List[str]] = None,
    ) -> None:
        """Log data access for compliance.

        Args:
            operation: Type of operation (list, read, create, update, delete)
            resource_type: Type of resource accessed
            resource_id: ID of resource, if the operation targets one
            fields_accessed: Specific fields that were accessed
        """
        log_data: Dict[str, Any] = {
            "event_type": "data_access",
            "operation": operation,
            "resource_type": resource_type,
            "resource_id": resource_id,
        }

        if fields_accessed:
            log_data["fields_accessed"] = fields_accessed

        # Access hash for integrity
        access_string = f"{operation}:{resource_type}:{resource_id or ''}"
        log_data["access_hash"] = hashlib.sha256(access_string.encode()).hexdigest()[:16]

        self._emit("info", "data_access", log_data)

    def log_error(
        self,
        error_type: str,
        error_message: str,
        stack_trace: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log application errors for debugging.

        Args:
            error_type: Type/class of error
            error_message: Error message
            stack_trace: Optional stack trace
            context: Additional error context
        """
        log_data: Dict[str, Any] = {
            "event_type": "error",
            "error_type": error_type,
            "error_message": error_message,
        }

        if stack_trace:
            log_data["stack_trace"] = stack_trace
        if context:
            log_data["error_context"] = context

        self._emit("error", "application_error", log_data)
