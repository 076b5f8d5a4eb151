"""Category failures and the handler that records them with their context."""

import sys
import traceback
from typing import Any, Dict, Optional, List
from datetime import datetime, timezone
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import Enum
import logging


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Which repository operation an error belongs to."""
    LIST = "list"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


@dataclass
class ErrorContext:
    """Context information for an error."""
    operation: str
    resource_type: Optional[str] = None
    resource_id: Optional[str] = None
    request_data: Optional[Dict[str, Any]] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    correlation_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary."""
        return {
            "operation": self.operation,
            "resource_type": self.resource_type,
            "resource_id": self.resource_id,
            "request_data": self.request_data,
            "metadata": self.metadata,
            "timestamp": self.timestamp.isoformat(),
            "correlation_id": self.correlation_id,
        }


def _format_stack_trace(cause: Optional[BaseException]) -> str:
    if cause is not None and cause.__traceback__ is not None:
        return "".join(
            traceback.format_exception(type(cause), cause, cause.__traceback__)
        )
    if sys.exc_info()[1] is not None:
        return traceback.format_exc()
    return "".join(traceback.format_stack()[:-2])


class CategoryException(Exception):
    """Base exception for all category failures."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.cause = cause
        self.severity = severity
        self.category = category
        self.retryable = retryable
        self.timestamp = datetime.now(timezone.utc)

        # Trace of the cause if it was raised, else the one being handled, else where it was built
        self.stack_trace = _format_stack_trace(cause)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_message": self.message,
            "context": self.context.to_dict() if self.context else None,
            "cause": repr(self.cause) if self.cause else None,
            "severity": self.severity.value,
            "category": self.category.value,
            "retryable": self.retryable,
            "timestamp": self.timestamp.isoformat(),
            "stack_trace": self.stack_trace,
        }


class CategoryOperationFailure(CategoryException):
    """A provider call failed and was wrapped by the repository.

    Subclasses set ``description`` and ``error_category``; the message is
    built from the description and the cause.
    """

    description = "Category operation failed"
    error_category = ErrorCategory.UNKNOWN

    def __init__(self, cause: Exception, context: Optional[ErrorContext] = None):
        super().__init__(
            f"{self.description}: {cause}",
            context=context,
            cause=cause,
            severity=ErrorSeverity.HIGH,
            category=self.error_category,
        )


class GetCategoriesFailure(CategoryOperationFailure):
    """Listing categories failed."""

    description = "Failed to get categories"
    error_category = ErrorCategory.LIST


class GetCategoryFailure(CategoryOperationFailure):
    """Fetching a single category failed for a reason other than not found."""

    description = "Failed to get category"
    error_category = ErrorCategory.READ


class CreateCategoryFailure(CategoryOperationFailure):
    """Creating a category failed."""

    description = "Failed to create category"
    error_category = ErrorCategory.CREATE


class UpdateCategoryFailure(CategoryOperationFailure):
    """Updating a category failed for a reason other than not found."""

    description = "Failed to update category"
    error_category = ErrorCategory.UPDATE


class DeleteCategoryFailure(CategoryOperationFailure):
    """Deleting a category failed for a reason other than not found."""

    description = "Failed to delete category"
    error_category = ErrorCategory.DELETE


class CategoryNotFoundFailure(CategoryException):
    """No category exists with the given id.

    Raised by providers. Repositories let it through untouched so callers can
    tell a missing category apart from any other failure.
    """

    def __init__(
        self,
        category_id: str,
        cause: Optional[Exception] = None,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(
            f"Category not found: {category_id}",
            context=context,
            cause=cause,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.NOT_FOUND,
        )
        self.category_id = category_id


_current_context: ContextVar[Optional[ErrorContext]] = ContextVar(
    "categorycore_error_context", default=None
)


class ErrorHandler:
    """Centralized error handler with context preservation."""

    def __init__(self, audit_logger=None, max_history_size: int = 1000):
        """Initialize error handler.

        Args:
            audit_logger: Optional audit logger instance
            max_history_size: Number of recent errors kept for statistics
        """
        self.audit_logger = audit_logger
        self.logger = logging.getLogger(__name__)

        # Error statistics
        self._error_counts: Dict[str, int] = {}
        self._error_history: List[CategoryException] = []
        self._max_history_size = max_history_size

    @contextmanager
    def error_context(self, **kwargs):
        """Context manager for error context.

        Usage:
            with error_handler.error_context(operation="get_category", resource_id="123"):
                # Operations that might raise errors
                pass
        """
        context = ErrorContext(**kwargs)
        token = _current_context.set(context)
        try:
            yield context
        finally:
            _current_context.reset(token)

    def get_current_context(self) -> Optional[ErrorContext]:
        """Get current error context."""
        return _current_context.get()

    def handle_error(
        self,
        error: Exception,
        reraise: bool = True,
    ) -> CategoryException:
        """Record an error and optionally re-raise it.

        Category exceptions are recorded as they are. Anything else is wrapped
        in a ``CategoryException`` carrying the current context.

        Args:
            error: The error to handle
            reraise: Whether to raise the (possibly wrapped) error

        Returns:
            The recorded error
        """
        if isinstance(error, CategoryException):
            recorded = error
        else:
            recorded = CategoryException(
                str(error),
                context=self.get_current_context(),
                cause=error,
            )

        self._log_error(recorded)
        self._update_error_stats(recorded)

        if reraise:
            if recorded is error:
                raise recorded
            raise recorded from error

        return recorded

    def _log_error(self, error: CategoryException) -> None:
        """Log error with appropriate severity."""
        error_dict = error.to_dict()

        if self.audit_logger is not None:
            self.audit_logger.log_error(
                error_type=error.__class__.__name__,
                error_message=error.message,
                stack_trace=error.stack_trace,
                context=error_dict,
            )

        if error.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(f"Critical error: {error.message}", extra=error_dict)
        elif error.severity == ErrorSeverity.HIGH:
            self.logger.error(f"Error: {error.message}", extra=error_dict)
        elif error.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(f"Warning: {error.message}", extra=error_dict)
        else:
            self.logger.info(f"Info: {error.message}", extra=error_dict)

    def _update_error_stats(self, error: CategoryException) -> None:
        """Update error statistics."""
        error_type = error.__class__.__name__
        self._error_counts[error_type] = self._error_counts.get(error_type, 0) + 1

        self._error_history.append(error)
        if len(self._error_history) > self._max_history_size:
            self._error_history = self._error_history[-self._max_history_size:]

    def get_error_stats(self) -> Dict[str, Any]:
        """Get error statistics."""
        severity_dist = {severity.value: 0 for severity in ErrorSeverity}
        category_dist: Dict[str, int] = {}
        for error in self._error_history:
            severity_dist[error.severity.value] += 1
            key = error.category.value
            category_dist[key] = category_dist.get(key, 0) + 1

        return {
            "total_errors": sum(self._error_counts.values()),
            "error_counts": self._error_counts.copy(),
            "severity_distribution": severity_dist,
            "category_distribution": category_dist,
        }

    def create_user_friendly_message(self, error: CategoryException) -> str:
        """Create user-friendly error message."""
        if isinstance(error, CategoryNotFoundFailure):
            return f"Category '{error.category_id}' was not found. It may have been deleted."
        elif isinstance(error, GetCategoriesFailure):
            return "Categories could not be loaded. Please try again later."
        elif isinstance(error, GetCategoryFailure):
            return "The category could not be loaded. Please try again later."
        elif isinstance(error, CreateCategoryFailure):
            return "The category could not be created. Please try again later."
        elif isinstance(error, UpdateCategoryFailure):
            return "The category could not be updated. Please try again later."
        elif isinstance(error, DeleteCategoryFailure):
            return "The category could not be deleted. Please try again later."

        return f"An error occurred: {error.message}"
