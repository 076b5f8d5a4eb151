"""Base repository for data access patterns."""

from abc import ABC
from typing import Optional, Tuple, Type
from contextlib import contextmanager
import logging

from ..errors.handlers import CategoryOperationFailure, ErrorHandler
from ..logging_config import Timer, log_context, log_event, log_performance
from ..security.audit import AuditLogger


class BaseRepository(ABC):
    """Abstract base repository over an injected client.

    Subclasses run each client call inside ``_operation_context``, which turns
    client exceptions into the operation's failure type.
    """

    resource_type: Optional[str] = None

    def __init__(
        self,
        client,
        error_handler: Optional[ErrorHandler] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """Initialize repository.

        Args:
            client: Client that performs the actual storage calls
            error_handler: Optional error handler
            audit_logger: Optional audit logger
        """
        self.client = client
        self.audit_logger = audit_logger or AuditLogger()
        self.error_handler = error_handler or ErrorHandler(audit_logger=self.audit_logger)
        self.logger = logging.getLogger(self.__class__.__name__)

    @contextmanager
    def _operation_context(
        self,
        operation: str,
        failure_type: Type[CategoryOperationFailure],
        resource_id: Optional[str] = None,
        passthrough: Tuple[Type[Exception], ...] = (),
    ):
        """Context manager for one repository operation.

        Exceptions of a ``passthrough`` type are recorded and re-raised as they
        are. Any other ``Exception`` is wrapped once in ``failure_type`` with
        the original as its cause.

        Args:
            operation: Operation name
            failure_type: Failure raised for unexpected client errors
            resource_id: Optional resource ID
            passthrough: Exception types propagated unchanged
        """
        resource_type = self._get_resource_type()
        with self.error_handler.error_context(
            operation=f"repository.{operation}",
            resource_type=resource_type,
            resource_id=resource_id,
        ) as context, log_context(operation=operation, resource_type=resource_type):
            log_event(__name__, f"{operation} started", resource_id=resource_id)
            with Timer() as timer:
                try:
                    yield context
                except passthrough as error:
                    self.error_handler.handle_error(error, reraise=False)
                    raise
                except Exception as error:
                    failure = failure_type(error, context=context)
                    self.error_handler.handle_error(failure, reraise=False)
                    raise failure from error
            log_performance(__name__, operation, timer.duration_ms, resource_id=resource_id)

    def _get_resource_type(self) -> str:
        """Get resource type for this repository."""
        if self.resource_type:
            return self.resource_type
        return self.__class__.__name__.replace("Repository", "").lower()

    def _log_data_access(self, operation: str, resource_id: Optional[str] = None) -> None:
        """Log data access for compliance.

        Args:
            operation: Operation type
            resource_id: Resource ID, if the operation targets one
        """
        self.audit_logger.log_data_access(
            operation=operation,
            resource_type=self._get_resource_type(),
            resource_id=resource_id,
        )
