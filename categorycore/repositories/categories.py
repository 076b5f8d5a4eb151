"""Repository for category data operations."""

from typing import Optional

from ..clients.base import CategoriesClient
from ..config import Config
from ..errors.handlers import (
    CategoryNotFoundFailure,
    CreateCategoryFailure,
    DeleteCategoryFailure,
    ErrorHandler,
    GetCategoriesFailure,
    GetCategoryFailure,
    UpdateCategoryFailure,
)
from ..models.category import Category
from ..models.responses import PaginatedResponse
from ..security.audit import AuditLogger
from .base import BaseRepository


class CategoriesRepository(BaseRepository):
    """Manages category data by delegating to a ``CategoriesClient``.

    Sits between business logic and the client. Each method makes exactly one
    client call and translates client errors into category failures.
    ``CategoryNotFoundFailure`` raised by the client is never wrapped, so
    callers can always match on it directly.
    """

    resource_type = "category"

    def __init__(
        self,
        client: CategoriesClient,
        error_handler: Optional[ErrorHandler] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(client, error_handler=error_handler, audit_logger=audit_logger)

    @classmethod
    def from_config(cls, client: CategoriesClient, config: Config) -> "CategoriesRepository":
        """Build a repository whose audit and error handling follow ``config``."""
        audit_logger = AuditLogger(enabled=config.audit.enabled)
        error_handler = ErrorHandler(
            audit_logger=audit_logger,
            max_history_size=config.errors.max_history_size,
        )
        return cls(client, error_handler=error_handler, audit_logger=audit_logger)

    async def get_categories(
        self,
        limit: Optional[int] = None,
        start_after_id: Optional[str] = None,
    ) -> PaginatedResponse[Category]:
        """Fetch one page of categories.

        Args:
            limit: Maximum number of categories per page
            start_after_id: Cursor from a previous page

        Returns:
            Page of categories. ``has_more`` is True only when a limit was
            given and the client returned exactly that many items.

        Raises:
            GetCategoriesFailure: If the client call fails
        """
        with self._operation_context("get_categories", GetCategoriesFailure):
            categories = await self.client.get_categories(
                limit=limit,
                start_after_id=start_after_id,
            )
            page = PaginatedResponse.from_page(categories, limit)

        self._log_data_access("list")
        return page

    async def get_category(self, id: str) -> Category:
        """Fetch a single category by id.

        Raises:
            CategoryNotFoundFailure: If no category has this id
            GetCategoryFailure: For any other client error
        """
        with self._operation_context(
            "get_category",
            GetCategoryFailure,
            resource_id=id,
            passthrough=(CategoryNotFoundFailure,),
        ):
            category = await self.client.get_category(id)

        self._log_data_access("read", id)
        return category

    async def create_category(
        self,
        name: str,
        description: Optional[str] = None,
        icon_url: Optional[str] = None,
    ) -> Category:
        """Create a category.

        Args:
            name: Display name
            description: Optional description
            icon_url: Optional icon reference

        Returns:
            The created category, including its assigned id

        Raises:
            CreateCategoryFailure: If the client call fails
        """
        with self._operation_context("create_category", CreateCategoryFailure):
            category = await self.client.create_category(
                name=name,
                description=description,
                icon_url=icon_url,
            )

        self._log_data_access("create", getattr(category, "id", None))
        return category

    async def update_category(self, category: Category) -> Category:
        """Update the category identified by ``category.id``.

        The other fields of ``category`` carry the new values.

        Raises:
            CategoryNotFoundFailure: If no category has this id
            UpdateCategoryFailure: For any other client error
        """
        with self._operation_context(
            "update_category",
            UpdateCategoryFailure,
            resource_id=getattr(category, "id", None),
            passthrough=(CategoryNotFoundFailure,),
        ):
            updated = await self.client.update_category(category)

        self._log_data_access("update", getattr(category, "id", None))
        return updated

    async def delete_category(self, id: str) -> None:
        """Delete a category by id.

        Raises:
            CategoryNotFoundFailure: If no category has this id
            DeleteCategoryFailure: For any other client error
        """
        with self._operation_context(
            "delete_category",
            DeleteCategoryFailure,
            resource_id=id,
            passthrough=(CategoryNotFoundFailure,),
        ):
            await self.client.delete_category(id)

        self._log_data_access("delete", id)
