"""Abstract client for category storage."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.category import Category


class CategoriesClient(ABC):
    """Contract for anything that stores and serves categories.

    Implementations signal a missing category by raising
    ``CategoryNotFoundFailure``. Any other exception is treated as a general
    failure of the call.
    """

    @abstractmethod
    async def get_categories(
        self,
        limit: Optional[int] = None,
        start_after_id: Optional[str] = None,
    ) -> List[Category]:
        """Fetch categories in a stable order.

        Args:
            limit: Maximum number of categories to return
            start_after_id: Return only categories after this id

        Returns:
            Categories for the requested window
        """
        pass

    @abstractmethod
    async def get_category(self, id: str) -> Category:
        """Fetch one category.

        Raises:
            CategoryNotFoundFailure: If no category has this id
        """
        pass

    @abstractmethod
    async def create_category(
        self,
        name: str,
        description: Optional[str] = None,
        icon_url: Optional[str] = None,
    ) -> Category:
        """Create a category and return it with its assigned id."""
        pass

    @abstractmethod
    async def update_category(self, category: Category) -> Category:
        """Replace the stored category that has ``category.id``.

        Raises:
            CategoryNotFoundFailure: If no category has this id
        """
        pass

    @abstractmethod
    async def delete_category(self, id: str) -> None:
        """Delete a category.

        Raises:
            CategoryNotFoundFailure: If no category has this id
        """
        pass
