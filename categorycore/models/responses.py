"""Pydantic models for paginated listings."""

from typing import Generic, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

from .category import Category


T = TypeVar("T", bound=Category)


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a listing.

    ``cursor`` is the id of the last item on the page and is passed back as
    ``start_after_id`` to fetch the next page.
    """

    model_config = ConfigDict(frozen=True)

    items: List[T]
    cursor: Optional[str] = None
    has_more: bool = False

    @classmethod
    def from_page(
        cls, items: Sequence[T], limit: Optional[int] = None
    ) -> "PaginatedResponse[T]":
        """Build a page from the items a provider returned.

        A page that exactly fills ``limit`` is assumed to have more data after
        it. A short page, or a listing made without a limit, is assumed to be
        complete.

        Args:
            items: Items in provider order
            limit: Page size that was requested, if any

        Returns:
            Paginated response for the items
        """
        items = list(items)
        cursor = items[-1].id if items else None
        has_more = limit is not None and len(items) == limit
        return cls(items=items, cursor=cursor, has_more=has_more)
