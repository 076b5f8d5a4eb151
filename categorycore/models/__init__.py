"""Data models for categories and paginated listings."""

from .category import Category
from .responses import PaginatedResponse

__all__ = [
    "Category",
    "PaginatedResponse",
]
