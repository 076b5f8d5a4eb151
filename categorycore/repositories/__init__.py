"""Repository pattern implementation for data access."""

from .base import BaseRepository
from .categories import CategoriesRepository

__all__ = [
    "BaseRepository",
    "CategoriesRepository",
]
