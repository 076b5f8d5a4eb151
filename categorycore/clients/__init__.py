"""Provider contracts the repositories consume."""

from .base import CategoriesClient

__all__ = ["CategoriesClient"]
