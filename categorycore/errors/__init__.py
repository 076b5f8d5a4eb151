"""Error handling module for category repository operations."""

from .handlers import (
    ErrorHandler,
    ErrorContext,
    ErrorSeverity,
    ErrorCategory,
    CategoryException,
    CategoryOperationFailure,
    GetCategoriesFailure,
    GetCategoryFailure,
    CreateCategoryFailure,
    UpdateCategoryFailure,
    DeleteCategoryFailure,
    CategoryNotFoundFailure,
)

__all__ = [
    "ErrorHandler",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "CategoryException",
    "CategoryOperationFailure",
    "GetCategoriesFailure",
    "GetCategoryFailure",
    "CreateCategoryFailure",
    "UpdateCategoryFailure",
    "DeleteCategoryFailure",
    "CategoryNotFoundFailure",
]
