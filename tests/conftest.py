"""Shared fixtures for category repository tests."""

import pytest
from unittest.mock import AsyncMock, Mock

from categorycore.clients import CategoriesClient
from categorycore.errors import ErrorHandler
from categorycore.models import Category
from categorycore.repositories import CategoriesRepository
from categorycore.security import AuditLogger


@pytest.fixture
def mock_client():
    """Mock categories client; every method is awaitable."""
    return AsyncMock(spec=CategoriesClient)


@pytest.fixture
def audit_sink():
    """Stand-in for the structlog audit logger."""
    return Mock()


@pytest.fixture
def audit_logger(audit_sink):
    return AuditLogger(logger=audit_sink)


@pytest.fixture
def error_handler(audit_logger):
    return ErrorHandler(audit_logger=audit_logger)


@pytest.fixture
def categories_repo(mock_client, error_handler, audit_logger):
    """Create categories repository with mocked dependencies."""
    return CategoriesRepository(
        client=mock_client,
        error_handler=error_handler,
        audit_logger=audit_logger,
    )


@pytest.fixture
def sample_categories():
    """Ten categories with ids cat-0 .. cat-9."""
    return [Category(id=f"cat-{i}", name=f"Category {i}") for i in range(10)]
