"""Shared fixtures for API tests.

The catalog repository dependency is replaced with a mock so no
database is needed.
"""

from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from storefront.api.dependencies import get_catalog_repository
from storefront.catalog.repository import CatalogRepository
from storefront.domain.exceptions import DataAccessError
from storefront.main import app


@pytest.fixture
def repository() -> Generator[AsyncMock, None, None]:
    """Mock repository installed as the request dependency."""
    repo = AsyncMock(spec=CatalogRepository)
    repo.list_brands.return_value = []
    repo.list_categories.return_value = []
    repo.list_products.return_value = []
    repo.get_product.return_value = None

    app.dependency_overrides[get_catalog_repository] = lambda: repo
    yield repo
    app.dependency_overrides.pop(get_catalog_repository, None)


@pytest.fixture
def store_down(repository) -> AsyncMock:
    """Make every repository call fail."""
    for name in ("list_brands", "list_categories", "list_products", "get_product", "ping"):
        getattr(repository, name).side_effect = DataAccessError(name, "connection refused")
    return repository


@pytest.fixture
def client(repository) -> TestClient:
    """Create test client backed by the mock repository."""
    return TestClient(app)
