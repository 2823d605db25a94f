"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.catalog.repository import CatalogRepository
from storefront.catalog.service import CatalogService
from storefront.infrastructure.config import get_site_config
from storefront.infrastructure.database import get_session


def get_catalog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogRepository:
    """Get catalog repository bound to the request session."""
    return CatalogRepository(session)


def get_catalog_service(
    repository: Annotated[CatalogRepository, Depends(get_catalog_repository)],
) -> CatalogService:
    """Get catalog service for the request."""
    return CatalogService(repository, get_site_config())
