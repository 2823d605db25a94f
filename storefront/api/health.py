"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from storefront.api.dependencies import get_catalog_repository
from storefront.catalog.repository import CatalogRepository
from storefront.domain.exceptions import DataAccessError

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    from storefront.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service="storefront-api",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check(
    repository: Annotated[CatalogRepository, Depends(get_catalog_repository)],
) -> JSONResponse:
    """Check if the catalog store is reachable.

    Returns:
        Readiness status, 503 when the store cannot be queried.
    """
    try:
        await repository.ping()
    except DataAccessError:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": "unreachable"},
        )
    return JSONResponse(content={"status": "ready", "database": "ok"})
