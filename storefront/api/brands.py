"""Brand and category API endpoints.

Provides the brands and categories pages.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_catalog_service
from storefront.api.schemas import (
    BrandListResponse,
    BrandSchema,
    CategoryListResponse,
    CategorySchema,
)
from storefront.catalog.service import CatalogService

router = APIRouter(tags=["Catalog"])


@router.get(
    "/brands",
    response_model=BrandListResponse,
    summary="List brands",
    description="Get every brand with its product count.",
)
async def list_brands(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> BrandListResponse:
    """List brands.

    Returns an empty list with ``available=false`` when the store
    cannot be read.
    """
    result = await service.load_brands()
    return BrandListResponse(
        brands=[BrandSchema.model_validate(b) for b in result.items],
        total=len(result.items),
        available=result.available,
    )


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    summary="List categories",
    description="Get every category with its product count.",
)
async def list_categories(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> CategoryListResponse:
    """List categories."""
    result = await service.load_categories()
    return CategoryListResponse(
        categories=[CategorySchema.model_validate(c) for c in result.items],
        total=len(result.items),
        available=result.available,
    )
