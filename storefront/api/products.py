"""Product API endpoints.

Provides the product list (with brand/category/search filters) and
product detail pages.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.api.dependencies import get_catalog_service
from storefront.api.schemas import (
    ActiveFiltersSchema,
    ErrorResponse,
    FilterOptionSchema,
    PageMetadataSchema,
    ProductDetailResponse,
    ProductDetailSchema,
    ProductListResponse,
    ProductSchema,
)
from storefront.catalog.filters import ProductFilter
from storefront.catalog.service import CatalogService, ProductListing

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Converters
# ============================================================================


def listing_to_response(listing: ProductListing) -> ProductListResponse:
    """Convert a product listing to response schema."""
    return ProductListResponse(
        products=[ProductSchema.model_validate(p) for p in listing.products],
        total=listing.total,
        brands=[FilterOptionSchema.model_validate(o) for o in listing.brands],
        categories=[FilterOptionSchema.model_validate(o) for o in listing.categories],
        filters=ActiveFiltersSchema.model_validate(listing.filters),
        has_filters=listing.has_filters,
        available=listing.available,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List products",
    description="Get products, newest first, filtered by brand, category and search term.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    brand: Annotated[str | None, Query(description="Brand slug, e.g. 'clamptek'")] = None,
    category: Annotated[str | None, Query(description="Category slug, e.g. 'toggle-clamps'")] = None,
    search: Annotated[str | None, Query(description="Name or description text")] = None,
) -> ProductListResponse:
    """List products matching every supplied filter."""
    filters = ProductFilter.from_query(brand=brand, category=category, search=search)
    listing = await service.browse_products(filters)
    return listing_to_response(listing)


@router.get(
    "/{product_id}",
    response_model=ProductDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
    description="Get product detail with page metadata.",
)
async def get_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductDetailResponse:
    """Get a product by ID.

    Raises:
        HTTPException: 404 if the product is missing or the store is unavailable.
    """
    page = await service.product_page(product_id)

    if page is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": f"Product not found: {product_id}",
            },
        )

    return ProductDetailResponse(
        product=ProductDetailSchema.model_validate(page.product),
        metadata=PageMetadataSchema.model_validate(page.metadata),
    )


@router.get(
    "/{product_id}/metadata",
    response_model=PageMetadataSchema,
    summary="Get product page metadata",
    description="Get title, description, keywords and social preview fields for a product page.",
)
async def get_product_metadata(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> PageMetadataSchema:
    """Get product page metadata; a missing product gets the not-found title."""
    metadata = await service.product_metadata(product_id)
    return PageMetadataSchema.model_validate(metadata)
