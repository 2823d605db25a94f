"""Site and home page endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_catalog_service
from storefront.api.schemas import (
    CategoryTileSchema,
    ContactSchema,
    HighlightSchema,
    HomeResponse,
    ProductSchema,
    SiteMetadataSchema,
    SiteResponse,
)
from storefront.catalog.metadata import site_metadata
from storefront.catalog.service import CatalogService
from storefront.infrastructure.config import get_site_config

router = APIRouter(tags=["Pages"])


@router.get(
    "/site",
    response_model=SiteResponse,
    summary="Get site metadata",
    description="Get site-wide metadata defaults and contact details.",
)
async def get_site() -> SiteResponse:
    """Get site metadata and contact card."""
    site = get_site_config()
    return SiteResponse(
        metadata=SiteMetadataSchema.model_validate(site_metadata(site)),
        contact=ContactSchema.model_validate(site.contact),
    )


@router.get(
    "/home",
    response_model=HomeResponse,
    summary="Get home page",
    description="Get featured products and the static home page sections.",
)
async def get_home(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> HomeResponse:
    """Get home page data."""
    page = await service.home_page()
    content = page.content

    return HomeResponse(
        featured=[ProductSchema.model_validate(p) for p in page.featured],
        featured_title=content.featured_title,
        featured_blurb=content.featured_blurb,
        featured_empty_message=content.featured_empty_message,
        trusted_by=content.trusted_by,
        brand_strip=content.brand_strip,
        core_products_title=content.core_products_title,
        core_products_subtitle=content.core_products_subtitle,
        category_tiles=[CategoryTileSchema.model_validate(t) for t in content.category_tiles],
        about_title=content.about_title,
        about_text=content.about_text,
        highlights=[HighlightSchema.model_validate(h) for h in content.highlights],
        contact=ContactSchema.model_validate(content.contact) if content.contact else None,
        available=page.available,
    )
