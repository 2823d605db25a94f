"""Catalog service for storefront pages.

High-level service that combines repository reads with filtering,
projection and metadata. This is the boundary where store failures are
turned into empty results: no DataAccessError escapes this module.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

import structlog

from storefront.catalog.content import HomeContent, home_content
from storefront.catalog.filters import ProductFilter, apply_filters
from storefront.catalog.metadata import PageMetadata, synthesize
from storefront.catalog.models import Product
from storefront.catalog.projection import (
    BrandView,
    CategoryView,
    FilterOption,
    ProductDetailView,
    ProductView,
    project_brand,
    project_category,
    project_filter_options,
    project_product,
    project_product_detail,
)
from storefront.catalog.repository import CatalogRepository
from storefront.domain.exceptions import DataAccessError
from storefront.infrastructure.config import SiteConfig, get_site_config

logger = structlog.get_logger()

T = TypeVar("T")

FEATURED_PRODUCT_COUNT = 4


# ============================================================================
# Service Result Types
# ============================================================================


@dataclass
class CatalogResult(Generic[T]):
    """Collection result that tells "empty" apart from "unavailable".

    Attributes:
        items: Projected records (empty when the store failed).
        available: False when the store could not be read.
    """

    items: list[T] = field(default_factory=list)
    available: bool = True

    @classmethod
    def unavailable(cls) -> "CatalogResult[T]":
        """Result for a failed store read."""
        return cls(items=[], available=False)


@dataclass
class ProductListing:
    """Product list page data."""

    products: list[ProductView]
    brands: list[FilterOption]
    categories: list[FilterOption]
    filters: ProductFilter
    available: bool = True

    @property
    def total(self) -> int:
        """Number of products after filtering."""
        return len(self.products)

    @property
    def has_filters(self) -> bool:
        """Check if any filter is active."""
        return not self.filters.is_empty


@dataclass
class ProductPage:
    """Product detail page data."""

    product: ProductDetailView
    metadata: PageMetadata


@dataclass
class HomePage:
    """Home page data."""

    featured: list[ProductView]
    content: HomeContent
    available: bool = True


# ============================================================================
# Catalog Service
# ============================================================================


class CatalogService:
    """Service for storefront catalog pages.

    Reads share one session, so they are awaited one after another.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(CatalogRepository(session))
            listing = await service.browse_products(
                ProductFilter.from_query(brand="clamptek"),
            )
    """

    def __init__(
        self,
        repository: CatalogRepository,
        site: SiteConfig | None = None,
    ) -> None:
        """Initialize service.

        Args:
            repository: Catalog repository.
            site: Site configuration (process-wide config by default).
        """
        self.repository = repository
        self.site = site or get_site_config()

    # ------------------------------------------------------------------
    # Brands and categories
    # ------------------------------------------------------------------

    async def load_brands(self) -> CatalogResult[BrandView]:
        """Load brands with product counts."""
        try:
            rows = await self.repository.list_brands()
        except DataAccessError as e:
            self._log_degraded(e)
            return CatalogResult.unavailable()
        return CatalogResult(items=[project_brand(brand, count) for brand, count in rows])

    async def list_brands(self) -> list[BrandView]:
        """List brands, or an empty list if the store is unavailable."""
        return (await self.load_brands()).items

    async def load_categories(self) -> CatalogResult[CategoryView]:
        """Load categories with product counts."""
        try:
            rows = await self.repository.list_categories()
        except DataAccessError as e:
            self._log_degraded(e)
            return CatalogResult.unavailable()
        return CatalogResult(
            items=[project_category(category, count) for category, count in rows]
        )

    async def list_categories(self) -> list[CategoryView]:
        """List categories, or an empty list if the store is unavailable."""
        return (await self.load_categories()).items

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def load_products(
        self,
        filters: ProductFilter | None = None,
        limit: int | None = None,
    ) -> CatalogResult[ProductView]:
        """Load products, newest first, narrowed by filters.

        Args:
            filters: Brand/category/search criteria.
            limit: Maximum number of products to read from the store.

        Returns:
            Projected products.
        """
        try:
            products = await self.repository.list_products(limit=limit)
        except DataAccessError as e:
            self._log_degraded(e)
            return CatalogResult.unavailable()
        matching = apply_filters(products, filters)
        return CatalogResult(items=[project_product(p) for p in matching])

    async def list_products(self, filters: ProductFilter | None = None) -> list[ProductView]:
        """List filtered products, or an empty list if the store is unavailable."""
        return (await self.load_products(filters)).items

    async def featured_products(self, limit: int = FEATURED_PRODUCT_COUNT) -> list[ProductView]:
        """List the newest products for the home page."""
        return (await self.load_products(limit=limit)).items

    async def browse_products(self, filters: ProductFilter) -> ProductListing:
        """Assemble the product list page.

        Args:
            filters: Criteria from the query string.

        Returns:
            Filtered products plus brand and category sidebar options.
        """
        products = await self.load_products(filters)
        brands = await self.load_brands()
        categories = await self.load_categories()

        brand_slug = filters.brand.lower() if filters.brand else None
        category_slug = filters.category.lower() if filters.category else None

        return ProductListing(
            products=products.items,
            brands=project_filter_options(brands.items, brand_slug),
            categories=project_filter_options(categories.items, category_slug),
            filters=filters,
            available=products.available and brands.available and categories.available,
        )

    async def _fetch_product(self, product_id: str) -> Product | None:
        try:
            return await self.repository.get_product(product_id)
        except DataAccessError as e:
            self._log_degraded(e, product_id=product_id)
            return None

    async def get_product(self, product_id: str) -> ProductDetailView | None:
        """Get product detail.

        A missing product and a store failure both return None.
        """
        product = await self._fetch_product(product_id)
        if product is None:
            return None
        return project_product_detail(product)

    async def product_metadata(self, product_id: str) -> PageMetadata:
        """Get page metadata for a product (not-found title when absent)."""
        product = await self._fetch_product(product_id)
        return synthesize(product, self.site)

    async def product_page(self, product_id: str) -> ProductPage | None:
        """Get product detail and metadata from a single read."""
        product = await self._fetch_product(product_id)
        if product is None:
            logger.info("Product not found", product_id=product_id)
            return None
        return ProductPage(
            product=project_product_detail(product),
            metadata=synthesize(product, self.site),
        )

    # ------------------------------------------------------------------
    # Home
    # ------------------------------------------------------------------

    async def home_page(self) -> HomePage:
        """Assemble the home page: newest products plus static content."""
        featured = await self.load_products(limit=FEATURED_PRODUCT_COUNT)
        return HomePage(
            featured=featured.items,
            content=home_content(self.site),
            available=featured.available,
        )

    def _log_degraded(self, error: DataAccessError, **context: str) -> None:
        logger.warning(
            "Catalog unavailable, serving empty result",
            operation=error.operation,
            error=error.message,
            **context,
        )
