"""Product Catalog.

Read-only brands, categories and products for the storefront pages:
repository access, slug-based filtering, display projections and page
metadata.
"""

from storefront.catalog.filters import ProductFilter, apply_filters
from storefront.catalog.metadata import PageMetadata, SiteMetadata, site_metadata, synthesize
from storefront.catalog.models import (
    Brand,
    Category,
    Inventory,
    Product,
    ProductImage,
    ProductVariant,
)
from storefront.catalog.projection import (
    BrandView,
    CategoryView,
    FilterOption,
    ProductDetailView,
    ProductView,
)
from storefront.catalog.repository import CatalogRepository
from storefront.catalog.service import (
    CatalogResult,
    CatalogService,
    HomePage,
    ProductListing,
    ProductPage,
)
from storefront.catalog.slugs import matches_slug, slugify

__all__ = [
    # Models
    "Brand",
    "Category",
    "Inventory",
    "Product",
    "ProductImage",
    "ProductVariant",
    # Slugs
    "matches_slug",
    "slugify",
    # Filtering
    "ProductFilter",
    "apply_filters",
    # Views
    "BrandView",
    "CategoryView",
    "FilterOption",
    "ProductDetailView",
    "ProductView",
    # Metadata
    "PageMetadata",
    "SiteMetadata",
    "site_metadata",
    "synthesize",
    # Repository
    "CatalogRepository",
    # Service
    "CatalogResult",
    "CatalogService",
    "HomePage",
    "ProductListing",
    "ProductPage",
]
