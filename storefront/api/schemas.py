"""API schemas for the Storefront API.

Pydantic models for response serialization. Catalog views are plain
dataclasses; these schemas read them by attribute.
"""

from pydantic import BaseModel, ConfigDict, Field


class ViewSchema(BaseModel):
    """Base schema populated from view objects."""

    model_config = ConfigDict(from_attributes=True)


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Brand / Category Schemas
# ============================================================================


class BrandSchema(ViewSchema):
    """Brand card."""

    id: str
    name: str
    slug: str = Field(..., description="Value for the product list brand filter")
    product_count: int


class BrandListResponse(BaseModel):
    """Brands page."""

    brands: list[BrandSchema]
    total: int
    available: bool = Field(..., description="False when the catalog store could not be read")


class CategorySchema(ViewSchema):
    """Category card."""

    id: str
    name: str
    slug: str = Field(..., description="Value for the product list category filter")
    product_count: int


class CategoryListResponse(BaseModel):
    """Categories page."""

    categories: list[CategorySchema]
    total: int
    available: bool = Field(..., description="False when the catalog store could not be read")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(ViewSchema):
    """Product card."""

    id: str
    name: str
    slug: str = Field(..., description="Product detail path segment (the product ID)")
    description: str | None = Field(
        default=None, description="Raw description markup; escape before display"
    )
    image_url: str | None = None
    images: list[str] = Field(default_factory=list)
    brand_name: str | None = None
    category_name: str | None = None
    brand_slug: str | None = None
    category_slug: str | None = None
    featured: bool = False


class VariantSchema(ViewSchema):
    """Product variant."""

    id: str
    name: str
    sku: str | None = None


class InventorySchema(ViewSchema):
    """Stock level."""

    quantity: int
    in_stock: bool


class ProductDetailSchema(ProductSchema):
    """Product detail."""

    description_html: str = Field(..., description="Description markup or a fallback paragraph")
    variants: list[VariantSchema] = Field(default_factory=list)
    inventory: InventorySchema | None = None


class FilterOptionSchema(ViewSchema):
    """Sidebar filter link."""

    id: str
    name: str
    slug: str
    active: bool


class ActiveFiltersSchema(ViewSchema):
    """Filters applied to the product list."""

    brand: str | None = None
    category: str | None = None
    search: str | None = None


class ProductListResponse(BaseModel):
    """Product list page."""

    products: list[ProductSchema]
    total: int
    brands: list[FilterOptionSchema]
    categories: list[FilterOptionSchema]
    filters: ActiveFiltersSchema
    has_filters: bool
    available: bool = Field(..., description="False when the catalog store could not be read")


# ============================================================================
# Metadata Schemas
# ============================================================================


class OpenGraphSchema(ViewSchema):
    """Open Graph preview."""

    title: str
    description: str | None = None
    type: str = "website"
    url: str | None = None
    images: list[str] | None = None
    site_name: str | None = None
    locale: str | None = None


class TwitterCardSchema(ViewSchema):
    """Twitter card preview."""

    card: str = "summary_large_image"
    title: str
    description: str | None = None
    images: list[str] | None = None


class PageMetadataSchema(ViewSchema):
    """Page metadata."""

    title: str
    description: str | None = None
    keywords: list[str] = Field(default_factory=list)
    canonical_url: str | None = None
    images: list[str] = Field(default_factory=list)
    open_graph: OpenGraphSchema | None = None
    twitter: TwitterCardSchema | None = None


class ProductDetailResponse(BaseModel):
    """Product detail page."""

    product: ProductDetailSchema
    metadata: PageMetadataSchema


# ============================================================================
# Site / Home Schemas
# ============================================================================


class ContactSchema(ViewSchema):
    """Dealer contact card."""

    address: list[str]
    phones: list[str]
    email: str


class SiteMetadataSchema(ViewSchema):
    """Site-wide metadata defaults."""

    default_title: str
    title_template: str
    description: str
    keywords: list[str]
    base_url: str
    authors: list[str]
    open_graph: OpenGraphSchema
    twitter: TwitterCardSchema
    robots_index: bool
    robots_follow: bool


class SiteResponse(BaseModel):
    """Site metadata and contact info."""

    metadata: SiteMetadataSchema
    contact: ContactSchema


class CategoryTileSchema(ViewSchema):
    """Home page category tile."""

    name: str
    slug: str
    blurb: str
    image: str


class HighlightSchema(ViewSchema):
    """About section figure."""

    value: str
    label: str


class HomeResponse(BaseModel):
    """Home page."""

    featured: list[ProductSchema]
    featured_title: str
    featured_blurb: str
    featured_empty_message: str
    trusted_by: str
    brand_strip: list[str]
    core_products_title: str
    core_products_subtitle: str
    category_tiles: list[CategoryTileSchema]
    about_title: str
    about_text: str
    highlights: list[HighlightSchema]
    contact: ContactSchema | None = None
    available: bool = Field(..., description="False when the catalog store could not be read")
