"""Display projections of catalog records.

Maps ORM rows into the minimal, display-ready shapes each page needs.
Views are plain data: no markup processing happens here, descriptions
are passed through as stored.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from storefront.catalog.models import Brand, Category, Inventory, Product, ProductVariant
from storefront.catalog.slugs import slugify

DESCRIPTION_FALLBACK_HTML = "<p>Contact us for detailed technical specifications.</p>"


# ============================================================================
# Views
# ============================================================================


@dataclass
class BrandView:
    """Brand card on the brands page."""

    id: str
    name: str
    slug: str
    product_count: int


@dataclass
class CategoryView:
    """Category card on the categories page."""

    id: str
    name: str
    slug: str
    product_count: int


@dataclass
class FilterOption:
    """Sidebar filter link on the product list page.

    Attributes:
        id: Brand or category ID.
        name: Display name.
        slug: Query-string value for the link.
        active: Whether this option is the current filter.
    """

    id: str
    name: str
    slug: str
    active: bool = False


@dataclass
class ProductView:
    """Product card.

    ``slug`` is the product ID; products have no text slug.
    """

    id: str
    name: str
    slug: str
    description: str | None
    image_url: str | None
    images: list[str] = field(default_factory=list)
    brand_name: str | None = None
    category_name: str | None = None
    brand_slug: str | None = None
    category_slug: str | None = None
    featured: bool = False


@dataclass
class VariantView:
    """Product variant line."""

    id: str
    name: str
    sku: str | None = None


@dataclass
class InventoryView:
    """Stock level."""

    quantity: int
    in_stock: bool


@dataclass
class ProductDetailView(ProductView):
    """Product detail page data."""

    description_html: str = DESCRIPTION_FALLBACK_HTML
    variants: list[VariantView] = field(default_factory=list)
    inventory: InventoryView | None = None


# ============================================================================
# Projections
# ============================================================================


def project_brand(brand: Brand, product_count: int) -> BrandView:
    """Project a brand and its repository-supplied product count."""
    return BrandView(
        id=brand.id,
        name=brand.name,
        slug=slugify(brand.name),
        product_count=product_count,
    )


def project_category(category: Category, product_count: int) -> CategoryView:
    """Project a category and its repository-supplied product count."""
    return CategoryView(
        id=category.id,
        name=category.name,
        slug=slugify(category.name),
        product_count=product_count,
    )


def project_filter_options(entities: Iterable[Any], active_slug: str | None) -> list[FilterOption]:
    """Build sidebar filter links for brands or categories.

    Args:
        entities: Brands or categories (anything with ``id`` and ``name``).
        active_slug: Current filter value from the query string.

    Returns:
        One option per entity, in input order.
    """
    options = []
    for entity in entities:
        slug = slugify(entity.name)
        options.append(
            FilterOption(
                id=entity.id,
                name=entity.name,
                slug=slug,
                active=active_slug is not None and slug == active_slug,
            )
        )
    return options


def _product_fields(product: Product) -> dict[str, Any]:
    images = [image.url for image in product.images]
    brand = product.brand
    category = product.category
    return {
        "id": product.id,
        "name": product.name,
        "slug": product.id,
        "description": product.description,
        "image_url": product.primary_image_url,
        "images": images,
        "brand_name": brand.name if brand else None,
        "category_name": category.name if category else None,
        "brand_slug": slugify(brand.name) if brand else None,
        "category_slug": slugify(category.name) if category else None,
    }


def project_product(product: Product) -> ProductView:
    """Project a product into its card shape."""
    return ProductView(**_product_fields(product))


def _project_variant(variant: ProductVariant) -> VariantView:
    return VariantView(id=variant.id, name=variant.name, sku=variant.sku)


def _project_inventory(inventory: Inventory | None) -> InventoryView | None:
    if inventory is None:
        return None
    return InventoryView(quantity=inventory.quantity, in_stock=inventory.in_stock)


def project_product_detail(product: Product) -> ProductDetailView:
    """Project a product with variants and inventory for the detail page."""
    return ProductDetailView(
        **_product_fields(product),
        description_html=product.description or DESCRIPTION_FALLBACK_HTML,
        variants=[_project_variant(v) for v in product.variants],
        inventory=_project_inventory(product.inventory),
    )
