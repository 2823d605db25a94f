"""Product filtering by brand, category and search term.

Filters are applied in memory to an already-loaded product collection.
Criteria are conjunctive: a product must satisfy every supplied one.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from storefront.catalog.slugs import matches_slug


@dataclass(frozen=True)
class ProductFilter:
    """Filter criteria taken from the product list query string.

    Attributes:
        brand: Brand slug (e.g. "clamptek").
        category: Category slug (e.g. "toggle-clamps").
        search: Free-text search term.
    """

    brand: str | None = None
    category: str | None = None
    search: str | None = None

    @classmethod
    def from_query(
        cls,
        brand: str | None = None,
        category: str | None = None,
        search: str | None = None,
    ) -> "ProductFilter":
        """Build a filter from raw query parameters.

        Empty strings count as not supplied.
        """
        return cls(
            brand=brand or None,
            category=category or None,
            search=search or None,
        )

    @property
    def is_empty(self) -> bool:
        """Check if no criteria are set."""
        return not (self.brand or self.category or self.search)


def matches_brand(product: Any, brand_slug: str) -> bool:
    """Check if a product's brand derives the given slug."""
    brand = product.brand
    return brand is not None and matches_slug(brand.name, brand_slug)


def matches_category(product: Any, category_slug: str) -> bool:
    """Check if a product's category derives the given slug."""
    category = product.category
    return category is not None and matches_slug(category.name, category_slug)


def matches_search(product: Any, term: str) -> bool:
    """Case-insensitive substring match on name or description."""
    needle = term.lower()
    if needle in product.name.lower():
        return True
    return product.description is not None and needle in product.description.lower()


def apply_filters(products: Iterable[Any], filters: ProductFilter | None = None) -> list[Any]:
    """Narrow a product collection to those matching every criterion.

    Products only need ``name``, ``description``, ``brand`` and
    ``category`` attributes. Input order is preserved and an empty
    filter returns every product.

    Args:
        products: Products to filter.
        filters: Criteria to apply.

    Returns:
        Matching products.
    """
    result = list(products)
    if filters is None or filters.is_empty:
        return result

    if filters.brand:
        result = [p for p in result if matches_brand(p, filters.brand)]

    if filters.category:
        result = [p for p in result if matches_category(p, filters.category)]

    # Substring search last
    if filters.search:
        result = [p for p in result if matches_search(p, filters.search)]

    return result
