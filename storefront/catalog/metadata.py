"""Page metadata for search engines and social previews.

Derives title, description, keywords, canonical URL and Open Graph /
Twitter card fields from a product record and the site configuration.
"""

import re
from dataclasses import dataclass, field

from storefront.catalog.models import Product
from storefront.infrastructure.config import SiteConfig

MAX_DESCRIPTION_LENGTH = 160
DEFAULT_BRAND_LABEL = "Industrial Components"

_TAG = re.compile(r"<[^>]*>")


@dataclass
class OpenGraph:
    """Open Graph preview fields."""

    title: str
    description: str | None = None
    type: str = "website"
    url: str | None = None
    images: list[str] | None = None
    site_name: str | None = None
    locale: str | None = None


@dataclass
class TwitterCard:
    """Twitter card preview fields."""

    title: str
    description: str | None = None
    card: str = "summary_large_image"
    images: list[str] | None = None


@dataclass
class PageMetadata:
    """Metadata for a single page."""

    title: str
    description: str | None = None
    keywords: list[str] = field(default_factory=list)
    canonical_url: str | None = None
    images: list[str] = field(default_factory=list)
    open_graph: OpenGraph | None = None
    twitter: TwitterCard | None = None


@dataclass
class SiteMetadata:
    """Site-wide defaults applied to every page."""

    default_title: str
    title_template: str
    description: str
    keywords: list[str]
    base_url: str
    authors: list[str]
    open_graph: OpenGraph
    twitter: TwitterCard
    robots_index: bool = True
    robots_follow: bool = True


def strip_tags(markup: str) -> str:
    """Remove every ``<...>`` tag from a string.

    Entities are left untouched.
    """
    return _TAG.sub("", markup)


def describe(product: Product, site: SiteConfig) -> str:
    """Build the meta description for a product.

    Uses the tag-stripped description cut at 160 characters (not on a
    word boundary), or a dealer sentence naming the brand when the
    product has no description.
    """
    if product.description:
        return strip_tags(product.description)[:MAX_DESCRIPTION_LENGTH]

    brand_label = product.brand.name if product.brand else DEFAULT_BRAND_LABEL
    return f"Buy {product.name} - Authorized Dealer for {brand_label} in {site.city}."


def not_found_metadata(site: SiteConfig) -> PageMetadata:
    """Metadata for a missing product."""
    return PageMetadata(title=f"Product Not Found | {site.name}")


def synthesize(product: Product | None, site: SiteConfig) -> PageMetadata:
    """Derive page metadata for a product detail page.

    Args:
        product: Product with brand, category and images loaded, or None.
        site: Site configuration.

    Returns:
        Page metadata. A not-found title is returned for a missing product.
    """
    if product is None:
        return not_found_metadata(site)

    title = f"{product.name} | {site.name}"
    description = describe(product, site)
    url = site.url(f"/products/{product.id}")
    images = [image.url for image in product.images]

    candidates = [
        product.name,
        product.brand.name if product.brand else None,
        product.category.name if product.category else None,
        *site.product_keywords,
        site.name,
    ]
    keywords = [keyword for keyword in candidates if keyword]

    return PageMetadata(
        title=title,
        description=description,
        keywords=keywords,
        canonical_url=url,
        images=images,
        open_graph=OpenGraph(
            title=title,
            description=description,
            url=url,
            images=images or None,
            site_name=site.name,
        ),
        twitter=TwitterCard(
            title=title,
            description=description,
            images=images or None,
        ),
    )


def site_metadata(site: SiteConfig) -> SiteMetadata:
    """Site-wide default metadata."""
    return SiteMetadata(
        default_title=f"{site.name} | {site.tagline}",
        title_template=f"%s | {site.name}",
        description=site.description,
        keywords=list(site.keywords),
        base_url=site.base_url,
        authors=[site.name],
        open_graph=OpenGraph(
            title=f"{site.name} | Premier Industrial Components",
            description=(
                "Your trusted partner for high-quality industrial machine parts, "
                f"toggle clamps, and engineering solutions in {site.city}."
            ),
            url=site.base_url,
            site_name=site.name,
            locale=site.locale,
        ),
        twitter=TwitterCard(
            title=f"{site.name} | Industrial Components",
            description=(
                f"Top quality industrial parts in {site.city}. "
                "Clamptek & Swiftin Authorized Dealer."
            ),
        ),
    )
