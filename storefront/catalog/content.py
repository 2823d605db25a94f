"""Static marketing content for the home page.

Category tiles link into the product list through the same slug scheme
used for filtering, so tile slugs are derived rather than hard-coded.
"""

from dataclasses import dataclass, field

from storefront.catalog.slugs import slugify
from storefront.infrastructure.config import ContactInfo, SiteConfig


@dataclass
class CategoryTile:
    """Home page category tile."""

    name: str
    slug: str
    blurb: str
    image: str


@dataclass
class Highlight:
    """Headline figure in the about section (e.g. "20+ Years Exp.")."""

    value: str
    label: str


@dataclass
class HomeContent:
    """Static sections of the home page."""

    trusted_by: str
    brand_strip: list[str]
    core_products_title: str
    core_products_subtitle: str
    category_tiles: list[CategoryTile]
    featured_title: str
    featured_blurb: str
    featured_empty_message: str
    about_title: str
    about_text: str
    highlights: list[Highlight] = field(default_factory=list)
    contact: ContactInfo | None = None


# (name, blurb, image)
_CATEGORY_TILES = [
    ("Toggle Clamps", "Vertical, Horizontal, Push-Pull", "/images/cat-clamps.png"),
    ("Handwheels", "Bakelite, Spoke, Revolving Handles", "/images/cat-handwheels.png"),
    ("Vibration Mounts", "Rubber Buffers, Anti-Vibration Pads", "/images/cat-mounts.png"),
    ("Control Panel", "Locks, Hinges, Keys", "/images/cat-control.png"),
]


def category_tiles() -> list[CategoryTile]:
    """Core product tiles shown on the home page."""
    return [
        CategoryTile(name=name, slug=slugify(name), blurb=blurb, image=image)
        for name, blurb, image in _CATEGORY_TILES
    ]


def home_content(site: SiteConfig) -> HomeContent:
    """Build the static home page sections for a site."""
    return HomeContent(
        trusted_by="Trusted by Engineering Units Across Telangana",
        brand_strip=["CLAMPTEK", "SWIFTIN", "JGANTER"],
        core_products_title="Core Products",
        core_products_subtitle="Precision Engineering Components",
        category_tiles=category_tiles(),
        featured_title="Featured Inventory",
        featured_blurb=(
            "High-demand industrial supplies available for immediate delivery "
            "from our Ranigunj warehouse."
        ),
        featured_empty_message="Product catalog is being updated.",
        about_title=site.name,
        about_text=(
            "Your trusted partner for industrial excellence since 2000. Located in "
            "Ranigunj, Secunderabad, we specialize in providing top-tier clamping "
            "solutions, vibration isolation mounts, and machine accessories."
        ),
        highlights=[
            Highlight(value="20+", label="Years Exp."),
            Highlight(value="1000+", label="SKUs"),
        ],
        contact=site.contact,
    )
