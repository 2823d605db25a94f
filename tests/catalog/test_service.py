"""Tests for the catalog service."""

from unittest.mock import AsyncMock

import pytest

from storefront.catalog.filters import ProductFilter
from storefront.catalog.repository import CatalogRepository
from storefront.catalog.service import FEATURED_PRODUCT_COUNT, CatalogService
from storefront.domain.exceptions import DataAccessError


@pytest.fixture
def repository() -> AsyncMock:
    """Repository mock with async methods."""
    return AsyncMock(spec=CatalogRepository)


@pytest.fixture
def service(repository, site) -> CatalogService:
    """Catalog service over the mocked repository."""
    return CatalogService(repository, site)


@pytest.fixture
def store_down(repository) -> AsyncMock:
    """Make every repository read fail."""
    for name in ("list_brands", "list_categories", "list_products", "get_product"):
        getattr(repository, name).side_effect = DataAccessError(name, "connection refused")
    return repository


class TestBrandsAndCategories:
    """Tests for brand and category lists."""

    @pytest.mark.asyncio
    async def test_list_brands(self, service, repository, clamptek, swiftin) -> None:
        """Brands are projected with counts."""
        repository.list_brands.return_value = [(clamptek, 2), (swiftin, 1)]

        brands = await service.list_brands()

        assert [(b.name, b.slug, b.product_count) for b in brands] == [
            ("Clamptek", "clamptek", 2),
            ("Swiftin", "swiftin", 1),
        ]

    @pytest.mark.asyncio
    async def test_list_brands_store_failure_returns_empty(self, service, store_down) -> None:
        """Store failure degrades to an empty list and never raises."""
        assert await service.list_brands() == []

    @pytest.mark.asyncio
    async def test_load_brands_reports_unavailable(self, service, store_down) -> None:
        """Result type tells unavailable apart from empty."""
        result = await service.load_brands()
        assert result.items == []
        assert result.available is False

    @pytest.mark.asyncio
    async def test_empty_catalog_is_available(self, service, repository) -> None:
        """An empty store is still available."""
        repository.list_brands.return_value = []
        result = await service.load_brands()
        assert result.items == []
        assert result.available is True

    @pytest.mark.asyncio
    async def test_list_categories(self, service, repository, toggle_clamps) -> None:
        """Categories are projected with counts."""
        repository.list_categories.return_value = [(toggle_clamps, 4)]

        categories = await service.list_categories()

        assert categories[0].slug == "toggle-clamps"
        assert categories[0].product_count == 4

    @pytest.mark.asyncio
    async def test_list_categories_store_failure(self, service, store_down) -> None:
        """Store failure degrades to an empty list."""
        assert await service.list_categories() == []


class TestProducts:
    """Tests for product lists."""

    @pytest.mark.asyncio
    async def test_list_products_unfiltered(self, service, repository, catalog) -> None:
        """Without filters every product is returned in store order."""
        repository.list_products.return_value = catalog

        products = await service.list_products()

        assert [p.id for p in products] == [p.id for p in catalog]
        repository.list_products.assert_awaited_once_with(limit=None)

    @pytest.mark.asyncio
    async def test_heavy_duty_clamp_end_to_end(self, service, repository, heavy_duty_clamp) -> None:
        """Brand and category slugs select the clamp; another brand gives nothing."""
        repository.list_products.return_value = [heavy_duty_clamp]

        matching = await service.list_products(
            ProductFilter(brand="clamptek", category="toggle-clamps")
        )
        assert [p.name for p in matching] == ["Heavy Duty Clamp"]

        assert await service.list_products(ProductFilter(brand="swiftin")) == []

    @pytest.mark.asyncio
    async def test_list_products_store_failure(self, service, store_down) -> None:
        """Store failure degrades to an empty list."""
        assert await service.list_products(ProductFilter(search="clamp")) == []

    @pytest.mark.asyncio
    async def test_featured_products(self, service, repository, catalog) -> None:
        """Featured products are the newest few."""
        repository.list_products.return_value = catalog[:FEATURED_PRODUCT_COUNT]

        featured = await service.featured_products()

        assert len(featured) == 4
        repository.list_products.assert_awaited_once_with(limit=FEATURED_PRODUCT_COUNT)


class TestBrowseProducts:
    """Tests for the product list page."""

    @pytest.mark.asyncio
    async def test_listing_with_sidebar(
        self, service, repository, catalog, clamptek, swiftin, toggle_clamps, handwheels
    ) -> None:
        """Listing carries filtered products and active sidebar options."""
        repository.list_products.return_value = catalog
        repository.list_brands.return_value = [(clamptek, 2), (swiftin, 1)]
        repository.list_categories.return_value = [(handwheels, 1), (toggle_clamps, 2)]

        listing = await service.browse_products(ProductFilter(brand="Swiftin"))

        assert [p.name for p in listing.products] == ["Push-Pull Clamp"]
        assert listing.total == 1
        assert listing.has_filters is True
        assert listing.available is True
        assert [(o.slug, o.active) for o in listing.brands] == [
            ("clamptek", False),
            ("swiftin", True),
        ]
        assert not any(o.active for o in listing.categories)

    @pytest.mark.asyncio
    async def test_listing_without_filters(self, service, repository, catalog) -> None:
        """No filters lists everything."""
        repository.list_products.return_value = catalog
        repository.list_brands.return_value = []
        repository.list_categories.return_value = []

        listing = await service.browse_products(ProductFilter())

        assert listing.total == len(catalog)
        assert listing.has_filters is False

    @pytest.mark.asyncio
    async def test_listing_store_failure(self, service, store_down) -> None:
        """Store failure gives an empty, unavailable listing."""
        listing = await service.browse_products(ProductFilter(category="handwheels"))

        assert listing.products == []
        assert listing.brands == []
        assert listing.categories == []
        assert listing.available is False


class TestProductDetail:
    """Tests for product detail and metadata."""

    @pytest.mark.asyncio
    async def test_get_product(self, service, repository, heavy_duty_clamp) -> None:
        """Existing product is projected for the detail page."""
        repository.get_product.return_value = heavy_duty_clamp

        product = await service.get_product("prod-heavy-duty")

        assert product is not None
        assert product.name == "Heavy Duty Clamp"
        repository.get_product.assert_awaited_once_with("prod-heavy-duty")

    @pytest.mark.asyncio
    async def test_get_missing_product(self, service, repository) -> None:
        """Missing product returns None."""
        repository.get_product.return_value = None
        assert await service.get_product("missing-id") is None

    @pytest.mark.asyncio
    async def test_get_product_store_failure(self, service, store_down) -> None:
        """Store failure is indistinguishable from not found."""
        assert await service.get_product("prod-heavy-duty") is None

    @pytest.mark.asyncio
    async def test_product_page(self, service, repository, heavy_duty_clamp) -> None:
        """Product page pairs detail and metadata from one read."""
        repository.get_product.return_value = heavy_duty_clamp

        page = await service.product_page("prod-heavy-duty")

        assert page is not None
        assert page.product.id == "prod-heavy-duty"
        assert page.metadata.title == "Heavy Duty Clamp | Burhani Associates"
        repository.get_product.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_product_page_missing(self, service, repository) -> None:
        """Missing product has no page."""
        repository.get_product.return_value = None
        assert await service.product_page("missing-id") is None

    @pytest.mark.asyncio
    async def test_product_metadata_missing(self, service, repository) -> None:
        """Missing product gets not-found metadata."""
        repository.get_product.return_value = None

        metadata = await service.product_metadata("missing-id")

        assert metadata.title == "Product Not Found | Burhani Associates"

    @pytest.mark.asyncio
    async def test_product_metadata_store_failure(self, service, store_down) -> None:
        """Store failure also gets not-found metadata."""
        metadata = await service.product_metadata("prod-heavy-duty")
        assert metadata.title == "Product Not Found | Burhani Associates"


class TestHomePage:
    """Tests for the home page."""

    @pytest.mark.asyncio
    async def test_home_page(self, service, repository, catalog) -> None:
        """Home page has featured products and static content."""
        repository.list_products.return_value = catalog

        page = await service.home_page()

        assert len(page.featured) == len(catalog)
        assert page.available is True
        assert page.content.about_title == "Burhani Associates"
        assert [t.slug for t in page.content.category_tiles] == [
            "toggle-clamps",
            "handwheels",
            "vibration-mounts",
            "control-panel",
        ]

    @pytest.mark.asyncio
    async def test_home_page_store_failure(self, service, store_down) -> None:
        """Static content survives a store failure."""
        page = await service.home_page()

        assert page.featured == []
        assert page.available is False
        assert page.content.featured_empty_message == "Product catalog is being updated."
