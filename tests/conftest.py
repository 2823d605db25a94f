"""Shared fixtures for storefront tests.

Catalog records are transient ORM instances: relationships are assigned
directly and nothing touches a database.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import pytest

from storefront.catalog.models import (
    Brand,
    Category,
    Inventory,
    Product,
    ProductImage,
    ProductVariant,
)
from storefront.infrastructure.config import SiteConfig, get_site_config

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def site() -> SiteConfig:
    """Site configuration with default settings."""
    return get_site_config()


@pytest.fixture
def clamptek() -> Brand:
    """Clamptek brand."""
    return Brand(id="brand-clamptek", name="Clamptek")


@pytest.fixture
def swiftin() -> Brand:
    """Swiftin brand."""
    return Brand(id="brand-swiftin", name="Swiftin")


@pytest.fixture
def toggle_clamps() -> Category:
    """Toggle Clamps category."""
    return Category(id="cat-toggle", name="Toggle Clamps")


@pytest.fixture
def handwheels() -> Category:
    """Handwheels category."""
    return Category(id="cat-handwheels", name="Handwheels")


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for transient products."""
    counter = {"n": 0}

    def factory(
        name: str,
        *,
        id: str | None = None,
        description: str | None = None,
        brand: Brand | None = None,
        category: Category | None = None,
        image_urls: list[str] | None = None,
        variants: list[tuple[str, str | None]] | None = None,
        quantity: int | None = None,
        **extra: Any,
    ) -> Product:
        counter["n"] += 1
        product_id = id or f"prod-{counter['n']:03d}"
        product = Product(
            id=product_id,
            name=name,
            description=description,
            created_at=BASE_TIME + timedelta(days=counter["n"]),
            **extra,
        )
        product.brand = brand
        product.category = category
        product.images = [
            ProductImage(id=f"{product_id}-img-{i}", url=url, position=i)
            for i, url in enumerate(image_urls or [])
        ]
        product.variants = [
            ProductVariant(id=f"{product_id}-var-{i}", name=variant_name, sku=sku)
            for i, (variant_name, sku) in enumerate(variants or [])
        ]
        if quantity is not None:
            product.inventory = Inventory(id=f"{product_id}-inv", quantity=quantity)
        return product

    return factory


@pytest.fixture
def heavy_duty_clamp(make_product, clamptek, toggle_clamps) -> Product:
    """Clamptek toggle clamp with markup description and two images."""
    return make_product(
        "Heavy Duty Clamp",
        id="prod-heavy-duty",
        description="<p>Vertical <strong>heavy duty</strong> toggle clamp.</p>",
        brand=clamptek,
        category=toggle_clamps,
        image_urls=["https://cdn.example.com/hdc-front.jpg", "https://cdn.example.com/hdc-side.jpg"],
    )


@pytest.fixture
def catalog(make_product, clamptek, swiftin, toggle_clamps, handwheels, heavy_duty_clamp) -> list[Product]:
    """Small mixed catalog, newest first."""
    products = [
        heavy_duty_clamp,
        make_product(
            "Push-Pull Clamp",
            description="Push pull action, 150 kg holding capacity",
            brand=swiftin,
            category=toggle_clamps,
        ),
        make_product(
            "Spoke Handwheel",
            description=None,
            brand=clamptek,
            category=handwheels,
        ),
        make_product("Rubber Buffer"),
    ]
    return products
