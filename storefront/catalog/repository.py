"""Catalog repository for database reads.

Provides read-only queries for brands, categories and products.
Store failures are raised as DataAccessError; callers decide how to
degrade.
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

import structlog
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.catalog.models import Brand, Category, Product
from storefront.domain.exceptions import DataAccessError

logger = structlog.get_logger()

T = TypeVar("T")


class CatalogRepository:
    """Repository for catalog database reads.

    Example usage:
        async with async_session_factory() as session:
            repo = CatalogRepository(session)
            brands = await repo.list_brands()
            for brand, product_count in brands:
                ...
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_brands(self) -> list[tuple[Brand, int]]:
        """List all brands with their product counts.

        Returns:
            (brand, product_count) pairs ordered by brand name.
        """
        query = (
            select(Brand, func.count(Product.id).label("product_count"))
            .outerjoin(Product, Product.brand_id == Brand.id)
            .group_by(Brand.id)
            .order_by(Brand.name)
        )

        async def run() -> list[tuple[Brand, int]]:
            result = await self.session.execute(query)
            return [(row[0], row[1]) for row in result.all()]

        return await self._run("list_brands", run)

    async def list_categories(self) -> list[tuple[Category, int]]:
        """List all categories with their product counts.

        Returns:
            (category, product_count) pairs ordered by category name.
        """
        query = (
            select(Category, func.count(Product.id).label("product_count"))
            .outerjoin(Product, Product.category_id == Category.id)
            .group_by(Category.id)
            .order_by(Category.name)
        )

        async def run() -> list[tuple[Category, int]]:
            result = await self.session.execute(query)
            return [(row[0], row[1]) for row in result.all()]

        return await self._run("list_categories", run)

    async def list_products(self, limit: int | None = None) -> list[Product]:
        """List products, newest first.

        Brand, category and images are eagerly loaded so projections
        never trigger lazy loads.

        Args:
            limit: Optional maximum number of products.

        Returns:
            Products ordered by creation time descending.
        """
        query = (
            select(Product)
            .options(
                selectinload(Product.brand),
                selectinload(Product.category),
                selectinload(Product.images),
            )
            .order_by(Product.created_at.desc())
        )

        if limit is not None:
            query = query.limit(limit)

        async def run() -> list[Product]:
            result = await self.session.execute(query)
            return list(result.scalars().all())

        return await self._run("list_products", run)

    async def get_product(self, product_id: str) -> Product | None:
        """Get a product by ID with all detail associations.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        query = (
            select(Product)
            .where(Product.id == product_id)
            .options(
                selectinload(Product.brand),
                selectinload(Product.category),
                selectinload(Product.images),
                selectinload(Product.variants),
                selectinload(Product.inventory),
            )
        )

        async def run() -> Product | None:
            result = await self.session.execute(query)
            return result.scalar_one_or_none()

        return await self._run("get_product", run)

    async def ping(self) -> None:
        """Check store connectivity."""

        async def run() -> None:
            await self.session.execute(text("SELECT 1"))

        await self._run("ping", run)

    async def _run(self, operation: str, query: Callable[[], Awaitable[T]]) -> T:
        """Run a query, converting store failures to DataAccessError.

        Args:
            operation: Operation name for logs and the raised error.
            query: Coroutine function performing the query.

        Returns:
            Query result.

        Raises:
            DataAccessError: If the store raised a SQLAlchemy or connection error.
        """
        try:
            return await query()
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                "Catalog query failed",
                operation=operation,
                error=str(e),
            )
            raise DataAccessError(operation, str(e)) from e
