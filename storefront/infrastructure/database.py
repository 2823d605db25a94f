"""Database configuration and session management.

The catalog store is owned by another system; this service only reads
from it. Connections carry a connect and statement timeout so a stalled
store surfaces as a failed catalog query instead of a hung page.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from storefront.infrastructure.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    pool_size=settings.database_pool_size,
    connect_args={
        "timeout": settings.database_timeout,
        "command_timeout": settings.database_timeout,
    },
)

# Session factory, autoflush off since nothing is written
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Base class for catalog models
Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a read-only catalog session for one request.

    Catalog reads never write, so the transaction is always rolled back
    when the request finishes.

    Yields:
        AsyncSession for catalog queries.
    """
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
