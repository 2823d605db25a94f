"""API layer module.

Contains FastAPI routers and response schemas.
"""

from storefront.api.brands import router as brands_router
from storefront.api.health import router as health_router
from storefront.api.pages import router as pages_router
from storefront.api.products import router as products_router

__all__ = [
    "brands_router",
    "health_router",
    "pages_router",
    "products_router",
]
