"""Storefront API main application module.

This module initializes the FastAPI application and configures
logging, middleware, routers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.brands import router as brands_router
from storefront.api.health import router as health_router
from storefront.api.middleware import error_response, setup_middleware
from storefront.api.pages import router as pages_router
from storefront.api.products import router as products_router
from storefront.infrastructure.config import get_site_config, settings
from storefront.infrastructure.database import engine
from storefront.infrastructure.logging import configure_logging

configure_logging(settings.log_level, json_logs=settings.log_json)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    site = get_site_config()
    logger.info(
        "Starting Storefront API",
        version=settings.api_version,
        debug=settings.debug,
        site=site.name,
        base_url=site.base_url,
    )

    yield

    # Shutdown
    logger.info("Shutting down Storefront API")
    await engine.dispose()


app = FastAPI(
    title="Storefront API",
    description="Read-only catalog pages for an industrial-parts dealer",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(pages_router)
app.include_router(brands_router)
app.include_router(products_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        return error_response(
            request,
            exc.status_code,
            detail.get("error_code", "ERROR"),
            detail.get("message", str(detail)),
            detail.get("details"),
        )
    return error_response(request, exc.status_code, "ERROR", str(detail))
