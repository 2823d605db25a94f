"""API middleware for the Storefront API.

Every request gets a correlation ID. Errors that escape a route are
rendered as an ``ErrorResponse`` body: a ``DataAccessError`` that got
past the catalog service becomes a 503, anything else a 500.
"""

import time
from typing import Any, Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from storefront.api.schemas import ErrorDetail, ErrorResponse
from storefront.domain.exceptions import DataAccessError, StorefrontError

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def error_details(details: dict[str, Any] | list[Any] | None) -> list[ErrorDetail]:
    """Flatten error context into ``ErrorDetail`` entries.

    Dict context (as carried by ``StorefrontError.details``) maps each key
    to the detail's field. Lists are passed through as already-shaped
    entries.
    """
    if not details:
        return []
    if isinstance(details, dict):
        return [ErrorDetail(field=key, message=str(value)) for key, value in details.items()]
    return [ErrorDetail.model_validate(item) for item in details]


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: dict[str, Any] | list[Any] | None = None,
) -> JSONResponse:
    """Render an error body carrying the request's correlation ID."""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=error_details(details),
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a correlation ID to the request, its logs and its response.

    The client's ``X-Request-ID`` is reused when present.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                query=request.url.query or None,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id")


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn exceptions that escape a route into ``ErrorResponse`` bodies."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except DataAccessError as e:
            logger.warning(
                "Catalog store unavailable",
                path=request.url.path,
                operation=e.operation,
                error=e.message,
            )
            return error_response(
                request,
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "CATALOG_UNAVAILABLE",
                "The catalog is temporarily unavailable",
                e.details,
            )
        except StorefrontError as e:
            logger.exception("Storefront error", path=request.url.path, error=e.message)
            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                e.message,
                e.details,
            )
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An internal error occurred",
            )


def setup_middleware(app: FastAPI) -> None:
    """Install error handling inside request ID correlation.

    Middleware added last runs first, so the request ID is bound before
    any error body is rendered.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)
