"""Middleware and error handlers for the FastAPI application.

This module provides CORS, preflight handling, request logging and the
mapping from exceptions to JSON error responses.
"""

import logging
import time
from typing import Any

from fastapi import FastAPI, Request, status  # type: ignore[import-untyped]
from fastapi.exceptions import RequestValidationError  # type: ignore[import-untyped]
from fastapi.middleware.cors import CORSMiddleware  # type: ignore[import-untyped]
from fastapi.responses import JSONResponse, Response  # type: ignore[import-untyped]
from starlette.exceptions import HTTPException as StarletteHTTPException

from minute_share.api.models import ErrorResponse
from minute_share.core.config import ConfigManager

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type"]


def _allowed_origin(request: Request, origins: list[str]) -> str:
    if "*" in origins:
        return "*"
    origin = request.headers.get("origin", "")
    return origin if origin in origins else ""


def setup_cors(app: FastAPI, config: ConfigManager) -> None:
    """Configure CORS middleware.

    Args:
        app: FastAPI application instance
        config: Configuration manager

    Note:
        CORS is configured from the api.cors section in config.
        By default every origin is allowed.
    """
    if not config.get("api.cors.enabled", True):
        return

    origins = config.get("api.cors.origins", ["*"])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=False,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )


def setup_preflight(app: FastAPI, config: ConfigManager) -> None:
    """Answer every OPTIONS request with an empty 200 response.

    Must be installed after ``setup_cors`` so it runs first.

    Args:
        app: FastAPI application instance
        config: Configuration manager
    """
    cors_enabled = config.get("api.cors.enabled", True)
    origins = config.get("api.cors.origins", ["*"])

    @app.middleware("http")
    async def preflight(request: Request, call_next: Any) -> Response:
        if request.method != "OPTIONS":
            return await call_next(request)

        response = Response(status_code=status.HTTP_200_OK)
        allowed = _allowed_origin(request, origins) if cors_enabled else ""
        if allowed:
            response.headers["Access-Control-Allow-Origin"] = allowed
            response.headers["Access-Control-Allow-Methods"] = ", ".join(ALLOWED_METHODS)
            response.headers["Access-Control-Allow-Headers"] = ", ".join(ALLOWED_HEADERS)
        return response


def setup_request_logging(app: FastAPI) -> None:
    """Log one line per request with status and elapsed time."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Any) -> Response:
        started = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def _format_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    errors = []
    for error in exc.errors():
        # Drop the "body" prefix so the location reads as the field name
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append(
            {
                "field": ".".join(location),
                "message": error.get("msg", ""),
                "type": error.get("type", ""),
            }
        )
    return errors


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors (404, 405, ...) as ``{"message": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 with per-field details."""
    errors = _format_validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(message="Invalid data", errors=errors).model_dump(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer with a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message="Server error").model_dump(exclude_none=True),
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Unexpected errors are caught by a middleware that sits inside the CORS
    middleware, so 500 responses carry the same CORS headers as any other
    response. The ``Exception`` handler only covers failures outside it.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.middleware("http")
    async def catch_unexpected_errors(request: Request, call_next: Any) -> Response:
        try:
            response: Response = await call_next(request)
        except Exception as exc:
            return await unhandled_exception_handler(request, exc)
        return response


def setup_middleware(app: FastAPI, config: ConfigManager) -> None:
    """Set up all middleware for the application.

    Middleware added later wraps middleware added earlier, so the order
    below runs request logging first and error catching last.

    Args:
        app: FastAPI application instance
        config: Configuration manager

    Note:
        This function configures:
        - Custom error handlers
        - CORS middleware
        - OPTIONS preflight handling
        - Request logging
    """
    setup_error_handlers(app)
    setup_cors(app, config)
    setup_preflight(app, config)
    setup_request_logging(app)
