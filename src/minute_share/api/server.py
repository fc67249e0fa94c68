"""FastAPI application server.

This module contains the FastAPI application setup and server runner.
"""

import logging
from typing import Optional

from fastapi import FastAPI  # type: ignore[import-untyped]
from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

from minute_share import __version__
from minute_share.api.middleware import setup_middleware
from minute_share.core.config import ConfigManager
from minute_share.core.log import setup_logging
from minute_share.core.models import DEFAULT_BASE_AMOUNT
from minute_share.core.repository import MemoryRepository

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[ConfigManager] = None,
    repository: Optional[MemoryRepository] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Optional configuration manager (creates default if None)
        repository: Optional repository (creates an empty one if None)

    Returns:
        Configured FastAPI application instance

    Example:
        >>> app = create_app()
        >>> # Or with an explicit store, e.g. in tests
        >>> app = create_app(ConfigManager(path), MemoryRepository())
    """
    if config is None:
        config = ConfigManager()

    if repository is None:
        repository = MemoryRepository(
            default_base_amount=config.get("settings.default_base_amount", DEFAULT_BASE_AMOUNT)
        )

    app = FastAPI(
        title="Minute Share API",
        description="Daily work minutes for four people and the per-minute rate they imply",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Shared by every request through dependency injection
    app.state.config = config
    app.state.repository = repository

    setup_middleware(app, config)

    from minute_share.api.endpoints import settings, summary, system, time_entries

    app.include_router(system.router, tags=["system"])
    app.include_router(time_entries.router, prefix="/time-entries", tags=["time-entries"])
    app.include_router(settings.router, prefix="/settings", tags=["settings"])
    app.include_router(summary.router, prefix="/summary", tags=["summary"])

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        """Root endpoint with pointers to docs and health."""
        return JSONResponse(
            {
                "message": "Minute Share API",
                "version": __version__,
                "docs": "/docs",
                "health": "/health",
            }
        )

    return app


def run_server(
    host: str = "localhost",
    port: int = 8000,
    reload: bool = False,
    config: Optional[ConfigManager] = None,
) -> None:
    """Run the API server using Uvicorn.

    Args:
        host: Host address to bind to
        port: Port number to bind to
        reload: Enable auto-reload for development
        config: Optional configuration manager

    Note:
        This function blocks until the server is stopped. The store lives
        in process memory, so the server always runs a single worker and
        all data is lost when it stops.
    """
    import uvicorn  # type: ignore[import-untyped]

    if config is None:
        config = ConfigManager()

    setup_logging(config)

    uvicorn_options = {
        "host": host,
        "port": port,
        "log_level": config.get("api.advanced.log_level", "info"),
        "access_log": config.get("api.advanced.access_log", True),
        "workers": 1,
    }

    logger.info("Starting Minute Share API on %s:%d", host, port)

    if reload:
        # Reload needs an import string; the factory reads the default config file
        uvicorn.run(
            "minute_share.api.server:create_app",
            factory=True,
            reload=True,
            **uvicorn_options,
        )
    else:
        uvicorn.run(create_app(config), **uvicorn_options)
