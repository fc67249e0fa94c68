"""Dependency injection for FastAPI endpoints.

The configuration and the repository are created once per application by
``create_app`` and kept on ``app.state``. These functions hand them to
endpoints via ``Depends``.
"""

from fastapi import Request  # type: ignore[import-untyped]

from minute_share.core.config import ConfigManager
from minute_share.core.repository import MemoryRepository


def get_config(request: Request) -> ConfigManager:
    """Get the application's configuration manager.

    Args:
        request: FastAPI Request object (injected)

    Returns:
        ConfigManager instance from app state
    """
    config: ConfigManager = request.app.state.config
    return config


def get_repository(request: Request) -> MemoryRepository:
    """Get the application's repository.

    Args:
        request: FastAPI Request object (injected)

    Returns:
        MemoryRepository shared by every request to this application
    """
    repository: MemoryRepository = request.app.state.repository
    return repository
