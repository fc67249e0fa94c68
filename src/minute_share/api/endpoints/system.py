"""System endpoints for health checks."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends  # type: ignore[import-untyped]

from minute_share import __version__
from minute_share.api.dependencies import get_repository
from minute_share.api.models import HealthResponse
from minute_share.core.repository import MemoryRepository

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    repository: MemoryRepository = Depends(get_repository),
) -> HealthResponse:
    """Health check endpoint.

    Returns:
        Health status information

    Note:
        Use this for monitoring and load balancer health checks. The entry
        count drops to 0 whenever the process restarts.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        entries=repository.count_entries(),
    )
