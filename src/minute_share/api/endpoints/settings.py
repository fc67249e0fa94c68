"""Settings endpoints.

There is exactly one settings record; it can be read and partially
updated but never created or deleted.
"""

from fastapi import APIRouter, Depends  # type: ignore[import-untyped]

from minute_share.api.dependencies import get_repository
from minute_share.api.models import SettingsResponse, UpdateSettingsRequest
from minute_share.core.repository import MemoryRepository

router = APIRouter()


@router.get("", response_model=SettingsResponse)
async def get_settings(
    repository: MemoryRepository = Depends(get_repository),
) -> SettingsResponse:
    """Get the settings record.

    Example:
        >>> GET /settings
        {
            "id": "uuid",
            "baseAmount": 10000.0
        }
    """
    return SettingsResponse.from_settings(repository.get_settings())


@router.put("", response_model=SettingsResponse)
async def update_settings(
    request: UpdateSettingsRequest,
    repository: MemoryRepository = Depends(get_repository),
) -> SettingsResponse:
    """Update the settings record.

    Args:
        request: Fields to change; omitted fields are kept
        repository: Repository (injected)

    Returns:
        Updated settings

    Example:
        >>> PUT /settings
        {
            "baseAmount": 5000
        }
    """
    return SettingsResponse.from_settings(repository.update_settings(request.to_patch()))
