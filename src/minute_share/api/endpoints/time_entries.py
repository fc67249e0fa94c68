"""Time entry endpoints.

This module provides CRUD operations for daily time entries. The total
minutes of an entry are always derived by the repository; callers cannot
set them.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status  # type: ignore[import-untyped]

from minute_share.api.dependencies import get_repository
from minute_share.api.models import (
    CreateTimeEntryRequest,
    MessageResponse,
    TimeEntryResponse,
    UpdateTimeEntryRequest,
)
from minute_share.core.repository import MemoryRepository

logger = logging.getLogger(__name__)

router = APIRouter()

ENTRY_NOT_FOUND = "Time entry not found"


@router.get("", response_model=list[TimeEntryResponse])
async def list_time_entries(
    repository: MemoryRepository = Depends(get_repository),
) -> list[TimeEntryResponse]:
    """List all time entries ordered by date.

    Args:
        repository: Repository (injected)

    Returns:
        Entries in ascending date order

    Example:
        >>> GET /time-entries
        [
            {
                "id": "uuid",
                "date": "2024-01-01",
                "nafees": 30,
                "waqas": 20,
                "cheetan": 0,
                "nadeem": 0,
                "totalMinutes": 50
            }
        ]
    """
    return [TimeEntryResponse.from_entry(e) for e in repository.list_entries()]


@router.post("", response_model=TimeEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_time_entry(
    request: CreateTimeEntryRequest,
    repository: MemoryRepository = Depends(get_repository),
) -> TimeEntryResponse:
    """Create a time entry.

    Args:
        request: Create entry request
        repository: Repository (injected)

    Returns:
        Created entry with its generated ID and total

    Example:
        >>> POST /time-entries
        {
            "date": "2024-01-01",
            "nafees": 30,
            "waqas": 20
        }
    """
    entry = repository.create_entry(request.to_fields())
    logger.info("Created time entry %s for %s", entry.id, entry.date)
    return TimeEntryResponse.from_entry(entry)


@router.put("/{entry_id}", response_model=TimeEntryResponse)
async def update_time_entry(
    entry_id: str,
    request: UpdateTimeEntryRequest,
    repository: MemoryRepository = Depends(get_repository),
) -> TimeEntryResponse:
    """Update an existing time entry.

    Only the supplied fields change; the total is recomputed afterwards.

    Args:
        entry_id: Entry identifier
        request: Update entry request
        repository: Repository (injected)

    Returns:
        Updated entry

    Raises:
        HTTPException: If entry not found

    Example:
        >>> PUT /time-entries/{uuid}
        {
            "cheetan": 10
        }
    """
    entry = repository.update_entry(entry_id, request.to_patch())
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ENTRY_NOT_FOUND)
    return TimeEntryResponse.from_entry(entry)


@router.delete("/{entry_id}", response_model=MessageResponse)
async def delete_time_entry(
    entry_id: str,
    repository: MemoryRepository = Depends(get_repository),
) -> MessageResponse:
    """Delete a time entry.

    Args:
        entry_id: Entry identifier
        repository: Repository (injected)

    Returns:
        Confirmation message

    Raises:
        HTTPException: If entry not found

    Example:
        >>> DELETE /time-entries/{uuid}
    """
    if not repository.delete_entry(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ENTRY_NOT_FOUND)
    logger.info("Deleted time entry %s", entry_id)
    return MessageResponse(message="Time entry deleted successfully")
