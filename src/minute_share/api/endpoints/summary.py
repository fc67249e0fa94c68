"""Summary endpoint with totals and the per-minute rate."""

from fastapi import APIRouter, Depends  # type: ignore[import-untyped]

from minute_share.api.dependencies import get_repository
from minute_share.api.models import SummaryResponse
from minute_share.core.calculations import summarize
from minute_share.core.repository import MemoryRepository

router = APIRouter()


@router.get("", response_model=SummaryResponse)
async def get_summary(
    repository: MemoryRepository = Depends(get_repository),
) -> SummaryResponse:
    """Split the base amount across all recorded minutes.

    Example:
        >>> GET /summary
        {
            "baseAmount": 10000.0,
            "totalMinutes": 100,
            "totalHours": 1.7,
            "finalRate": 100.0,
            "hourlyRate": 6000,
            "personMinutes": {"nafees": 60, "waqas": 40, "cheetan": 0, "nadeem": 0},
            "personRates": {"nafees": 167, "waqas": 250, "cheetan": 0, "nadeem": 0},
            "personPrices": {"nafees": 6000, "waqas": 4000, "cheetan": 0, "nadeem": 0}
        }
    """
    settings = repository.get_settings()
    summary = summarize(repository.list_entries(), settings.base_amount)
    return SummaryResponse.from_summary(summary)
