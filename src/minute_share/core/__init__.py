"""Core functionality: models, repository and rate calculations."""

from minute_share.core.calculations import RateSummary, summarize
from minute_share.core.models import Settings, TimeEntry
from minute_share.core.repository import MemoryRepository

__all__ = ["TimeEntry", "Settings", "MemoryRepository", "RateSummary", "summarize"]
