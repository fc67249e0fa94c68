"""API endpoints.

This package contains all API endpoint routers organized by resource type.
Each module defines a FastAPI router that is included in the main application.

Available routers:
- system: Health check
- time_entries: Time entry CRUD
- settings: Settings singleton
- summary: Totals and per-minute rate
"""

__all__ = ["system", "time_entries", "settings", "summary"]

from minute_share.api.endpoints import settings, summary, system, time_entries  # noqa: F401
