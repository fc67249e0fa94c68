"""REST API for Minute Share.

This module provides a FastAPI-based REST API over the in-memory minute
ledger. All endpoints accept and return JSON and send permissive CORS
headers so a browser front end on another origin can call them.

Key features:
- CRUD operations for time entries
- Settings singleton holding the base amount
- Rate summary derived from all entries
- OpenAPI documentation

Usage:
    # Start server
    minute-share serve

    # Access API docs
    http://localhost:8000/docs
"""

__all__ = ["create_app", "run_server"]

from minute_share.api.server import create_app, run_server  # noqa: F401
