"""In-memory repository for time entries and settings.

The repository is the only owner of stored records. Every read returns a
copy, so callers can never mutate the store through a returned object.
Nothing is persisted: a new repository starts empty with default settings.
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Optional

from minute_share.core.models import (
    DEFAULT_BASE_AMOUNT,
    ENTRY_FIELDS,
    PERSON_FIELDS,
    SETTINGS_FIELDS,
    Settings,
    TimeEntry,
)

logger = logging.getLogger(__name__)


def parse_entry_date(value: str) -> Optional[datetime]:
    """Parse an entry date for ordering.

    Args:
        value: Date string as supplied by the caller

    Returns:
        Naive UTC datetime, or None if the string is not ISO-8601

    Example:
        >>> parse_entry_date("2024-01-15")
        datetime.datetime(2024, 1, 15, 0, 0)
        >>> parse_entry_date("yesterday") is None
        True
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError):
        # Offsets can push dates like 0001-01-01 outside the datetime range
        return None
    return parsed


def _date_sort_key(entry: TimeEntry) -> tuple[int, datetime]:
    parsed = parse_entry_date(entry.date)
    if parsed is None:
        # Unparseable dates go last
        return (1, datetime.min)
    return (0, parsed)


class MemoryRepository:
    """Process-local store for time entries and the settings singleton."""

    def __init__(self, default_base_amount: float = DEFAULT_BASE_AMOUNT):
        """Initialize an empty repository.

        Args:
            default_base_amount: Base amount of the initial settings record
        """
        self._entries: dict[str, TimeEntry] = {}
        self._settings = Settings(base_amount=default_base_amount)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Time entries
    # ------------------------------------------------------------------

    def list_entries(self) -> list[TimeEntry]:
        """Get all entries ordered ascending by date.

        Entries with equal dates keep their insertion order.
        """
        with self._lock:
            entries = [replace(e) for e in self._entries.values()]
        return sorted(entries, key=_date_sort_key)

    def count_entries(self) -> int:
        """Get the number of stored entries."""
        with self._lock:
            return len(self._entries)

    def get_entry(self, entry_id: str) -> Optional[TimeEntry]:
        """Get an entry by ID.

        Args:
            entry_id: Entry identifier

        Returns:
            Copy of the entry, or None if not found
        """
        with self._lock:
            entry = self._entries.get(entry_id)
            return replace(entry) if entry else None

    def create_entry(self, fields: dict[str, Any]) -> TimeEntry:
        """Create and store a new entry.

        Args:
            fields: Entry fields; ``date`` is required, missing person
                fields default to 0 and unknown keys are ignored

        Returns:
            The stored entry with its generated ID
        """
        values = {key: fields[key] for key in ENTRY_FIELDS if fields.get(key) is not None}
        for person in PERSON_FIELDS:
            values.setdefault(person, 0)
        entry = TimeEntry(**values)

        with self._lock:
            self._entries[entry.id] = entry
            logger.debug("Created entry %s (%d minutes)", entry.id, entry.total_minutes)
            return replace(entry)

    def update_entry(self, entry_id: str, patch: dict[str, Any]) -> Optional[TimeEntry]:
        """Merge a partial update into an existing entry.

        Supplied fields replace the stored values; everything else is kept.
        The total is recomputed from the merged person fields.

        Args:
            entry_id: Entry identifier
            patch: Fields to change; ``None`` values and unknown keys are ignored

        Returns:
            The updated entry, or None if no entry has this ID
        """
        changes = {key: patch[key] for key in ENTRY_FIELDS if patch.get(key) is not None}

        with self._lock:
            existing = self._entries.get(entry_id)
            if existing is None:
                return None
            updated = replace(existing, **changes)
            self._entries[entry_id] = updated
            logger.debug("Updated entry %s: %s", entry_id, sorted(changes))
            return replace(updated)

    def delete_entry(self, entry_id: str) -> bool:
        """Delete an entry.

        Args:
            entry_id: Entry identifier

        Returns:
            True if an entry was removed, False if none had this ID
        """
        with self._lock:
            removed = self._entries.pop(entry_id, None)
        if removed is not None:
            logger.debug("Deleted entry %s", entry_id)
        return removed is not None

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def get_settings(self) -> Settings:
        """Get the settings singleton."""
        with self._lock:
            return replace(self._settings)

    def update_settings(self, patch: dict[str, Any]) -> Settings:
        """Merge a partial update into the settings singleton.

        Args:
            patch: Fields to change; ``None`` values and unknown keys are ignored

        Returns:
            The updated settings
        """
        changes = {key: patch[key] for key in SETTINGS_FIELDS if patch.get(key) is not None}

        with self._lock:
            self._settings = replace(self._settings, **changes)
            logger.debug("Updated settings: %s", sorted(changes))
            return replace(self._settings)
