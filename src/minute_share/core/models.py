"""Core data models for the minute ledger."""

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

# People whose minutes are recorded on every entry, in display order
PERSON_FIELDS = ("nafees", "waqas", "cheetan", "nadeem")

# Fields a caller may supply when creating or patching an entry
ENTRY_FIELDS = ("date",) + PERSON_FIELDS

SETTINGS_FIELDS = ("base_amount",)

DEFAULT_BASE_AMOUNT = 10000.0


def _new_id() -> str:
    return str(uuid4())


@dataclass
class TimeEntry:
    """Minutes worked by each person on a given date.

    Attributes:
        date: Calendar date string supplied by the caller
        id: Unique identifier (UUID string), assigned at creation
        nafees: Minutes worked by Nafees
        waqas: Minutes worked by Waqas
        cheetan: Minutes worked by Cheetan
        nadeem: Minutes worked by Nadeem
    """

    date: str
    id: str = field(default_factory=_new_id)
    nafees: int = 0
    waqas: int = 0
    cheetan: int = 0
    nadeem: int = 0

    @property
    def total_minutes(self) -> int:
        """Sum of the four person fields."""
        return sum(self.minutes_for(person) for person in PERSON_FIELDS)

    def minutes_for(self, person: str) -> int:
        """Get minutes recorded for one person."""
        if person not in PERSON_FIELDS:
            raise ValueError(f"Unknown person: {person}")
        minutes: int = getattr(self, person)
        return minutes

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the wire (camelCase) field names."""
        return {
            "id": self.id,
            "date": self.date,
            "nafees": self.nafees,
            "waqas": self.waqas,
            "cheetan": self.cheetan,
            "nadeem": self.nadeem,
            "totalMinutes": self.total_minutes,
        }


@dataclass
class Settings:
    """Singleton settings record.

    Attributes:
        base_amount: Monetary total divided across all recorded minutes
        id: Unique identifier, generated once per repository
    """

    base_amount: float = DEFAULT_BASE_AMOUNT
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the wire (camelCase) field names."""
        return {"id": self.id, "baseAmount": self.base_amount}
