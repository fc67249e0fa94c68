"""Pydantic models for API requests and responses.

This module defines the data models used for API requests and responses.
JSON keys are camelCase (``totalMinutes``, ``baseAmount``); attributes are
snake_case.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field  # type: ignore[import-untyped]
from pydantic.alias_generators import to_camel  # type: ignore[import-untyped]

# ============================================================================
# Response Models
# ============================================================================


class TimeEntryResponse(BaseModel):
    """Response model for time entry."""

    id: str
    date: str
    nafees: int
    waqas: int
    cheetan: int
    nadeem: int
    total_minutes: int

    class Config:
        """Pydantic configuration."""

        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

    @classmethod
    def from_entry(cls, entry):  # type: ignore[no-untyped-def]
        """Create response from TimeEntry model.

        Args:
            entry: TimeEntry instance from core.models

        Returns:
            TimeEntryResponse instance
        """
        return cls(
            id=entry.id,
            date=entry.date,
            nafees=entry.nafees,
            waqas=entry.waqas,
            cheetan=entry.cheetan,
            nadeem=entry.nadeem,
            total_minutes=entry.total_minutes,
        )


class SettingsResponse(BaseModel):
    """Response model for the settings singleton."""

    id: str
    base_amount: float

    class Config:
        """Pydantic configuration."""

        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

    @classmethod
    def from_settings(cls, settings):  # type: ignore[no-untyped-def]
        """Create response from Settings model."""
        return cls(id=settings.id, base_amount=settings.base_amount)


class SummaryResponse(BaseModel):
    """Response model for the rate summary."""

    base_amount: float
    total_minutes: int
    total_hours: float
    final_rate: float = Field(..., description="Base amount per minute, 3 decimals")
    hourly_rate: int
    person_minutes: dict[str, int]
    person_rates: dict[str, int]
    person_prices: dict[str, int]

    class Config:
        """Pydantic configuration."""

        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_summary(cls, summary):  # type: ignore[no-untyped-def]
        """Create response from RateSummary."""
        return cls(
            base_amount=summary.base_amount,
            total_minutes=summary.total_minutes,
            total_hours=summary.total_hours,
            final_rate=summary.final_rate,
            hourly_rate=summary.hourly_rate,
            person_minutes=summary.person_minutes,
            person_rates=summary.person_rates,
            person_prices=summary.person_prices,
        )


class MessageResponse(BaseModel):
    """Response model for confirmations."""

    message: str


# ============================================================================
# Request Models
# ============================================================================


class CreateTimeEntryRequest(BaseModel):
    """Request model for creating a time entry.

    ``id`` and ``totalMinutes`` are not accepted from callers; unknown keys
    are dropped.
    """

    date: str = Field(..., min_length=1, description="Calendar date, e.g. 2024-01-15")
    nafees: int = Field(0, ge=0, strict=True, description="Minutes worked by Nafees")
    waqas: int = Field(0, ge=0, strict=True, description="Minutes worked by Waqas")
    cheetan: int = Field(0, ge=0, strict=True, description="Minutes worked by Cheetan")
    nadeem: int = Field(0, ge=0, strict=True, description="Minutes worked by Nadeem")

    def to_fields(self) -> dict[str, Any]:
        """Get the fields to store."""
        return self.model_dump()


class UpdateTimeEntryRequest(BaseModel):
    """Request model for partially updating a time entry.

    Omitted or null fields keep their stored values.
    """

    date: Optional[str] = Field(None, min_length=1)
    nafees: Optional[int] = Field(None, ge=0, strict=True)
    waqas: Optional[int] = Field(None, ge=0, strict=True)
    cheetan: Optional[int] = Field(None, ge=0, strict=True)
    nadeem: Optional[int] = Field(None, ge=0, strict=True)

    def to_patch(self) -> dict[str, Any]:
        """Get only the fields the caller supplied."""
        return self.model_dump(exclude_none=True)


class UpdateSettingsRequest(BaseModel):
    """Request model for updating settings."""

    base_amount: Optional[float] = Field(None, ge=0, strict=True, allow_inf_nan=False)

    class Config:
        """Pydantic configuration."""

        alias_generator = to_camel
        populate_by_name = True

    def to_patch(self) -> dict[str, Any]:
        """Get only the fields the caller supplied."""
        return self.model_dump(exclude_none=True)


# ============================================================================
# System Models
# ============================================================================


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    timestamp: datetime = Field(..., description="Current server time")
    version: str = Field(..., description="API version")
    entries: int = Field(..., description="Number of stored time entries")


class ErrorResponse(BaseModel):
    """Response model for errors."""

    message: str = Field(..., description="Error message")
    errors: Optional[list[dict[str, Any]]] = Field(None, description="Per-field validation errors")
