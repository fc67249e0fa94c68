"""Rate calculations over recorded minutes.

The base amount is split across every recorded minute. Each person's price is
the final per-minute rate multiplied by that person's minutes.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from minute_share.core.models import PERSON_FIELDS, TimeEntry


def round_half_up(value: float, places: int = 0) -> float:
    """Round a number half away from zero.

    Python's round() uses banker's rounding, which would turn 2.5 into 2.

    Example:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(33.3335, 3)
        33.334
    """
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def per_minute_rate(base_amount: float, total_minutes: int) -> float:
    """Divide the base amount across all minutes (0.0 when nothing is recorded)."""
    if total_minutes <= 0:
        return 0.0
    return base_amount / total_minutes


@dataclass
class RateSummary:
    """Totals and derived rates for a set of entries.

    Attributes:
        base_amount: Amount being divided
        person_minutes: Minutes per person across all entries
        total_minutes: Sum of all person minutes
        final_rate: Base amount per minute, rounded to 3 decimals
        person_rates: Base amount divided by each person's own minutes
        person_prices: Final rate multiplied by each person's minutes
        total_hours: Total minutes in hours, rounded to 1 decimal
        hourly_rate: Final rate times 60, rounded to a whole number
    """

    base_amount: float
    person_minutes: dict[str, int] = field(default_factory=dict)
    total_minutes: int = 0
    final_rate: float = 0.0
    person_rates: dict[str, int] = field(default_factory=dict)
    person_prices: dict[str, int] = field(default_factory=dict)
    total_hours: float = 0.0
    hourly_rate: int = 0


def total_person_minutes(entries: Iterable[TimeEntry]) -> dict[str, int]:
    """Sum minutes per person across entries."""
    totals = {person: 0 for person in PERSON_FIELDS}
    for entry in entries:
        for person in PERSON_FIELDS:
            totals[person] += entry.minutes_for(person)
    return totals


def summarize(entries: Iterable[TimeEntry], base_amount: float) -> RateSummary:
    """Compute the rate summary for a set of entries.

    Args:
        entries: Entries to include
        base_amount: Amount to divide across all minutes

    Returns:
        RateSummary with totals, rates and prices

    Example:
        >>> entry = TimeEntry(date="2024-01-01", nafees=60, waqas=40)
        >>> summary = summarize([entry], 10000)
        >>> summary.final_rate, summary.person_prices["nafees"]
        (100.0, 6000)
    """
    person_minutes = total_person_minutes(entries)
    total_minutes = sum(person_minutes.values())
    rate = per_minute_rate(base_amount, total_minutes)

    person_rates = {
        person: int(round_half_up(base_amount / minutes)) if minutes > 0 else 0
        for person, minutes in person_minutes.items()
    }
    person_prices = {
        person: int(round_half_up(rate * minutes)) for person, minutes in person_minutes.items()
    }

    return RateSummary(
        base_amount=base_amount,
        person_minutes=person_minutes,
        total_minutes=total_minutes,
        final_rate=round_half_up(rate, 3),
        person_rates=person_rates,
        person_prices=person_prices,
        total_hours=round_half_up(total_minutes / 60, 1),
        hourly_rate=int(round_half_up(rate * 60)),
    )
