"""Duration model and the penal day-radix codec.

Penal time does not follow the calendar: a year is always 360 days and a
month always 30 days. Durations convert to a scalar day count and back
through this fixed radix.

INVARIANT: ``from_days`` reduces by the year first, then by the month.
Months therefore land in ``[0, 11]`` and days in ``[0, 29]`` without
any explicit cap.
"""

from __future__ import annotations

import math

from pydantic import BaseModel

PENAL_YEAR = 360
PENAL_MONTH = 30


class Duration(BaseModel):
    """A sentence length in years, months, and days."""

    model_config = {"frozen": True}

    years: int = 0
    months: int = 0
    days: int = 0


ZERO = Duration()


def to_days(d: Duration) -> int:
    """Total penal days in *d*. Components are not validated."""
    return d.years * PENAL_YEAR + d.months * PENAL_MONTH + d.days


def from_days(total: float) -> Duration:
    """Decompose a day count into a Duration.

    Negative totals clamp to zero and fractional totals are floored.
    """
    remainder = math.floor(max(0, total))

    years = remainder // PENAL_YEAR
    remainder %= PENAL_YEAR

    months = remainder // PENAL_MONTH
    days = remainder % PENAL_MONTH

    return Duration(years=years, months=months, days=days)
