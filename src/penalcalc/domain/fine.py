"""Criminal fine (pena de multa) computation.

A fine is ``days x minimum wage x fraction``, where the minimum wage is
the one in force on the date of the offense.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction

from penalcalc.domain.catalogs import MINIMUM_WAGE_HISTORY, MinimumWage

CENTS = Decimal("0.01")


class InvalidDateError(ValueError):
    """Raised when a date string is not ISO ``YYYY-MM-DD``."""


def get_minimum_wage(
    day: date | str | None,
    history: tuple[MinimumWage, ...] = MINIMUM_WAGE_HISTORY,
) -> MinimumWage | None:
    """Return the minimum-wage period covering *day*, or None.

    Empty input and dates before the oldest period both return None.
    """
    if not day:
        return None
    if isinstance(day, str):
        try:
            day = date.fromisoformat(day)
        except ValueError as exc:
            msg = f"Invalid date: {day!r} (expected YYYY-MM-DD)"
            raise InvalidDateError(msg) from exc
    return next((wage for wage in history if wage.covers(day)), None)


def calculate_fine(days: int, wage: Decimal, fraction: Fraction) -> Decimal:
    """Fine amount in currency, rounded half-up to cents.

    The product is computed exactly before rounding.
    """
    exact = days * Fraction(wage) * fraction
    amount = Decimal(exact.numerator) / Decimal(exact.denominator)
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
