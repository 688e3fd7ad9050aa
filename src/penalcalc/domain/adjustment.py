"""Proportional adjustments over penal durations.

Every operation goes through the scalar day count and back, so results
are always normalized and truncated at the day level.
"""

from __future__ import annotations

import math
from fractions import Fraction

from penalcalc.domain.durations import Duration, from_days, to_days


def apply_fraction(days: int, fraction: Fraction | float) -> int:
    """Floor of ``days * fraction``.

    Exact when *fraction* is a :class:`~fractions.Fraction`.
    """
    return math.floor(days * fraction)


def calculate_execution(base: Duration, fraction: Fraction | float) -> Duration:
    """Apply *fraction* to *base*. Fractions above 1 are not clamped."""
    return from_days(apply_fraction(to_days(base), fraction))


def subtract_duration(total: Duration, to_remove: Duration) -> Duration:
    """``total - to_remove``, clamped at zero."""
    return from_days(max(0, to_days(total) - to_days(to_remove)))


def add_durations(d1: Duration, d2: Duration) -> Duration:
    return from_days(to_days(d1) + to_days(d2))
