"""FineService — criminal fine from day-fines, date, and fraction."""

from __future__ import annotations

from datetime import date

import structlog

from penalcalc.domain.catalogs import FINE_FRACTIONS, find_fraction
from penalcalc.domain.fine import InvalidDateError, calculate_fine, get_minimum_wage
from penalcalc.services.base import BaseService
from penalcalc.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class FineService(BaseService):
    """Looks up the minimum wage in force and computes the fine."""

    def fine(
        self,
        days: int,
        offense_date: date | str,
        *,
        fraction: str | None = None,
    ) -> ServiceResult:
        """Compute ``days x wage x fraction`` for the wage in force on *offense_date*."""
        op = "fine"
        fraction_key = fraction or self._settings.fine.default_fraction

        if days < 0:
            return self._failure(op, "INVALID_DAYS", f"Day-fines must be non-negative: {days}")
        try:
            option = find_fraction(fraction_key, FINE_FRACTIONS)
        except KeyError as exc:
            return self._failure(op, "UNKNOWN_FRACTION", exc.args[0], fraction=fraction_key)
        try:
            wage = get_minimum_wage(offense_date)
        except InvalidDateError as exc:
            return self._failure(op, "INVALID_DATE", str(exc))
        if wage is None:
            return self._failure(
                op,
                "NO_MINIMUM_WAGE",
                f"No minimum wage on record for {offense_date}",
                date=str(offense_date),
            )

        amount = calculate_fine(days, wage.value, option.value)
        logger.debug("fine.calculated", days=days, wage=str(wage.value), amount=str(amount))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "days": days,
                "date": str(offense_date),
                "fraction": option.label,
                "minimum_wage": str(wage.value),
                "law": wage.law,
                "amount": str(amount),
            },
        )
