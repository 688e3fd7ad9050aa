"""ExecutionService — fractions applied to one or more sentences.

Pipeline: PARSE → LOOK UP FRACTION → CALCULATE → RENDER MEMORIAL → RESPOND
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from penalcalc.domain.adjustment import calculate_execution
from penalcalc.domain.catalogs import EXECUTION_FRACTIONS, find_fraction
from penalcalc.domain.durations import Duration, to_days
from penalcalc.domain.parsing import InvalidDurationError
from penalcalc.domain.report import CalculationItem, generate_memory_string, generate_report
from penalcalc.domain.types import PenalMode
from penalcalc.services.base import BaseService
from penalcalc.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class ExecutionService(BaseService):
    """Computes execution fractions (progression, remission, detraction)."""

    def execution(
        self,
        bases: Sequence[str | Duration],
        *,
        fraction: str | None = None,
        mode: str | None = None,
    ) -> ServiceResult:
        """Apply one catalog fraction to every base in *bases*.

        A single base produces the single-calculation memorial; several
        produce the batch report with aggregate totals.
        """
        op = "execution"
        cfg = self._settings.calculation
        fraction_key = fraction or cfg.default_fraction
        try:
            penal_mode = PenalMode(mode) if mode else cfg.default_mode
        except ValueError:
            return self._failure(op, "INVALID_MODE", f"Unknown mode: {mode!r}")

        if not bases:
            return self._failure(op, "INVALID_DURATION", "At least one base sentence is required")

        try:
            durations = [self._duration(b) for b in bases]
        except InvalidDurationError as exc:
            return self._failure(op, "INVALID_DURATION", str(exc))
        try:
            option = find_fraction(fraction_key, EXECUTION_FRACTIONS)
        except KeyError as exc:
            return self._failure(op, "UNKNOWN_FRACTION", exc.args[0], fraction=fraction_key)

        items = [
            CalculationItem(
                id=str(index),
                base=base,
                fraction_value=option.value,
                fraction_label=option.label,
                result=calculate_execution(base, option.value),
            )
            for index, base in enumerate(durations, start=1)
        ]

        if len(items) == 1:
            item = items[0]
            report = generate_memory_string(item.base, item.fraction_label, item.result, penal_mode)
        else:
            report = generate_report(items, penal_mode)

        total_base_days = sum(to_days(item.base) for item in items)
        total_result_days = sum(to_days(item.result) for item in items)
        logger.debug(
            "execution.calculated",
            items=len(items),
            fraction=option.label,
            mode=str(penal_mode),
            total_result_days=total_result_days,
        )

        data = {
            "mode": str(penal_mode),
            "fraction": option.label,
            "items": [item.model_dump(mode="json") for item in items],
            "total_base_days": total_base_days,
            "total_result_days": total_result_days,
            "report": report,
        }
        if penal_mode == PenalMode.SUBTRACAO:
            data["remaining_days"] = max(0, total_base_days - total_result_days)
        return ServiceResult(ok=True, op=op, data=data)
