"""DosimetryService — three-phase sentence fixing with memorial."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from penalcalc.domain.catalogs import EXECUTION_FRACTIONS
from penalcalc.domain.dosimetry import (
    DosimetryPhase,
    OperationSpec,
    calculate_dosimetry,
    clamped_operations,
)
from penalcalc.domain.durations import Duration, to_days
from penalcalc.domain.parsing import InvalidDurationError, parse_operation
from penalcalc.domain.report import format_duration, generate_dosimetry_report
from penalcalc.services.base import BaseService
from penalcalc.services.result import ServiceResult

logger = structlog.get_logger(__name__)


def _phase_payload(phase: DosimetryPhase) -> dict[str, Any]:
    return {
        "base": phase.base.model_dump(),
        "result": phase.result.model_dump(),
        "result_days": to_days(phase.result),
        "operations": [op.model_dump(mode="json") for op in phase.operations],
    }


class DosimetryService(BaseService):
    """Runs the base → aggravating/mitigating → final adjustment phases."""

    def dosimetry(
        self,
        base: str | Duration,
        *,
        phase2: Sequence[str | OperationSpec] = (),
        phase3: Sequence[str | OperationSpec] = (),
    ) -> ServiceResult:
        """Fix a sentence from *base* through the phase 2 and 3 operations.

        Operations are given as ``OperationSpec`` or as
        ``"type:target:fraction[:name]"`` strings and run in list order.
        """
        op = "dosimetry"
        try:
            base_penalty = self._duration(base)
        except InvalidDurationError as exc:
            return self._failure(op, "INVALID_DURATION", str(exc))

        try:
            phase2_specs = [self._operation(o, f"p2-{i}") for i, o in enumerate(phase2, 1)]
            phase3_specs = [self._operation(o, f"p3-{i}") for i, o in enumerate(phase3, 1)]
        except KeyError as exc:
            return self._failure(op, "UNKNOWN_FRACTION", exc.args[0])
        except ValueError as exc:
            return self._failure(op, "INVALID_OPERATION", str(exc))

        state = calculate_dosimetry(base_penalty, phase2_specs, phase3_specs)

        warnings: list[str] = []
        for number, phase in ((2, state.phase2), (3, state.phase3)):
            for clamped in clamped_operations(phase):
                label = clamped.name or clamped.fraction.label
                warnings.append(
                    f"Phase {number}: decrease '{label}' ({format_duration(clamped.result)})"
                    " exceeded the running total and was clamped at zero"
                )

        logger.debug(
            "dosimetry.calculated",
            base_days=to_days(base_penalty),
            phase2_ops=len(phase2_specs),
            phase3_ops=len(phase3_specs),
            final_days=to_days(state.final),
            clamped=len(warnings),
        )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "phase1": state.phase1.model_dump(),
                "phase2": _phase_payload(state.phase2),
                "phase3": _phase_payload(state.phase3),
                "final": state.final.model_dump(),
                "final_days": to_days(state.final),
                "report": generate_dosimetry_report(state),
            },
            warnings=warnings,
        )

    @staticmethod
    def _operation(value: str | OperationSpec, op_id: str) -> OperationSpec:
        if isinstance(value, OperationSpec):
            return value
        return parse_operation(value, EXECUTION_FRACTIONS).model_copy(update={"id": op_id})
