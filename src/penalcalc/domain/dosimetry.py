"""Three-phase dosimetry engine.

Phase 1 fixes the base penalty (identity, no operations).
Phase 2 applies aggravating and mitigating circumstances to it.
Phase 3 applies the causes of increase and decrease to Phase 2's result.

Within a phase operations run strictly in list order. An operation
targeting ``base`` is computed against the value the phase started with;
one targeting ``current`` is computed against the running total left by
the operations before it, so reordering changes the outcome.

INVARIANT: a decrease never takes the running total below zero. The
excess is silently discarded (one-way clamp, no error is raised).
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from penalcalc.domain.adjustment import apply_fraction
from penalcalc.domain.catalogs import FractionOption
from penalcalc.domain.durations import Duration, from_days, to_days
from penalcalc.domain.types import OperationTarget, OperationType


class OperationSpec(BaseModel):
    """An adjustment requested by the caller, before it is computed."""

    model_config = {"frozen": True}

    id: str = ""
    name: str
    fraction: FractionOption
    type: OperationType
    target: OperationTarget


class DosimetryOperation(OperationSpec):
    """A computed adjustment.

    Attributes:
        result: The delta this operation added or removed, never the total.
        total_after: Running phase total once this operation was applied.
    """

    result: Duration
    total_after: Duration


class DosimetryPhase(BaseModel):
    """Starting value, computed operations, and resulting value of a phase."""

    model_config = {"frozen": True}

    base: Duration
    operations: tuple[DosimetryOperation, ...] = ()
    result: Duration


class DosimetryState(BaseModel):
    """Outcome of a full three-phase run."""

    model_config = {"frozen": True}

    phase1: Duration
    phase2: DosimetryPhase
    phase3: DosimetryPhase

    @property
    def final(self) -> Duration:
        """The definitive penalty (Phase 3 result)."""
        return self.phase3.result


def run_phase(base: Duration, specs: Sequence[OperationSpec]) -> DosimetryPhase:
    """Thread a running total through *specs* in order."""
    current_days = to_days(base)
    phase_base_days = current_days

    operations: list[DosimetryOperation] = []
    for spec in specs:
        reference = phase_base_days if spec.target == OperationTarget.BASE else current_days
        amount_days = apply_fraction(reference, spec.fraction.value)

        if spec.type == OperationType.INCREASE:
            current_days += amount_days
        else:
            current_days = max(0, current_days - amount_days)

        operations.append(
            DosimetryOperation(
                **dict(spec),
                result=from_days(amount_days),
                total_after=from_days(current_days),
            )
        )

    return DosimetryPhase(
        base=base,
        operations=tuple(operations),
        result=from_days(current_days),
    )


def calculate_dosimetry(
    base_penalty: Duration,
    phase2_ops: Sequence[OperationSpec],
    phase3_ops: Sequence[OperationSpec],
) -> DosimetryState:
    """Run all three phases and return every intermediate value."""
    phase1 = base_penalty
    phase2 = run_phase(phase1, phase2_ops)
    phase3 = run_phase(phase2.result, phase3_ops)
    return DosimetryState(phase1=phase1, phase2=phase2, phase3=phase3)


def clamped_operations(phase: DosimetryPhase) -> list[DosimetryOperation]:
    """Decreases in *phase* whose delta exceeded the running total."""
    clamped: list[DosimetryOperation] = []
    previous_days = to_days(phase.base)
    for op in phase.operations:
        if op.type == OperationType.DECREASE and to_days(op.result) > previous_days:
            clamped.append(op)
        previous_days = to_days(op.total_after)
    return clamped
