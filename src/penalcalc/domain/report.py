"""Calculation memorials — fixed-format Portuguese reports.

The layout (headers, 40-dash separators, labels, trailing newlines) is a
contract with whoever prints or displays the text. Change it only
together with the tests that pin it.
"""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction

from pydantic import BaseModel

from penalcalc.domain.adjustment import subtract_duration
from penalcalc.domain.dosimetry import DosimetryPhase, DosimetryState
from penalcalc.domain.durations import Duration, from_days, to_days
from penalcalc.domain.types import OperationTarget, OperationType, PenalMode

SEPARATOR = "-" * 40

_MODE_TITLES: dict[str, str] = {
    PenalMode.SOMA: "Soma/Progressão",
    PenalMode.SUBTRACAO: "Remição/Detração",
}

_PHASE_TITLES: tuple[str, str, str] = (
    "1ª Fase - Pena Base",
    "2ª Fase - Agravantes e Atenuantes",
    "3ª Fase - Causas de Aumento e Diminuição",
)


class CalculationItem(BaseModel):
    """One entry of a batch report. ``id`` is opaque to the generator."""

    model_config = {"frozen": True}

    id: str
    base: Duration
    fraction_value: Fraction
    fraction_label: str
    result: Duration


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {plural if count > 1 else singular}"


def format_duration(d: Duration) -> str:
    """Human-readable duration, e.g. ``"1 ano, 4 meses"``.

    Zero components are skipped. The days clause is always emitted when
    nothing else was, so the zero duration reads ``"0 dia"``.
    """
    parts: list[str] = []
    if d.years > 0:
        parts.append(_plural(d.years, "ano", "anos"))
    if d.months > 0:
        parts.append(_plural(d.months, "mês", "meses"))
    if d.days > 0 or not parts:
        parts.append(_plural(d.days, "dia", "dias"))
    return ", ".join(parts)


def _header(title: str) -> list[str]:
    return [f"MEMÓRIA DE CÁLCULO - {title.upper()}", SEPARATOR]


def generate_memory_string(
    base: Duration,
    fraction_label: str,
    result: Duration,
    mode: PenalMode | str,
) -> str:
    """Memorial for a single fraction applied to a single base."""
    lines = _header(_MODE_TITLES[PenalMode(mode)])
    lines += [
        f"Pena Base: {format_duration(base)}",
        f"Fração Aplicada: {fraction_label}",
        SEPARATOR,
        f"Resultado: {format_duration(result)}",
    ]
    if mode == PenalMode.SUBTRACAO:
        remaining = subtract_duration(base, result)
        lines.append(f"Tempo Restante: {format_duration(remaining)}")
    return "\n".join(lines) + "\n"


def generate_report(items: Sequence[CalculationItem], mode: PenalMode | str) -> str:
    """Memorial for a batch of calculations plus aggregate totals.

    The remaining time comes from the aggregated totals, not from summing
    per-item remainders.
    """
    lines = _header(_MODE_TITLES[PenalMode(mode)])

    total_base_days = 0
    total_result_days = 0
    for index, item in enumerate(items, start=1):
        if index > 1:
            lines.append("")
        lines += [
            f"Cálculo {index}",
            f"Pena Base: {format_duration(item.base)}",
            f"Fração Aplicada: {item.fraction_label}",
            f"Resultado Parcial: {format_duration(item.result)}",
        ]
        total_base_days += to_days(item.base)
        total_result_days += to_days(item.result)

    total_base = from_days(total_base_days)
    total_result = from_days(total_result_days)

    lines.append(SEPARATOR)
    if len(items) > 1:
        lines.append(f"Pena Base Total: {format_duration(total_base)}")
    lines.append(f"Resultado Total: {format_duration(total_result)}")
    if mode == PenalMode.SUBTRACAO:
        remaining = subtract_duration(total_base, total_result)
        lines.append(f"Tempo Restante: {format_duration(remaining)}")
    return "\n".join(lines) + "\n"


def _phase_lines(number: int, phase: DosimetryPhase) -> list[str]:
    lines = [
        _PHASE_TITLES[number - 1].upper(),
        f"Pena Inicial: {format_duration(phase.base)}",
    ]
    if not phase.operations:
        lines.append("Nenhuma operação aplicada")
    for op in phase.operations:
        if op.type == OperationType.INCREASE:
            sign, default_name = "+", "Aumento"
        else:
            sign, default_name = "-", "Diminuição"
        reference = "pena base" if op.target == OperationTarget.BASE else "pena atual"
        lines.append(
            f"({sign}) {op.name or default_name}: {op.fraction.label} sobre a {reference}"
            f" = {format_duration(op.result)}"
        )
    lines.append(f"Resultado da {number}ª Fase: {format_duration(phase.result)}")
    return lines


def generate_dosimetry_report(state: DosimetryState) -> str:
    """Memorial for a three-phase dosimetry run."""
    lines = _header("Dosimetria")
    lines += [
        _PHASE_TITLES[0].upper(),
        f"Pena Base: {format_duration(state.phase1)}",
        SEPARATOR,
    ]
    lines += _phase_lines(2, state.phase2)
    lines.append(SEPARATOR)
    lines += _phase_lines(3, state.phase3)
    lines.append(SEPARATOR)
    lines.append(f"PENA DEFINITIVA: {format_duration(state.final)}")
    return "\n".join(lines) + "\n"
