"""Coercion of raw user input into domain values.

The calculation core trusts its inputs. Everything typed by a user goes
through here first, so negative or malformed durations are rejected at
the boundary with :class:`InvalidDurationError`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from penalcalc.domain.catalogs import FractionOption, find_fraction
from penalcalc.domain.dosimetry import OperationSpec
from penalcalc.domain.durations import Duration
from penalcalc.domain.types import OperationTarget, OperationType

_COMPACT_DURATION = re.compile(
    r"^\s*(?:(?P<years>\d+)\s*a)?\s*(?:(?P<months>\d+)\s*m)?\s*(?:(?P<days>\d+)\s*d)?\s*$",
    re.IGNORECASE,
)

OPERATION_TYPE_ALIASES: dict[str, OperationType] = {
    "increase": OperationType.INCREASE,
    "aumento": OperationType.INCREASE,
    "+": OperationType.INCREASE,
    "decrease": OperationType.DECREASE,
    "diminuicao": OperationType.DECREASE,
    "-": OperationType.DECREASE,
}

OPERATION_TARGET_ALIASES: dict[str, OperationTarget] = {
    "base": OperationTarget.BASE,
    "current": OperationTarget.CURRENT,
    "atual": OperationTarget.CURRENT,
}


class InvalidDurationError(ValueError):
    """Raised when raw input cannot be coerced into a non-negative Duration."""


class DurationInput(BaseModel):
    """Lenient input schema: numeric strings accepted, missing parts are zero."""

    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)


def coerce_duration(raw: Mapping[str, Any]) -> Duration:
    """Validate a ``years``/``months``/``days`` mapping into a Duration.

    Blank values count as zero.
    """
    cleaned = {key: value for key, value in raw.items() if value not in (None, "")}
    try:
        parsed = DurationInput.model_validate(cleaned)
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
        msg = f"Invalid duration ({fields}): {dict(raw)!r}"
        raise InvalidDurationError(msg) from exc
    return Duration(years=parsed.years, months=parsed.months, days=parsed.days)


def parse_duration(text: str) -> Duration:
    """Parse the compact form ``"8a4m10d"`` (anos, meses, dias).

    Any subset of the three parts is accepted, in that order.

    Examples:
        >>> parse_duration("8a")
        Duration(years=8, months=0, days=0)
        >>> parse_duration("1a 2m 3d")
        Duration(years=1, months=2, days=3)
    """
    match = _COMPACT_DURATION.match(text)
    if match is None or not any(match.groupdict().values()):
        msg = f"Invalid duration: {text!r} (expected e.g. '8a4m10d')"
        raise InvalidDurationError(msg)
    return coerce_duration(match.groupdict())


def parse_operation(text: str, catalog: tuple[FractionOption, ...]) -> OperationSpec:
    """Parse ``"type:target:fraction[:name]"`` into an OperationSpec.

    Raises:
        ValueError: On a malformed operation string or unknown type/target.
        KeyError: If the fraction is not in *catalog*.
    """
    parts = text.split(":", 3)
    if len(parts) < 3:
        msg = f"Invalid operation: {text!r} (expected 'type:target:fraction[:name]')"
        raise ValueError(msg)

    raw_type, raw_target, raw_fraction = (p.strip() for p in parts[:3])
    op_type = OPERATION_TYPE_ALIASES.get(raw_type.lower())
    if op_type is None:
        msg = f"Unknown operation type: {raw_type!r}"
        raise ValueError(msg)
    target = OPERATION_TARGET_ALIASES.get(raw_target.lower())
    if target is None:
        msg = f"Unknown operation target: {raw_target!r}"
        raise ValueError(msg)

    name = parts[3].strip() if len(parts) == 4 else ""
    return OperationSpec(
        name=name,
        fraction=find_fraction(raw_fraction, catalog),
        type=op_type,
        target=target,
    )
