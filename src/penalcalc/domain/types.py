"""Calculation modes and dosimetry operation enums."""

from __future__ import annotations

from enum import StrEnum


class PenalMode(StrEnum):
    """Whether a calculation adds to or removes from the sentence."""

    SOMA = "soma"
    SUBTRACAO = "subtracao"


class OperationType(StrEnum):
    """Direction of a dosimetry adjustment."""

    INCREASE = "increase"
    DECREASE = "decrease"


class OperationTarget(StrEnum):
    """Reference a dosimetry adjustment is computed against.

    ``BASE`` is the phase's starting value, frozen before any operation
    runs. ``CURRENT`` is the running total at that point in the sequence.
    """

    BASE = "base"
    CURRENT = "current"


class FractionKind(StrEnum):
    """Fraction catalogs available to callers."""

    EXECUTION = "execution"
    FINE = "fine"
