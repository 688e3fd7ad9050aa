"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, penalcalc.toml only contains
overrides. An absent file is equivalent to an empty one.
"""

from __future__ import annotations

from pydantic import BaseModel

from penalcalc.domain.types import PenalMode


class CalculationConfig(BaseModel):
    """[calculation] section."""

    model_config = {"frozen": True}

    default_mode: PenalMode = PenalMode.SUBTRACAO
    default_fraction: str = "1/6"


class FineConfig(BaseModel):
    """[fine] section."""

    model_config = {"frozen": True}

    default_fraction: str = "1/30"
