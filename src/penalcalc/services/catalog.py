"""CatalogService — read-only views of the fraction and wage tables."""

from __future__ import annotations

from penalcalc.domain.catalogs import (
    EXECUTION_FRACTIONS,
    FINE_FRACTIONS,
    MINIMUM_WAGE_HISTORY,
)
from penalcalc.domain.types import FractionKind
from penalcalc.services.base import BaseService
from penalcalc.services.result import ServiceResult

_CATALOGS = {
    FractionKind.EXECUTION: EXECUTION_FRACTIONS,
    FractionKind.FINE: FINE_FRACTIONS,
}


class CatalogService(BaseService):
    """Lists the legally recognized fractions and minimum wages."""

    def fractions(self, kind: str = FractionKind.EXECUTION) -> ServiceResult:
        op = "fractions"
        try:
            catalog = _CATALOGS[FractionKind(kind)]
        except ValueError:
            return self._failure(op, "UNKNOWN_CATALOG", f"Unknown fraction catalog: {kind!r}")
        items = [
            {"key": option.key, "label": option.label, "value": str(option.value)}
            for option in catalog
        ]
        return ServiceResult(ok=True, op=op, data={"kind": str(kind), "items": items})

    def minimum_wages(self) -> ServiceResult:
        items = [wage.model_dump(mode="json") for wage in MINIMUM_WAGE_HISTORY]
        return ServiceResult(ok=True, op="minimum_wages", data={"items": items})
