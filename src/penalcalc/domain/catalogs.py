"""Fixed catalogs: legally recognized fractions and minimum-wage history.

These tables are configuration data. Labels are reproduced verbatim in
reports and are never derived from the numeric value.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from fractions import Fraction

from pydantic import BaseModel


class FractionOption(BaseModel):
    """A catalog fraction: display label plus exact value."""

    model_config = {"frozen": True}

    label: str
    value: Fraction

    @property
    def key(self) -> str:
        """Leading token of the label (``"16%"``, ``"1/3"``, ``"2"``)."""
        return self.label.split(" ", 1)[0]


class MinimumWage(BaseModel):
    """One period of the national minimum wage."""

    model_config = {"frozen": True}

    start: date
    end: date | None = None
    value: Decimal
    law: str

    def covers(self, day: date) -> bool:
        """True if *day* falls inside this period (open end extends forever)."""
        return self.start <= day and (self.end is None or day <= self.end)


def _f(label: str, numerator: int, denominator: int = 1) -> FractionOption:
    return FractionOption(label=label, value=Fraction(numerator, denominator))


# Exact rationals: floor(360 x 70%) is 252, where float arithmetic gives 251.
EXECUTION_FRACTIONS: tuple[FractionOption, ...] = (
    _f("1/1 (Integral)", 1),
    _f("1/2", 1, 2),
    _f("1/3", 1, 3),
    _f("1/4", 1, 4),
    _f("1/5", 1, 5),
    _f("1/6", 1, 6),
    _f("2/3", 2, 3),
    _f("3/5", 3, 5),
    _f("16% (Crime Hediondo primário)", 16, 100),
    _f("25% (Não hediondo)", 25, 100),
    _f("30% (Reincidente não hediondo)", 30, 100),
    _f("40% (Hediondo primário)", 40, 100),
    _f("50% (Hediondo c/ resultado morte)", 50, 100),
    _f("60% (Reincidente hediondo)", 60, 100),
    _f("70% (Reincidente hediondo c/ morte)", 70, 100),
)

FINE_FRACTIONS: tuple[FractionOption, ...] = (
    _f("1/30 (Mínimo Legal)", 1, 30),
    _f("1/20", 1, 20),
    _f("1/10", 1, 10),
    _f("1/5", 1, 5),
    _f("1/3", 1, 3),
    _f("1/2", 1, 2),
    _f("1 (Integral)", 1),
    _f("2 vezes", 2),
    _f("3 vezes", 3),
    _f("5 vezes (Máximo Legal)", 5),
)


def _w(start: str, end: str | None, value: str, law: str) -> MinimumWage:
    return MinimumWage(
        start=date.fromisoformat(start),
        end=date.fromisoformat(end) if end else None,
        value=Decimal(value),
        law=law,
    )


# Newest first; lookups return the first period that covers the date.
MINIMUM_WAGE_HISTORY: tuple[MinimumWage, ...] = (
    _w("2024-01-01", None, "1412.00", "Decreto 11.864/2023"),
    _w("2023-05-01", "2023-12-31", "1320.00", "MP 1.172/2023"),
    _w("2023-01-01", "2023-04-30", "1302.00", "MP 1.143/2022"),
    _w("2022-01-01", "2022-12-31", "1212.00", "MP 1.091/2021"),
    _w("2021-01-01", "2021-12-31", "1100.00", "MP 1.021/2020"),
    _w("2020-02-01", "2020-12-31", "1045.00", "MP 919/2020"),
    _w("2020-01-01", "2020-01-31", "1039.00", "MP 916/2019"),
    _w("2019-01-01", "2019-12-31", "998.00", "Decreto 9.661/2019"),
    _w("2018-01-01", "2018-12-31", "954.00", "Decreto 9.255/2017"),
    _w("2017-01-01", "2017-12-31", "937.00", "Decreto 8.948/2016"),
    _w("2016-01-01", "2016-12-31", "880.00", "Decreto 8.618/2015"),
    _w("2015-01-01", "2015-12-31", "788.00", "Decreto 8.381/2014"),
    _w("2014-01-01", "2014-12-31", "724.00", "Decreto 8.166/2013"),
    _w("2013-01-01", "2013-12-31", "678.00", "Decreto 7.872/2012"),
    _w("2012-01-01", "2012-12-31", "622.00", "Decreto 7.655/2011"),
    _w("2011-03-01", "2011-12-31", "545.00", "Lei 12.382/2011"),
    _w("2011-01-01", "2011-02-28", "540.00", "MP 516/2010"),
    _w("2010-01-01", "2010-12-31", "510.00", "Lei 12.255/2010"),
)


def find_fraction(key: str, catalog: tuple[FractionOption, ...]) -> FractionOption:
    """Look up a catalog entry by full label or by its leading token.

    Raises:
        KeyError: If nothing in *catalog* matches *key*.
    """
    needle = key.strip()
    for option in catalog:
        if option.label == needle:
            return option
    for option in catalog:
        if option.key == needle:
            return option
    msg = f"Unknown fraction: {key!r}"
    raise KeyError(msg)
