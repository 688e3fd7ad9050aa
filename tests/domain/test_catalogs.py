"""Tests for the fraction and minimum-wage catalogs."""

from datetime import date, timedelta
from decimal import Decimal
from fractions import Fraction

import pytest

from penalcalc.domain.catalogs import (
    EXECUTION_FRACTIONS,
    FINE_FRACTIONS,
    MINIMUM_WAGE_HISTORY,
    FractionOption,
    find_fraction,
)


class TestFractionCatalogs:
    @pytest.mark.parametrize("catalog", [EXECUTION_FRACTIONS, FINE_FRACTIONS])
    def test_keys_are_unique(self, catalog: tuple[FractionOption, ...]) -> None:
        keys = [option.key for option in catalog]
        assert len(keys) == len(set(keys))

    def test_execution_values(self) -> None:
        values = {option.key: option.value for option in EXECUTION_FRACTIONS}
        assert values["1/1"] == 1
        assert values["1/3"] == Fraction(1, 3)
        assert values["16%"] == Fraction(4, 25)
        assert values["70%"] == Fraction(7, 10)

    def test_fine_values_may_exceed_one(self) -> None:
        assert find_fraction("5", FINE_FRACTIONS).value == 5
        assert find_fraction("1/30", FINE_FRACTIONS).label == "1/30 (Mínimo Legal)"

    def test_frozen(self) -> None:
        with pytest.raises(Exception):
            EXECUTION_FRACTIONS[0].label = "x"  # type: ignore[misc]


class TestFindFraction:
    def test_exact_label(self) -> None:
        option = find_fraction("30% (Reincidente não hediondo)", EXECUTION_FRACTIONS)
        assert option.value == Fraction(3, 10)

    def test_leading_token(self) -> None:
        assert find_fraction("60%", EXECUTION_FRACTIONS).label == "60% (Reincidente hediondo)"

    def test_strips_whitespace(self) -> None:
        assert find_fraction("  1/6 ", EXECUTION_FRACTIONS).value == Fraction(1, 6)

    def test_same_key_differs_by_catalog(self) -> None:
        assert find_fraction("1/5", EXECUTION_FRACTIONS).label == "1/5"
        assert find_fraction("2", FINE_FRACTIONS).label == "2 vezes"

    def test_unknown_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="Unknown fraction"):
            find_fraction("7/8", EXECUTION_FRACTIONS)


class TestMinimumWageHistory:
    def test_newest_first_and_open_ended(self) -> None:
        newest = MINIMUM_WAGE_HISTORY[0]
        assert newest.end is None
        assert newest.value == Decimal("1412.00")

    def test_periods_are_contiguous(self) -> None:
        for newer, older in zip(MINIMUM_WAGE_HISTORY, MINIMUM_WAGE_HISTORY[1:], strict=False):
            assert older.end is not None
            assert older.end + timedelta(days=1) == newer.start

    def test_oldest_period(self) -> None:
        oldest = MINIMUM_WAGE_HISTORY[-1]
        assert oldest.start == date(2010, 1, 1)
        assert oldest.law == "Lei 12.255/2010"

    def test_covers(self) -> None:
        period = MINIMUM_WAGE_HISTORY[1]  # 2023-05-01 .. 2023-12-31
        assert period.covers(date(2023, 5, 1))
        assert period.covers(date(2023, 12, 31))
        assert not period.covers(date(2024, 1, 1))
        assert not period.covers(date(2023, 4, 30))
