"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from artmarket.domain.exceptions import ValidationError
from artmarket.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_rounds_to_cents(self):
        assert Money(Decimal("10.505")).amount == Decimal("10.51")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10) == Money.of("10.00")

    def test_invalid_amount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twenty")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_multiplication_by_quantity(self):
        assert Money.of("25.00") * 3 == Money.of("75.00")

    def test_total_of_nothing_is_zero(self):
        assert Money.total([]) == Money.zero()

    def test_total_sums_amounts(self):
        assert Money.total([Money.of("1.10"), Money.of("2.20")]) == Money.of("3.30")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)
