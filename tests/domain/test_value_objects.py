"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from orderstore.domain.exceptions import (
    InvalidPriceError,
    InvalidQuantityError,
    ValidationError,
)
from orderstore.domain.model.value_objects import MAX_AMOUNT, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_factory_from_float_keeps_short_repr(self):
        assert Money.of(999.99).amount == Decimal("999.99")

    def test_zero_is_allowed(self):
        assert Money.of("0") == Money.zero()

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidPriceError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_invalid_price_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Money.of("-0.01")

    def test_garbage_rejected(self):
        with pytest.raises(InvalidPriceError, match="Invalid money amount"):
            Money.of("abc")

    def test_bool_rejected(self):
        with pytest.raises(InvalidPriceError):
            Money.of(True)

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidPriceError, match="finite"):
            Money.of(float("inf"))

    def test_trailing_zero_digits_are_whole_cents(self):
        assert Money.of("1.500") == Money.of("1.50")
        assert Money.of("1e2") == Money.of("100")

    def test_fraction_of_a_cent_rejected(self):
        with pytest.raises(InvalidPriceError, match="fractions of a cent"):
            Money.of("0.001")

    def test_upper_bound(self):
        assert Money.of("9999999999999.99").amount == MAX_AMOUNT
        with pytest.raises(InvalidPriceError, match="cannot exceed"):
            Money.of("10000000000000")

    def test_arithmetic_past_upper_bound_rejected(self):
        with pytest.raises(InvalidPriceError, match="cannot exceed"):
            Money(MAX_AMOUNT) + Money.of("0.01")

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_multiplication_by_int(self):
        result = Money.of("7.50") * 3
        assert result == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_decimal_sum_is_exact(self):
        total = Money.of(999.99) + Money.of(149.99) * 2
        assert total == Money.of("1299.97")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_float_conversion(self):
        assert float(Money.of("1299.97")) == 1299.97

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be an integer"):
            Quantity(2.5)

    def test_str(self):
        assert str(Quantity(7)) == "7"
