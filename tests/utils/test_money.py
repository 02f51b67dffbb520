"""Tests for money utilities."""

from decimal import Decimal

import pytest

from freelance_flow.utils.money import format_amount, to_decimal


class TestToDecimal:
    """Test number coercion."""

    @pytest.mark.parametrize("value,expected", [
        (Decimal("12.50"), Decimal("12.50")),
        (80, Decimal("80")),
        (0.1, Decimal("0.1")),
        (" 7.25 ", Decimal("7.25")),
        ("-5", Decimal("-5")),
    ])
    def test_coerces_numbers(self, value, expected):
        """Test coercion of supported number types."""
        result = to_decimal(value)
        assert result == expected
        assert isinstance(result, Decimal)

    def test_float_uses_string_form(self):
        """Test that floats convert through their shortest repr."""
        assert to_decimal(0.1) != Decimal(0.1)
        assert str(to_decimal(19.99)) == "19.99"

    @pytest.mark.parametrize("value", [True, None, [1], {"a": 1}])
    def test_rejects_non_numbers(self, value):
        """Test that non-number types raise TypeError."""
        with pytest.raises(TypeError):
            to_decimal(value)

    @pytest.mark.parametrize("value", ["seventy", "", "NaN", "Infinity", float("inf"),
                                       Decimal("NaN")])
    def test_rejects_non_finite_values(self, value):
        """Test that unparseable and non-finite values raise ValueError."""
        with pytest.raises(ValueError):
            to_decimal(value)


class TestFormatAmount:
    """Test receipt amount formatting."""

    @pytest.mark.parametrize("amount,expected", [
        ("2500", "2500.00"),
        ("99.5", "99.50"),
        ("1000.0", "1000.00"),
        ("241.6425", "241.6425"),
        ("0.001", "0.001"),
        ("1E+3", "1000.00"),
        ("0", "0.00"),
    ])
    def test_at_least_two_places_never_rounded(self, amount, expected):
        """Test padding to two places without dropping digits."""
        assert format_amount(Decimal(amount)) == expected

    def test_wide_amount(self):
        """Test an amount wider than the default context precision."""
        amount = Decimal("123456789012345678901234567890.123")
        assert format_amount(amount) == "123456789012345678901234567890.123"
