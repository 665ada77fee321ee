"""Unit tests for money arithmetic"""

import pytest
from decimal import Decimal
from orderdesk.domain.line_item import LineItem
from orderdesk.domain.money import (
    compute_totals,
    display_tax_rate,
    line_total,
    round_money,
    to_decimal,
)


class TestComputeTotals:
    """Test subtotal, tax and total computation"""

    def test_single_widget_line(self):
        """
        Given: 2 widgets at 10.00 and a 20% tax rate
        When: compute_totals is called
        Then: subtotal 20.00, tax 4.00, total 24.00
        """
        # Arrange
        items = [LineItem.priced("Widget", Decimal("2"), Decimal("10.00"))]

        # Act
        totals = compute_totals(items, Decimal("0.2"))

        # Assert
        assert totals.subtotal == Decimal("20.00")
        assert totals.tax_amount == Decimal("4.00")
        assert totals.total_amount == Decimal("24.00")

    def test_empty_items_give_zero_totals(self):
        """Test no items yields 0 / 0 / 0 whatever the rate"""
        # Act
        totals = compute_totals([], Decimal("0.2"))

        # Assert
        assert totals.subtotal == Decimal("0")
        assert totals.tax_amount == Decimal("0")
        assert totals.total_amount == Decimal("0")

    def test_total_is_rounded_sum_of_subtotal_and_tax(self):
        """Test total == round(subtotal + tax) and subtotal == round(sum q*p)"""
        # Arrange
        items = [
            {"quantity": "3", "unit_price": "19.99"},
            {"quantity": "1.5", "unit_price": "7.333"},
            {"quantity": "7", "unit_price": "0.01"},
        ]
        raw_subtotal = Decimal("3") * Decimal("19.99") + Decimal("1.5") * Decimal("7.333") + Decimal("0.07")

        # Act
        totals = compute_totals(items, Decimal("0.175"))

        # Assert
        assert totals.subtotal == round_money(raw_subtotal)
        assert totals.total_amount == round_money(totals.subtotal + totals.tax_amount)

    def test_tax_uses_unrounded_subtotal(self):
        """
        Given: A subtotal whose rounding would shift the tax by a cent
        When: compute_totals is called
        Then: Tax is computed from the exact subtotal
        """
        # Arrange - 0.125 * 1 -> subtotal rounds to 0.13
        items = [{"quantity": "1", "unit_price": "0.125"}]

        # Act
        totals = compute_totals(items, Decimal("100"))

        # Assert
        assert totals.subtotal == Decimal("0.13")
        assert totals.tax_amount == Decimal("12.50")
        assert totals.total_amount == Decimal("12.63")

    def test_zero_quantity_and_missing_price_contribute_nothing(self):
        """Test quantity 0 and a missing unit price add 0 without raising"""
        # Arrange
        items = [
            {"description": "Free sample", "quantity": 0, "unit_price": "99.00"},
            {"description": "Unpriced", "quantity": 4},
            {"description": "Paid", "quantity": 1, "unit_price": "5.00"},
        ]

        # Act
        totals = compute_totals(items, Decimal("0.2"))

        # Assert
        assert totals.subtotal == Decimal("5.00")
        assert totals.tax_amount == Decimal("1.00")
        assert totals.total_amount == Decimal("6.00")

    def test_garbage_values_are_treated_as_zero(self):
        """Test non-numeric and non-finite inputs do not raise"""
        # Arrange
        items = [
            {"quantity": "abc", "unit_price": "10"},
            {"quantity": float("nan"), "unit_price": "10"},
            {"quantity": "2", "unit_price": None},
        ]

        # Act
        totals = compute_totals(items, "not a rate")

        # Assert
        assert totals.subtotal == Decimal("0.00")
        assert totals.tax_amount == Decimal("0.00")
        assert totals.total_amount == Decimal("0.00")

    def test_float_inputs_do_not_leak_binary_error(self):
        """Test 0.1 * 3 computed from floats is 0.30"""
        # Act
        totals = compute_totals([{"quantity": 3, "unit_price": 0.1}], 0)

        # Assert
        assert totals.subtotal == Decimal("0.30")
        assert totals.total_amount == Decimal("0.30")


class TestRounding:
    """Test cent rounding"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2.345", "2.35"),
            ("2.344", "2.34"),
            ("0.005", "0.01"),
            ("-2.345", "-2.35"),
            ("10", "10.00"),
        ],
    )
    def test_round_half_up(self, value, expected):
        """Test halves round away from zero"""
        assert round_money(Decimal(value)) == Decimal(expected)

    @pytest.mark.parametrize("value", ["1.005", "3.14159", "0", "1234567.891"])
    def test_rounding_is_idempotent(self, value):
        """Test round(round(x)) == round(x)"""
        once = round_money(Decimal(value))
        assert round_money(once) == once

    def test_line_total(self):
        """Test quantity * unit price rounded to cents"""
        assert line_total(Decimal("3"), Decimal("3.333")) == Decimal("10.00")


class TestToDecimal:
    """Test loose amount coercion"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "0"),
            (True, "0"),
            ("", "0"),
            (" 12.50 ", "12.50"),
            (7, "7"),
            (0.1, "0.1"),
            (float("inf"), "0"),
            (object(), "0"),
        ],
    )
    def test_to_decimal(self, value, expected):
        assert to_decimal(value) == Decimal(expected)


class TestDisplayTaxRate:
    """Test tax rate display as percentage"""

    def test_fraction_is_scaled(self):
        assert display_tax_rate(Decimal("0.2")) == Decimal("20")

    def test_percentage_is_kept(self):
        assert display_tax_rate(Decimal("20")) == Decimal("20")

    def test_one_is_a_fraction(self):
        """Test a rate of exactly 1 means 100%"""
        assert display_tax_rate(Decimal("1")) == Decimal("100")
