"""Tests for display formatting."""

from datetime import date

import pytest

from finplan.formatting import (
    format_currency,
    format_date,
    format_percent,
    group_indian,
)


class TestFormatCurrency:
    """Tests for whole-rupee currency strings."""

    @pytest.mark.parametrize("amount, expected", [
        (0, "₹0"),
        (999, "₹999"),
        (1000, "₹1,000"),
        (50000, "₹50,000"),
        (100000, "₹1,00,000"),
        (1234567, "₹12,34,567"),
        (123456789, "₹12,34,56,789"),
    ])
    def test_indian_grouping(self, amount, expected):
        assert format_currency(amount) == expected

    @pytest.mark.parametrize("amount, expected", [
        (2.5, "₹3"),
        (2.4, "₹2"),
        (1234567.891, "₹12,34,568"),
        (0.4, "₹0"),
    ])
    def test_rounds_to_whole_units(self, amount, expected):
        """Test rounding is half away from zero."""
        assert format_currency(amount) == expected

    def test_negative_amount(self):
        """Test the sign goes after the symbol."""
        assert format_currency(-1500.4) == "₹-1,500"

    def test_custom_symbol(self):
        assert format_currency(1500, symbol="$") == "$1,500"

    def test_symbol_from_settings(self, monkeypatch):
        monkeypatch.setenv("FINPLAN_FORMAT_CURRENCY_SYMBOL", "Rs.")
        assert format_currency(1500) == "Rs.1,500"


class TestGroupIndian:
    """Tests for digit grouping."""

    @pytest.mark.parametrize("digits, expected", [
        ("1", "1"),
        ("123", "123"),
        ("1234", "1,234"),
        ("12345", "12,345"),
        ("123456", "1,23,456"),
    ])
    def test_grouping(self, digits, expected):
        assert group_indian(digits) == expected


class TestFormatDate:
    """Tests for date display."""

    def test_iso_string(self):
        assert format_date("2024-01-15") == "Jan 15, 2024"

    def test_single_digit_day_has_no_padding(self):
        assert format_date(date(2024, 3, 5)) == "Mar 5, 2024"

    def test_unparseable_is_returned_unchanged(self):
        assert format_date("someday") == "someday"

    def test_custom_pattern(self):
        assert format_date("2024-01-15", pattern="%d/%m/%Y") == "15/01/2024"


class TestFormatPercent:
    """Tests for percentage display."""

    def test_one_decimal(self):
        assert format_percent(25) == "25.0%"
        assert format_percent(33.333) == "33.3%"

    def test_custom_digits(self):
        assert format_percent(60, digits=0) == "60%"
