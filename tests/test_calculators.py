"""Tests for the financial calculators."""

import pytest

from finplan.calculators import (
    calculate_compound_interest,
    calculate_emergency_fund,
    calculate_fixed_deposit,
    calculate_monthly_savings,
    calculate_simple_interest,
    calculate_sip,
)
from finplan.validation import ValidationError


class TestMonthlySavings:
    """Tests for income minus expenses."""

    def test_positive_savings(self):
        result = calculate_monthly_savings(50000, 20000)
        assert result.savings == 30000

    def test_negative_savings_are_allowed(self):
        """Test overspending gives a negative result, not an error."""
        assert calculate_monthly_savings(1000, 3000).savings == -2000


class TestEmergencyFund:
    """Tests for months x monthly expenses."""

    def test_six_months(self):
        result = calculate_emergency_fund(6, 20000)
        assert result.fund == 120000
        assert result.months == 6

    def test_fractional_months_are_truncated(self):
        """Test that 6.9 months counts as 6."""
        result = calculate_emergency_fund("6.9", "20000")
        assert result.months == 6
        assert result.fund == 120000

    @pytest.mark.parametrize("months, expenses", [
        (0, 20000),
        (6, 0),
        (-1, 20000),
        ("", 20000),
        (6, "abc"),
        ("0.5", 20000),
    ])
    def test_invalid_inputs(self, months, expenses):
        with pytest.raises(ValidationError, match="months and expenses"):
            calculate_emergency_fund(months, expenses)


class TestFixedDeposit:
    """Tests for monthly-compounded fixed deposits."""

    def test_five_years_at_seven_percent(self):
        result = calculate_fixed_deposit(100000, 7, 5)
        assert result.final_amount == pytest.approx(141762.5, rel=1e-4)
        assert result.interest_earned == pytest.approx(result.final_amount - 100000)

    def test_string_inputs(self):
        result = calculate_fixed_deposit("100000", "7", "5")
        assert result.principal == 100000

    @pytest.mark.parametrize("principal, rate, years", [
        (0, 7, 5),
        (100000, 0, 5),
        (100000, 7, 0),
        (-100, 7, 5),
        ("abc", 7, 5),
    ])
    def test_all_values_must_be_positive(self, principal, rate, years):
        with pytest.raises(ValidationError, match="all must be greater than 0"):
            calculate_fixed_deposit(principal, rate, years)


class TestSIP:
    """Tests for systematic investment plans."""

    def test_one_year_at_twelve_percent(self):
        """Test FV with contributions at the start of each month."""
        result = calculate_sip(1000, 12, 1)
        assert result.total_invested == 12000
        assert result.future_value == pytest.approx(12809.33, abs=0.01)
        assert result.returns == pytest.approx(809.33, abs=0.01)

    def test_zero_rate_is_rejected(self):
        with pytest.raises(ValidationError):
            calculate_sip(1000, 0, 1)


class TestSimpleInterest:
    """Tests for simple interest."""

    def test_two_years_at_ten_percent(self):
        result = calculate_simple_interest(10000, 10, 2)
        assert result.interest == 2000
        assert result.total_amount == 12000

    def test_negative_years_rejected(self):
        with pytest.raises(ValidationError):
            calculate_simple_interest(10000, 10, -2)


class TestCompoundInterest:
    """Tests for compound interest with a chosen frequency."""

    def test_monthly_compounding(self):
        result = calculate_compound_interest(10000, 10, 1, 12)
        assert result.final_amount == pytest.approx(11047.13, abs=0.01)
        assert result.interest_earned == pytest.approx(1047.13, abs=0.01)

    def test_quarterly_compounding(self):
        result = calculate_compound_interest(10000, 10, 1, "4")
        assert result.compounding_frequency == 4
        assert result.final_amount == pytest.approx(11038.13, abs=0.01)

    @pytest.mark.parametrize("frequency", [None, "", "abc", 0, -4])
    def test_bad_frequency_falls_back_to_monthly(self, frequency):
        """Test that the frequency is never a reason to reject the input."""
        result = calculate_compound_interest(10000, 10, 1, frequency)
        assert result.compounding_frequency == 12
        assert result.final_amount == pytest.approx(11047.13, abs=0.01)

    def test_default_frequency_is_configurable(self, monkeypatch):
        monkeypatch.setenv("FINPLAN_CALC_DEFAULT_COMPOUNDING_FREQUENCY", "4")
        result = calculate_compound_interest(10000, 10, 1)
        assert result.compounding_frequency == 4
        assert result.final_amount == pytest.approx(11038.13, abs=0.01)

    def test_principal_must_be_positive(self):
        with pytest.raises(ValidationError):
            calculate_compound_interest(0, 10, 1, 12)


class TestHugeResults:
    """Tests for inputs whose result does not fit in a float."""

    @pytest.mark.parametrize("calculator", [
        calculate_fixed_deposit,
        calculate_sip,
        calculate_compound_interest,
    ])
    def test_overflow_is_a_validation_error(self, calculator):
        """Test a runaway exponent is reported like any other bad input."""
        with pytest.raises(ValidationError, match="too large"):
            calculator(1000, 100, 1000)

    def test_large_but_finite_result_is_returned(self):
        result = calculate_compound_interest(1000, 100, 50, 1)
        assert result.final_amount == pytest.approx(1000 * 2 ** 50)
