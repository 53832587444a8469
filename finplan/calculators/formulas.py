"""
Financial Calculators

Six independent, stateless calculators. Each one:
1. Parses its inputs (numbers or numeric form strings)
2. Validates them, raising ValidationError BEFORE any arithmetic
3. Applies its formula and returns a result model

None of them reads or writes the ledger. Monthly savings is the only one fed
from ledger aggregates rather than direct user entry, and it is the only one
without validation.

Operator order in the formulas is deliberate: reordering the power and
division terms changes the floating point result.
"""

from typing import Any, Optional

from finplan.config import get_settings
from finplan.models.results import (
    CompoundInterestResult,
    EmergencyFundResult,
    FixedDepositResult,
    MonthlySavingsResult,
    SimpleInterestResult,
    SIPResult,
)
from finplan.validation import (
    ValidationError,
    parse_int,
    parse_number,
    require_positive,
)


ALL_POSITIVE = "Please enter valid values (all must be greater than 0)."

FIXED_DEPOSIT_COMPOUNDING = 12

TOO_LARGE = "Result is too large to calculate."


def _positive(field: str, raw: Any) -> float:
    return require_positive(field, parse_number(raw), ALL_POSITIVE)


def _power(field: str, base: float, exponent: float) -> float:
    """base ** exponent, reporting overflow as invalid input."""
    try:
        return base ** exponent
    except OverflowError:
        raise ValidationError(field, TOO_LARGE) from None


def calculate_monthly_savings(
    total_income: float,
    total_expenses: float,
) -> MonthlySavingsResult:
    """Income minus expenses; negative when overspent."""
    income = parse_number(total_income) or 0.0
    expenses = parse_number(total_expenses) or 0.0
    return MonthlySavingsResult(
        total_income=income,
        total_expenses=expenses,
        savings=income - expenses,
    )


def calculate_emergency_fund(months: Any, monthly_expenses: Any) -> EmergencyFundResult:
    """
    Emergency fund = months x monthly expenses.

    Months are whole; a fractional entry is truncated.
    """
    clean_months = parse_int(months)
    clean_expenses = parse_number(monthly_expenses)
    if (
        clean_months is None or clean_months <= 0
        or clean_expenses is None or clean_expenses <= 0
    ):
        raise ValidationError(
            "emergency_fund",
            "Please enter valid values for months and expenses.",
        )

    return EmergencyFundResult(
        months=clean_months,
        monthly_expenses=clean_expenses,
        fund=clean_months * clean_expenses,
    )


def calculate_fixed_deposit(
    principal: Any,
    annual_rate: Any,
    years: Any,
) -> FixedDepositResult:
    """
    Fixed deposit with monthly compounding.

    A = P(1 + r/n)^(nt), r = annual rate as a decimal, n = 12
    """
    p = _positive("principal", principal)
    rate = _positive("rate", annual_rate)
    t = _positive("years", years)

    r = rate / 100
    n = FIXED_DEPOSIT_COMPOUNDING
    final_amount = p * _power("fixed_deposit", 1 + (r / n), n * t)

    return FixedDepositResult(
        principal=p,
        final_amount=final_amount,
        interest_earned=final_amount - p,
    )


def calculate_sip(
    monthly_investment: Any,
    annual_rate: Any,
    years: Any,
) -> SIPResult:
    """
    Systematic Investment Plan future value.

    FV = P x [((1 + r)^n - 1) / r] x (1 + r)
    r = monthly rate (annual / 12), n = number of months
    """
    p = _positive("monthly_investment", monthly_investment)
    rate = _positive("rate", annual_rate)
    t = _positive("years", years)

    monthly_rate = (rate / 100) / 12
    months = t * 12
    future_value = p * (
        ((_power("sip", 1 + monthly_rate, months) - 1) / monthly_rate) * (1 + monthly_rate)
    )
    total_invested = p * months

    return SIPResult(
        total_invested=total_invested,
        returns=future_value - total_invested,
        future_value=future_value,
    )


def calculate_simple_interest(
    principal: Any,
    rate: Any,
    years: Any,
) -> SimpleInterestResult:
    """SI = (P x R x T) / 100"""
    p = _positive("principal", principal)
    r = _positive("rate", rate)
    t = _positive("years", years)

    interest = (p * r * t) / 100

    return SimpleInterestResult(
        principal=p,
        interest=interest,
        total_amount=p + interest,
    )


def calculate_compound_interest(
    principal: Any,
    rate: Any,
    years: Any,
    compounding_frequency: Optional[Any] = None,
) -> CompoundInterestResult:
    """
    A = P(1 + r/n)^(nt)

    A missing, unreadable or non-positive frequency falls back to the
    configured default (monthly) instead of being rejected.
    """
    p = _positive("principal", principal)
    annual = _positive("rate", rate)
    t = _positive("years", years)

    n = parse_int(compounding_frequency)
    if n is None or n <= 0:
        n = get_settings().calculators.default_compounding_frequency

    r = annual / 100
    final_amount = p * _power("compound_interest", 1 + (r / n), n * t)

    return CompoundInterestResult(
        principal=p,
        compounding_frequency=n,
        final_amount=final_amount,
        interest_earned=final_amount - p,
    )
