"""Financial calculators package."""

from finplan.calculators.formulas import (
    calculate_compound_interest,
    calculate_emergency_fund,
    calculate_fixed_deposit,
    calculate_monthly_savings,
    calculate_simple_interest,
    calculate_sip,
)

__all__ = [
    "calculate_compound_interest",
    "calculate_emergency_fund",
    "calculate_fixed_deposit",
    "calculate_monthly_savings",
    "calculate_simple_interest",
    "calculate_sip",
]
