"""Derived-metrics package."""

from finplan.aggregation.engine import (
    CATEGORY_COLORS,
    category_breakdown,
    category_totals,
    income_expense_comparison,
    remaining_balance,
    savings_percentage,
    summarize,
    total_expenses,
    total_income,
    yearly_income,
)

__all__ = [
    "CATEGORY_COLORS",
    "category_breakdown",
    "category_totals",
    "income_expense_comparison",
    "remaining_balance",
    "savings_percentage",
    "summarize",
    "total_expenses",
    "total_income",
    "yearly_income",
]
