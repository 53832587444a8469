"""
Aggregation Engine

DESIGN DECISION: Aggregation is DETERMINISTIC and stateless.
Every metric is recomputed from the ledger state on each call; nothing is
cached or updated incrementally. The ledger is small enough that a full
recompute is always cheap, and there is no cache to go stale.

All functions take a LedgerState and never modify it.
"""

from finplan.models.ledger import LedgerState
from finplan.models.results import (
    BudgetSummary,
    CategoryShare,
    IncomeExpenseComparison,
)


# Pie chart colours, assigned by rank (largest category first) and cycled
CATEGORY_COLORS = [
    "#667eea", "#f093fb", "#4facfe", "#43e97b",
    "#fa709a", "#fee140", "#30cfd0", "#a8edea",
]

MONTHS_PER_YEAR = 12


def total_income(state: LedgerState) -> float:
    return state.income.salary + state.income.other


def yearly_income(state: LedgerState) -> float:
    return total_income(state) * MONTHS_PER_YEAR


def total_expenses(state: LedgerState) -> float:
    return sum((expense.amount for expense in state.expenses), 0.0)


def remaining_balance(state: LedgerState) -> float:
    """Income left after expenses; negative when overspent."""
    return total_income(state) - total_expenses(state)


def savings_percentage(state: LedgerState) -> float:
    """Remaining balance as a percentage of income (0 without income)."""
    income = total_income(state)
    if income > 0:
        return (remaining_balance(state) / income) * 100
    return 0.0


def category_totals(state: LedgerState) -> dict[str, float]:
    """Summed amount per category, in order of first appearance."""
    totals: dict[str, float] = {}
    for expense in state.expenses:
        totals[expense.category] = totals.get(expense.category, 0.0) + expense.amount
    return totals


def category_breakdown(state: LedgerState) -> list[CategoryShare]:
    """
    Categories ranked by total spend, largest first.

    Ties keep their first-appearance order. Each entry carries its share
    of total expenses, a palette colour and its pie slice angles.
    """
    totals = category_totals(state)
    spent = total_expenses(state)
    ranked = sorted(totals, key=lambda category: totals[category], reverse=True)

    shares = []
    current_angle = 0.0
    for index, category in enumerate(ranked):
        amount = totals[category]
        share = (amount / spent) * 100 if spent > 0 else 0.0
        end_angle = current_angle + (share / 100) * 360
        shares.append(CategoryShare(
            category=category,
            total=amount,
            share=share,
            color=CATEGORY_COLORS[index % len(CATEGORY_COLORS)],
            start_angle=current_angle,
            end_angle=end_angle,
        ))
        current_angle = end_angle
    return shares


def income_expense_comparison(state: LedgerState) -> IncomeExpenseComparison:
    """Bar widths scaled against the largest of income, expenses and |savings|."""
    income = total_income(state)
    expenses = total_expenses(state)
    savings = income - expenses
    max_value = max(income, expenses, abs(savings), 1)

    return IncomeExpenseComparison(
        income_width=(income / max_value) * 100,
        expense_width=(expenses / max_value) * 100,
        savings_width=(abs(savings) / max_value) * 100,
        savings_negative=savings < 0,
    )


def summarize(state: LedgerState) -> BudgetSummary:
    """Every derived metric of the ledger in one object."""
    return BudgetSummary(
        total_income=total_income(state),
        yearly_income=yearly_income(state),
        total_expenses=total_expenses(state),
        remaining_balance=remaining_balance(state),
        savings_percentage=savings_percentage(state),
        category_totals=category_totals(state),
        categories=category_breakdown(state),
        comparison=income_expense_comparison(state),
    )
