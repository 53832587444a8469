"""
Derived-Data Models

Everything the engine computes (summaries, breakdowns, goal progress and
calculator outputs) is returned as one of these plain models, ready for
display. None of them is persisted.
"""

from pydantic import BaseModel, Field


# =============================================================================
# AGGREGATES
# =============================================================================

class CategoryShare(BaseModel):
    """One category's slice of total spending."""

    category: str
    total: float = Field(ge=0)
    share: float = Field(
        ge=0,
        description="Percentage of total expenses"
    )
    color: str = Field(
        ...,
        description="Palette colour assigned by rank"
    )
    start_angle: float = Field(
        default=0.0,
        description="Pie slice start, in degrees"
    )
    end_angle: float = Field(
        default=0.0,
        description="Pie slice end, in degrees"
    )


class IncomeExpenseComparison(BaseModel):
    """Relative bar widths (0-100) for income, expenses and savings."""

    income_width: float
    expense_width: float
    savings_width: float
    savings_negative: bool = False


class BudgetSummary(BaseModel):
    """All derived metrics of the ledger at one point in time."""

    total_income: float
    yearly_income: float
    total_expenses: float
    remaining_balance: float
    savings_percentage: float
    category_totals: dict[str, float] = Field(default_factory=dict)
    categories: list[CategoryShare] = Field(default_factory=list)
    comparison: IncomeExpenseComparison

    @property
    def is_overspent(self) -> bool:
        """Expenses exceed income (presentation hint only)."""
        return self.remaining_balance < 0


class GoalProgress(BaseModel):
    """Progress report for a single goal."""

    goal_id: int
    name: str
    target: float
    saved: float
    months: int
    progress_percent: float = Field(ge=0, le=100)
    remaining_amount: float = Field(ge=0)
    monthly_savings_needed: float = Field(ge=0)


# =============================================================================
# CALCULATOR RESULTS
# =============================================================================

class MonthlySavingsResult(BaseModel):
    total_income: float
    total_expenses: float
    savings: float


class EmergencyFundResult(BaseModel):
    months: int
    monthly_expenses: float
    fund: float


class FixedDepositResult(BaseModel):
    principal: float
    final_amount: float
    interest_earned: float


class SIPResult(BaseModel):
    """Systematic Investment Plan projection."""

    total_invested: float
    returns: float
    future_value: float


class SimpleInterestResult(BaseModel):
    principal: float
    interest: float
    total_amount: float


class CompoundInterestResult(BaseModel):
    principal: float
    compounding_frequency: int
    final_amount: float
    interest_earned: float
