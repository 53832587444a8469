"""
Data Models Package

This package contains all Pydantic models used in finplan.
All data flowing through the engine must conform to these schemas.
"""

from finplan.models.ledger import (
    Expense,
    ExpenseCategory,
    Goal,
    Income,
    IncomeField,
    LedgerState,
    is_preset_category,
)
from finplan.models.results import (
    BudgetSummary,
    CategoryShare,
    CompoundInterestResult,
    EmergencyFundResult,
    FixedDepositResult,
    GoalProgress,
    IncomeExpenseComparison,
    MonthlySavingsResult,
    SimpleInterestResult,
    SIPResult,
)
from finplan.models.events import (
    EventSeverity,
    LedgerEvent,
    LedgerEventBuilder,
    LedgerEventType,
)

__all__ = [
    # Ledger models
    "Expense",
    "ExpenseCategory",
    "Goal",
    "Income",
    "IncomeField",
    "LedgerState",
    "is_preset_category",
    # Derived data
    "BudgetSummary",
    "CategoryShare",
    "CompoundInterestResult",
    "EmergencyFundResult",
    "FixedDepositResult",
    "GoalProgress",
    "IncomeExpenseComparison",
    "MonthlySavingsResult",
    "SimpleInterestResult",
    "SIPResult",
    # Events
    "EventSeverity",
    "LedgerEvent",
    "LedgerEventBuilder",
    "LedgerEventType",
]
