"""
Core Ledger Models for finplan

These models define the strict schemas for the persisted financial state.
They are designed to:
1. Enforce the ledger invariants at runtime (positive amounts, saved <= target)
2. Round-trip through JSON without loss
3. Repair partially-known persisted data in one explicit step

DESIGN DECISION: Categories are an open string domain. The five presets
exist for the UI's dropdown; any non-empty custom text is just as valid.
"""

import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


# =============================================================================
# ENUMS
# =============================================================================

class ExpenseCategory(str, Enum):
    """Preset expense categories offered by the entry form."""
    RENT = "Rent"
    FOOD = "Food"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"


class IncomeField(str, Enum):
    """Income sources that can be set individually."""
    SALARY = "salary"
    OTHER = "other"


def is_preset_category(category: str) -> bool:
    """True if the category is one of the presets (exact match)."""
    return category in {c.value for c in ExpenseCategory}


# =============================================================================
# LEDGER ENTITIES
# =============================================================================

class Income(BaseModel):
    """Monthly income, split by source."""

    salary: float = Field(
        default=0.0,
        ge=0,
        description="Monthly salary"
    )
    other: float = Field(
        default=0.0,
        ge=0,
        description="Other monthly income"
    )

    @field_validator('salary', 'other', mode='before')
    @classmethod
    def missing_is_zero(cls, v: Any) -> Any:
        """Stored nulls count as no income."""
        return 0.0 if v is None else v

    @property
    def total(self) -> float:
        return self.salary + self.other


class Expense(BaseModel):
    """
    A single recorded expense.

    The amount is always strictly positive.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: int = Field(
        ...,
        description="Unique, timestamp-derived identifier"
    )
    category: str = Field(
        ...,
        min_length=1,
        description="Preset or custom category name"
    )
    amount: float = Field(
        ...,
        gt=0,
        description="Amount spent"
    )
    date: datetime.date = Field(
        ...,
        description="Day the expense happened"
    )


class Goal(BaseModel):
    """
    A named savings target with a time horizon.

    CRITICAL: 0 <= saved <= target must hold for every goal in the ledger.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: int = Field(
        ...,
        description="Unique, timestamp-derived identifier"
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Goal name"
    )
    target: float = Field(
        ...,
        gt=0,
        description="Amount to reach"
    )
    months: int = Field(
        ...,
        gt=0,
        description="Time horizon in months"
    )
    saved: float = Field(
        default=0.0,
        ge=0,
        description="Amount saved so far"
    )

    @model_validator(mode='after')
    def validate_saved_within_target(self) -> 'Goal':
        """Saved amount can never exceed the target."""
        if self.saved > self.target:
            raise ValueError("Saved amount cannot be greater than target amount")
        return self


# =============================================================================
# ROOT STATE
# =============================================================================

class LedgerState(BaseModel):
    """
    The root persisted object.

    Owned exclusively by the LedgerStore; everyone else works on copies.
    """

    income: Income = Field(default_factory=Income)
    expenses: list[Expense] = Field(default_factory=list)
    goals: list[Goal] = Field(default_factory=list)

    @classmethod
    def default(cls) -> 'LedgerState':
        """Fresh state for a first run."""
        return cls()

    @classmethod
    def normalize(cls, raw: Any) -> 'LedgerState':
        """
        Build a fully-defaulted state from previously persisted data.

        Missing, null or otherwise empty top-level keys (0, "", false, {}, [])
        get their defaults; everything else must be valid.

        Raises:
            ValueError: if raw is not a mapping or its contents are invalid
                        (pydantic's ValidationError is a ValueError)
        """
        if not isinstance(raw, dict):
            raise ValueError(
                f"Persisted state must be an object, got {type(raw).__name__}"
            )

        defaults = cls.default().model_dump(mode="json")
        repaired = {
            key: raw[key] if raw.get(key) else default
            for key, default in defaults.items()
        }
        return cls.model_validate(repaired)

    def to_raw(self) -> dict:
        """JSON-compatible representation handed to the storage adapter."""
        return self.model_dump(mode="json")

    def find_expense(self, expense_id: int) -> Optional[Expense]:
        return next((e for e in self.expenses if e.id == expense_id), None)

    def find_goal(self, goal_id: int) -> Optional[Goal]:
        return next((g for g in self.goals if g.id == goal_id), None)

    def max_id(self) -> int:
        """Highest id in use across expenses and goals (0 when empty)."""
        ids = [e.id for e in self.expenses] + [g.id for g in self.goals]
        return max(ids, default=0)
