"""
Input Parsing and Validation

DESIGN DECISION: Everything a user types goes through this module before it
reaches the ledger or a calculator.

PARSING:
- Form inputs arrive as strings (or numbers from programmatic callers)
- Numbers are read leniently: the leading numeric part of a string counts,
  anything unreadable becomes "no value"

VALIDATION:
- Preconditions are checked BEFORE any state change or arithmetic
- A failed check raises ValidationError with a message fit for the user
- Validation never silently fixes out-of-range values; only unreadable
  optional inputs fall back to a documented default
"""

import math
import re
from datetime import date, datetime
from typing import Any, Optional


_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")


class ValidationError(Exception):
    """
    Caller-supplied input violates a documented precondition.

    Always recoverable: the failed operation had no side effect.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


def parse_number(raw: Any) -> Optional[float]:
    """
    Read a float the way a browser form does.

    Returns None for empty, unreadable or non-finite input.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else None

    match = _FLOAT_PREFIX.match(str(raw).strip())
    if not match:
        return None
    value = float(match.group())
    return value if math.isfinite(value) else None


def parse_int(raw: Any) -> Optional[int]:
    """Read an integer, truncating any fractional part ("12.7" -> 12)."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return math.trunc(raw) if math.isfinite(raw) else None

    match = _INT_PREFIX.match(str(raw).strip())
    if not match:
        return None
    return int(match.group())


def parse_iso_date(raw: Any) -> Optional[date]:
    """Read a calendar date from a date object or a YYYY-MM-DD string."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if raw is None:
        return None

    text = str(raw).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def require_positive(field: str, value: Optional[float], message: str) -> float:
    """Reject missing, zero or negative values."""
    if value is None or value <= 0:
        raise ValidationError(field, message)
    return value


class LedgerValidator:
    """
    Validates the inputs of ledger mutations.

    Each method returns the cleaned values ready to be stored,
    or raises ValidationError naming the offending field.
    """

    def validate_category(self, category: Any) -> str:
        name = str(category).strip() if category is not None else ""
        if not name:
            raise ValidationError(
                "category", "Please enter a category name."
            )
        return name

    def validate_expense(
        self,
        category: Any,
        amount: Any,
        expense_date: Any,
    ) -> tuple[str, float, date]:
        """
        Check a new or edited expense.

        Returns: (category, amount, date)
        """
        clean_category = self.validate_category(category)

        clean_amount = require_positive(
            "amount",
            parse_number(amount),
            "Please enter a valid amount greater than 0.",
        )

        if expense_date is None or (isinstance(expense_date, str) and not expense_date.strip()):
            raise ValidationError("date", "Please select a date.")
        clean_date = parse_iso_date(expense_date)
        if clean_date is None:
            raise ValidationError("date", f"Invalid date: {expense_date!r}")

        return clean_category, clean_amount, clean_date

    def validate_goal(
        self,
        name: Any,
        target: Any,
        months: Any,
        saved: Any = 0,
    ) -> tuple[str, float, int, float]:
        """
        Check a new goal.

        An unreadable saved amount counts as nothing saved yet.

        Returns: (name, target, months, saved)
        """
        clean_name = str(name).strip() if name is not None else ""
        if not clean_name:
            raise ValidationError("name", "Please enter a goal name.")

        clean_target = require_positive(
            "target",
            parse_number(target),
            "Please enter a valid target amount greater than 0.",
        )

        clean_months = parse_int(months)
        if clean_months is None or clean_months <= 0:
            raise ValidationError(
                "months",
                "Please enter a valid time period (months) greater than 0.",
            )

        clean_saved = self.validate_saved(saved, clean_target)

        return clean_name, clean_target, clean_months, clean_saved

    def validate_saved(self, saved: Any, target: float) -> float:
        """Saved amount must lie within [0, target]."""
        value = parse_number(saved)
        if value is None:
            value = 0.0
        if value < 0:
            raise ValidationError("saved", "Saved amount cannot be negative.")
        if value > target:
            raise ValidationError(
                "saved", "Saved amount cannot be greater than target amount."
            )
        return value
