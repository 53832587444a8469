"""
Tests for finplan models

Test strategy:
1. Unit tests for individual components (models, validators, calculators)
2. Store and app tests run against in-memory storage
3. File storage tests use pytest's tmp_path
"""

import pytest
from datetime import date

from finplan.models.events import (
    EventSeverity,
    LedgerEvent,
    LedgerEventBuilder,
    LedgerEventType,
)
from finplan.models.ledger import (
    Expense,
    ExpenseCategory,
    Goal,
    Income,
    LedgerState,
    is_preset_category,
)


class TestLedgerModels:
    """Tests for the persisted ledger models."""

    def test_income_defaults_to_zero(self):
        """Test Income starts with no salary or other income."""
        income = Income()
        assert income.salary == 0
        assert income.other == 0
        assert income.total == 0

    def test_income_null_fields_become_zero(self):
        """Test that stored nulls are read as zero."""
        income = Income.model_validate({"salary": None, "other": 250})
        assert income.salary == 0
        assert income.other == 250

    def test_income_rejects_negative(self):
        """Test that negative income is rejected."""
        with pytest.raises(ValueError):
            Income(salary=-1)

    def test_expense_creation(self):
        """Test Expense model creation from ISO date text."""
        expense = Expense(id=1, category="Rent", amount=15000, date="2024-01-01")
        assert expense.date == date(2024, 1, 1)
        assert expense.amount == 15000.0

    def test_expense_strips_whitespace(self):
        """Test that whitespace is stripped from the category."""
        expense = Expense(id=1, category="  Food  ", amount=10, date=date(2024, 1, 2))
        assert expense.category == "Food"

    @pytest.mark.parametrize("amount", [0, -5])
    def test_expense_rejects_non_positive_amount(self, amount):
        """Test that zero and negative amounts are rejected."""
        with pytest.raises(ValueError):
            Expense(id=1, category="Rent", amount=amount, date=date(2024, 1, 1))

    def test_goal_saved_cannot_exceed_target(self):
        """Test the saved <= target invariant."""
        with pytest.raises(ValueError, match="cannot be greater than target"):
            Goal(id=1, name="Car", target=100, months=10, saved=101)

    def test_goal_saved_equal_to_target_is_allowed(self):
        """Test a fully funded goal is valid."""
        goal = Goal(id=1, name="Car", target=100, months=10, saved=100)
        assert goal.saved == goal.target

    def test_goal_rejects_zero_months(self):
        """Test that the time horizon must be positive."""
        with pytest.raises(ValueError):
            Goal(id=1, name="Car", target=100, months=0)


class TestLedgerStateNormalize:
    """Tests for repairing persisted state."""

    def test_default_state(self):
        """Test the first-run state."""
        state = LedgerState.default()
        assert state.income == Income()
        assert state.expenses == []
        assert state.goals == []

    def test_missing_keys_get_defaults(self):
        """Test that absent top-level keys are filled in, not discarded."""
        state = LedgerState.normalize({"income": {"salary": 40000}})
        assert state.income.salary == 40000
        assert state.income.other == 0
        assert state.expenses == []
        assert state.goals == []

    def test_null_keys_get_defaults(self):
        """Test that null top-level keys are treated as missing."""
        state = LedgerState.normalize({"income": None, "expenses": None, "goals": []})
        assert state == LedgerState.default()

    @pytest.mark.parametrize("empty", [0, "", False, {}])
    def test_falsy_income_gets_default_and_keeps_expenses(self, empty):
        """Test an empty income value is repaired without discarding the rest."""
        state = LedgerState.normalize({
            "income": empty,
            "expenses": [{"id": 1, "category": "Rent", "amount": 100, "date": "2024-01-01"}],
        })
        assert state.income == Income()
        assert [e.id for e in state.expenses] == [1]

    def test_falsy_lists_get_defaults(self):
        state = LedgerState.normalize({"income": {"salary": 10}, "expenses": 0, "goals": False})
        assert state.income.salary == 10
        assert state.expenses == []
        assert state.goals == []

    def test_unknown_keys_are_ignored(self):
        """Test that extra keys from older versions do not break loading."""
        state = LedgerState.normalize({"theme": "dark", "expenses": []})
        assert state == LedgerState.default()

    def test_non_mapping_is_rejected(self):
        """Test that a list or scalar cannot be a ledger."""
        with pytest.raises(ValueError, match="must be an object"):
            LedgerState.normalize([1, 2, 3])

    def test_invalid_entry_is_rejected(self):
        """Test that stored entries must satisfy the invariants."""
        with pytest.raises(ValueError):
            LedgerState.normalize({
                "expenses": [{"id": 1, "category": "Rent", "amount": -5, "date": "2024-01-01"}],
            })

    def test_to_raw_round_trip(self):
        """Test that the JSON form rebuilds an equal state."""
        state = LedgerState(
            income=Income(salary=50000, other=1200.5),
            expenses=[Expense(id=1, category="Rent", amount=15000, date=date(2024, 1, 1))],
            goals=[Goal(id=2, name="Car", target=200000, months=20, saved=50000)],
        )
        raw = state.to_raw()
        assert raw["expenses"][0]["date"] == "2024-01-01"
        assert LedgerState.normalize(raw) == state

    def test_max_id(self):
        """Test the highest id is found across expenses and goals."""
        state = LedgerState(
            expenses=[Expense(id=5, category="Rent", amount=1, date=date(2024, 1, 1))],
            goals=[Goal(id=9, name="Car", target=10, months=1)],
        )
        assert state.max_id() == 9
        assert LedgerState.default().max_id() == 0


class TestExpenseCategories:
    """Tests for the preset category enum."""

    def test_all_presets_exist(self):
        """Test that the five preset categories exist."""
        expected = ["Rent", "Food", "Transport", "Utilities", "Entertainment"]
        assert [c.value for c in ExpenseCategory] == expected

    def test_is_preset_category(self):
        """Test preset detection is exact."""
        assert is_preset_category("Rent")
        assert not is_preset_category("rent")
        assert not is_preset_category("Gym")


class TestLedgerEvents:
    """Tests for event models."""

    def test_event_defaults(self):
        """Test LedgerEvent model creation."""
        event = LedgerEvent(
            event_type=LedgerEventType.EXPENSE_ADDED,
            description="Expense added",
        )
        assert event.severity == EventSeverity.INFO

    def test_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = LedgerEventBuilder.expense_added(42, "Rent", 15000.0)
        log_dict = event.to_log_dict()
        assert log_dict["event_type"] == "expense_added"
        assert log_dict["entity_id"] == 42
        assert log_dict["details"]["category"] == "Rent"

    def test_load_failure_is_an_error(self):
        """Test that load failures are logged at error level."""
        event = LedgerEventBuilder.state_load_failed(ValueError("bad json"))
        assert event.severity == EventSeverity.ERROR
        assert event.error_message == "bad json"
        assert event.details["error_type"] == "ValueError"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
