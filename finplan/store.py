"""
Financial State Store

DESIGN DECISION: The store is the ONLY owner of the ledger state.
- Every mutation validates first; a rejected call changes nothing
- Every accepted mutation builds the next state, persists it, and only then
  publishes it as current; a failed save leaves the previous state in place
- Readers get copies, never references into the live state

There is no batching and no dirty tracking: each mutation writes the whole
ledger immediately.
"""

import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from finplan.log import LedgerEventLogger
from finplan.models.events import LedgerEventBuilder
from finplan.models.ledger import (
    Expense,
    Goal,
    Income,
    IncomeField,
    LedgerState,
)
from finplan.services.storage import PersistenceReadError, StateStorageInterface
from finplan.validation import LedgerValidator, ValidationError, parse_number


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


class IdGenerator:
    """
    Timestamp-derived ids that never repeat.

    Ids are milliseconds since the epoch, bumped past the last issued id
    when two entities are created within the same millisecond.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _wall_clock_ms
        self._last = 0

    def observe(self, existing_id: int) -> None:
        """Never issue anything at or below an id already in use."""
        self._last = max(self._last, existing_id)

    def next_id(self) -> int:
        candidate = max(self._clock(), self._last + 1)
        self._last = candidate
        return candidate


class LedgerStore:
    """
    Owns the ledger state and every operation that changes it.

    Construct once at startup, call initialize(), then pass the
    instance to whoever needs it.
    """

    def __init__(
        self,
        storage: StateStorageInterface,
        event_logger: Optional[LedgerEventLogger] = None,
        validator: Optional[LedgerValidator] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self._storage = storage
        self._events = event_logger or LedgerEventLogger()
        self._validator = validator or LedgerValidator()
        self._ids = IdGenerator(clock)
        self._state = LedgerState.default()

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialize(self) -> None:
        """
        Load the saved ledger, repairing or replacing it as needed.

        Never raises because of bad saved data: anything unreadable is
        logged and replaced by an empty ledger.
        """
        try:
            raw = self._storage.load()
            state = LedgerState.default() if raw is None else LedgerState.normalize(raw)
        except (PersistenceReadError, ValueError) as e:
            self._events.log(LedgerEventBuilder.state_load_failed(e))
            state = LedgerState.default()
        else:
            self._events.log(LedgerEventBuilder.state_loaded(
                expenses=len(state.expenses),
                goals=len(state.goals),
                from_storage=raw is not None,
            ))

        self._ids.observe(state.max_id())
        self._state = state

    # =========================================================================
    # READ ACCESSORS
    # =========================================================================

    @property
    def state(self) -> LedgerState:
        """A deep copy of the current ledger."""
        return self._state.model_copy(deep=True)

    @property
    def income(self) -> Income:
        return self._state.income.model_copy()

    @property
    def expenses(self) -> list[Expense]:
        """Expenses in storage order."""
        return [expense.model_copy() for expense in self._state.expenses]

    def expenses_newest_first(self) -> list[Expense]:
        """Expenses in display order: latest date first."""
        return sorted(self.expenses, key=lambda expense: expense.date, reverse=True)

    @property
    def goals(self) -> list[Goal]:
        """Goals in creation order."""
        return [goal.model_copy() for goal in self._state.goals]

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        expense = self._state.find_expense(expense_id)
        return expense.model_copy() if expense else None

    def get_goal(self, goal_id: int) -> Optional[Goal]:
        goal = self._state.find_goal(goal_id)
        return goal.model_copy() if goal else None

    # =========================================================================
    # INCOME
    # =========================================================================

    def set_income(self, field: str, raw_value: Any) -> None:
        """
        Set one income source from raw form input.

        Unreadable, empty or negative values count as 0.
        """
        with self._validating("set_income"):
            try:
                income_field = IncomeField(field)
            except ValueError:
                raise ValidationError("field", f"Unknown income field: {field}") from None

        value = parse_number(raw_value)
        if value is None or value < 0:
            value = 0.0

        income = self._state.income.model_copy(update={income_field.value: value})
        self._commit(self._state.model_copy(update={"income": income}))
        self._events.log(LedgerEventBuilder.income_updated(income_field.value, value))

    # =========================================================================
    # EXPENSES
    # =========================================================================

    def add_expense(self, category: Any, amount: Any, expense_date: Any) -> Expense:
        with self._validating("add_expense"):
            clean_category, clean_amount, clean_date = self._validator.validate_expense(
                category, amount, expense_date
            )

        expense = Expense(
            id=self._ids.next_id(),
            category=clean_category,
            amount=clean_amount,
            date=clean_date,
        )
        self._commit(self._state.model_copy(
            update={"expenses": [*self._state.expenses, expense]}
        ))
        self._events.log(LedgerEventBuilder.expense_added(
            expense.id, expense.category, expense.amount
        ))
        return expense.model_copy()

    def edit_expense(
        self,
        expense_id: int,
        category: Any,
        amount: Any,
        expense_date: Any,
    ) -> Optional[Expense]:
        """
        Replace an expense's fields, keeping its id.

        Returns None (and changes nothing) if the id is unknown.
        """
        if self._state.find_expense(expense_id) is None:
            return None

        with self._validating("edit_expense"):
            clean_category, clean_amount, clean_date = self._validator.validate_expense(
                category, amount, expense_date
            )

        edited = Expense(
            id=expense_id,
            category=clean_category,
            amount=clean_amount,
            date=clean_date,
        )
        expenses = [
            edited if expense.id == expense_id else expense
            for expense in self._state.expenses
        ]
        self._commit(self._state.model_copy(update={"expenses": expenses}))
        self._events.log(LedgerEventBuilder.expense_edited(
            edited.id, edited.category, edited.amount
        ))
        return edited.model_copy()

    def delete_expense(self, expense_id: int) -> None:
        """Remove an expense; unknown ids are ignored."""
        remaining = [e for e in self._state.expenses if e.id != expense_id]
        found = len(remaining) != len(self._state.expenses)

        self._commit(self._state.model_copy(update={"expenses": remaining}))
        self._events.log(LedgerEventBuilder.expense_deleted(expense_id, found))

    # =========================================================================
    # GOALS
    # =========================================================================

    def add_goal(self, name: Any, target: Any, months: Any, saved: Any = 0) -> Goal:
        with self._validating("add_goal"):
            clean_name, clean_target, clean_months, clean_saved = (
                self._validator.validate_goal(name, target, months, saved)
            )

        goal = Goal(
            id=self._ids.next_id(),
            name=clean_name,
            target=clean_target,
            months=clean_months,
            saved=clean_saved,
        )
        self._commit(self._state.model_copy(
            update={"goals": [*self._state.goals, goal]}
        ))
        self._events.log(LedgerEventBuilder.goal_added(goal.id, goal.name, goal.target))
        return goal.model_copy()

    def delete_goal(self, goal_id: int) -> None:
        """Remove a goal; unknown ids are ignored."""
        remaining = [g for g in self._state.goals if g.id != goal_id]
        found = len(remaining) != len(self._state.goals)

        self._commit(self._state.model_copy(update={"goals": remaining}))
        self._events.log(LedgerEventBuilder.goal_deleted(goal_id, found))

    def update_goal_saved(self, goal_id: int, new_saved: Any) -> Optional[Goal]:
        """
        Overwrite how much has been saved toward a goal.

        Returns None (and changes nothing) if the id is unknown.
        """
        goal = self._state.find_goal(goal_id)
        if goal is None:
            return None

        with self._validating("update_goal_saved"):
            value = self._validator.validate_saved(new_saved, goal.target)

        updated = goal.model_copy(update={"saved": value})
        goals = [updated if g.id == goal_id else g for g in self._state.goals]
        self._commit(self._state.model_copy(update={"goals": goals}))
        self._events.log(LedgerEventBuilder.goal_saved_updated(goal_id, goal.saved, value))
        return updated.model_copy()

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _commit(self, next_state: LedgerState) -> None:
        """Persist the next state, then make it current."""
        self._storage.save(next_state.to_raw())
        self._state = next_state
        self._events.log(LedgerEventBuilder.state_saved(
            expenses=len(next_state.expenses),
            goals=len(next_state.goals),
        ))

    @contextmanager
    def _validating(self, operation: str) -> Iterator[None]:
        """Log rejected input before letting the ValidationError through."""
        try:
            yield
        except ValidationError as e:
            self._events.log(
                LedgerEventBuilder.validation_failed(operation, e.field, e.message)
            )
            raise
