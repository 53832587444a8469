"""
Main Orchestrator for finplan

This module ties the components together and is the single entry point a
UI talks to:
1. Commands go to the LedgerStore (which validates and persists)
2. Derived metrics come from the aggregation engine and goal tracker,
   recomputed from the store's current state on every call
3. Calculators are called directly; the two that a UI pre-fills from the
   ledger (monthly savings, emergency fund) get helpers here

DESIGN DECISION: The orchestrator holds no financial state of its own.
Everything it returns is computed fresh from the store.
"""

from typing import Any, Optional

from finplan.aggregation import summarize, total_expenses, total_income
from finplan.calculators import calculate_monthly_savings
from finplan.config import Settings, get_settings
from finplan.goals import track_goals
from finplan.log import LedgerEventLogger, configure_logging, get_logger
from finplan.models.results import BudgetSummary, GoalProgress, MonthlySavingsResult
from finplan.services.storage import (
    InMemoryStorage,
    JsonFileStorage,
    StateStorageInterface,
)
from finplan.store import LedgerStore


class FinanceLedgerApp:
    """
    Presentation boundary of the engine.

    Exposes the store for commands and read access, plus the derived
    views a dashboard needs.
    """

    def __init__(self, store: LedgerStore):
        self._store = store

    @property
    def store(self) -> LedgerStore:
        return self._store

    def summary(self) -> BudgetSummary:
        return summarize(self._store.state)

    def goal_progress(self) -> list[GoalProgress]:
        return track_goals(self._store.goals)

    def monthly_savings(self) -> MonthlySavingsResult:
        """Monthly savings calculator fed from the ledger totals."""
        state = self._store.state
        return calculate_monthly_savings(total_income(state), total_expenses(state))

    def emergency_fund_prefill(self) -> float:
        """Suggested 'monthly expenses' input for the emergency fund calculator."""
        return total_expenses(self._store.state)

    def set_income(self, field: str, raw_value: Any) -> BudgetSummary:
        """Set income and return the recomputed summary."""
        self._store.set_income(field, raw_value)
        return self.summary()


def create_storage(settings: Optional[Settings] = None) -> StateStorageInterface:
    """Build the configured storage backend."""
    storage_settings = (settings or get_settings()).storage

    if storage_settings.backend == "memory":
        return InMemoryStorage()
    return JsonFileStorage(
        path=storage_settings.state_path,
        max_attempts=storage_settings.max_write_attempts,
    )


def create_app_components(
    settings: Optional[Settings] = None,
    storage: Optional[StateStorageInterface] = None,
) -> FinanceLedgerApp:
    """
    Factory function to create an initialized application.

    Args:
        settings: Settings to use; defaults to the cached environment settings
        storage: Explicit storage backend, overriding the configured one
                 (tests pass an InMemoryStorage here)

    Returns:
        A FinanceLedgerApp whose store has already loaded the saved ledger
    """
    settings = settings or get_settings()
    configure_logging(settings.app.log_level)

    storage = storage or create_storage(settings)
    store = LedgerStore(storage, event_logger=LedgerEventLogger())
    store.initialize()

    get_logger(__name__).info(
        "app_started",
        environment=settings.app.app_environment,
        storage=type(storage).__name__,
    )
    return FinanceLedgerApp(store)
