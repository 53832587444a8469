"""
Ledger Event Models

Every state change and every recovered failure is described by a LedgerEvent
and written to the local structured log.

DESIGN DECISION: Events are log records only. They are never persisted
alongside the ledger and cannot be replayed; the ledger keeps no history.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class LedgerEventType(str, Enum):
    """Types of events we log."""
    # State lifecycle
    STATE_LOADED = "state_loaded"
    STATE_LOAD_FAILED = "state_load_failed"
    STATE_SAVED = "state_saved"

    # Income
    INCOME_UPDATED = "income_updated"

    # Expenses
    EXPENSE_ADDED = "expense_added"
    EXPENSE_EDITED = "expense_edited"
    EXPENSE_DELETED = "expense_deleted"

    # Goals
    GOAL_ADDED = "goal_added"
    GOAL_SAVED_UPDATED = "goal_saved_updated"
    GOAL_DELETED = "goal_deleted"

    # Rejected input
    VALIDATION_FAILED = "validation_failed"


class EventSeverity(str, Enum):
    """Severity level for ledger events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LedgerEvent(BaseModel):
    """A single loggable event."""

    event_id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: LedgerEventType
    severity: EventSeverity = EventSeverity.INFO

    # What entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="'expense', 'goal', 'income' or 'state'"
    )
    entity_id: Optional[int] = None

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class LedgerEventBuilder:
    """
    Helper class to build ledger events with common patterns.

    Usage:
        event = LedgerEventBuilder.expense_added(expense_id, "Rent", 15000.0)
        event_logger.log(event)
    """

    @staticmethod
    def state_loaded(expenses: int, goals: int, from_storage: bool) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.STATE_LOADED,
            entity_type="state",
            description=(
                "Ledger state loaded from storage" if from_storage
                else "No saved ledger found, starting empty"
            ),
            details={"expenses": expenses, "goals": goals},
        )

    @staticmethod
    def state_load_failed(error: Exception) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.STATE_LOAD_FAILED,
            severity=EventSeverity.ERROR,
            entity_type="state",
            description="Saved ledger could not be read, using defaults",
            error_message=str(error),
            details={"error_type": type(error).__name__},
        )

    @staticmethod
    def state_saved(expenses: int, goals: int) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.STATE_SAVED,
            severity=EventSeverity.DEBUG,
            entity_type="state",
            description="Ledger state persisted",
            details={"expenses": expenses, "goals": goals},
        )

    @staticmethod
    def income_updated(field: str, value: float) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.INCOME_UPDATED,
            entity_type="income",
            description=f"Income '{field}' set",
            details={"field": field, "value": value},
        )

    @staticmethod
    def expense_added(expense_id: int, category: str, amount: float) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.EXPENSE_ADDED,
            entity_type="expense",
            entity_id=expense_id,
            description=f"Expense added in {category}",
            details={"category": category, "amount": amount},
        )

    @staticmethod
    def expense_edited(expense_id: int, category: str, amount: float) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.EXPENSE_EDITED,
            entity_type="expense",
            entity_id=expense_id,
            description=f"Expense edited in {category}",
            details={"category": category, "amount": amount},
        )

    @staticmethod
    def expense_deleted(expense_id: int, found: bool) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.EXPENSE_DELETED,
            entity_type="expense",
            entity_id=expense_id,
            description="Expense deleted" if found else "Expense to delete not found",
            details={"found": found},
        )

    @staticmethod
    def goal_added(goal_id: int, name: str, target: float) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.GOAL_ADDED,
            entity_type="goal",
            entity_id=goal_id,
            description=f"Goal '{name}' created",
            details={"target": target},
        )

    @staticmethod
    def goal_saved_updated(goal_id: int, previous: float, saved: float) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.GOAL_SAVED_UPDATED,
            entity_type="goal",
            entity_id=goal_id,
            description="Goal saved amount updated",
            details={"previous": previous, "saved": saved},
        )

    @staticmethod
    def goal_deleted(goal_id: int, found: bool) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.GOAL_DELETED,
            entity_type="goal",
            entity_id=goal_id,
            description="Goal deleted" if found else "Goal to delete not found",
            details={"found": found},
        )

    @staticmethod
    def validation_failed(operation: str, field: str, message: str) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.VALIDATION_FAILED,
            severity=EventSeverity.WARNING,
            description=f"{operation} rejected: {message}",
            details={"operation": operation, "field": field},
        )
