"""
Goal Tracker

Progress arithmetic for savings goals. Goals are reported in the order they
were created; nothing here re-sorts them.

months > 0 and 0 <= saved <= target are guaranteed by the Goal model, so the
divisions below cannot fail for any goal that made it into the ledger.
"""

from typing import Iterable

from finplan.models.ledger import Goal
from finplan.models.results import GoalProgress


def progress_percent(goal: Goal) -> float:
    """Share of the target already saved, capped at 100."""
    return min((goal.saved / goal.target) * 100, 100.0)


def remaining_amount(goal: Goal) -> float:
    return goal.target - goal.saved


def monthly_savings_needed(goal: Goal) -> float:
    """What must be put aside each month to reach the target on time."""
    return remaining_amount(goal) / goal.months


def goal_progress(goal: Goal) -> GoalProgress:
    return GoalProgress(
        goal_id=goal.id,
        name=goal.name,
        target=goal.target,
        saved=goal.saved,
        months=goal.months,
        progress_percent=progress_percent(goal),
        remaining_amount=remaining_amount(goal),
        monthly_savings_needed=monthly_savings_needed(goal),
    )


def track_goals(goals: Iterable[Goal]) -> list[GoalProgress]:
    return [goal_progress(goal) for goal in goals]
