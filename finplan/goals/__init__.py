"""Goal progress package."""

from finplan.goals.tracker import (
    goal_progress,
    monthly_savings_needed,
    progress_percent,
    remaining_amount,
    track_goals,
)

__all__ = [
    "goal_progress",
    "monthly_savings_needed",
    "progress_percent",
    "remaining_amount",
    "track_goals",
]
