"""
Goal Progress Calculator
"""

from typing import Iterable

from ledger.engine.amounts import ZERO, clamped_percentage, to_amount
from ledger.models.ledger import Goal
from ledger.models.reports import GoalProgress


def goal_progress(goal: Goal) -> int:
    """
    Percent of the target saved, in [0, 100].

    A target of zero or less shows 0%. A negative saved amount is
    shown as 0% too; the stored value is left alone.
    """
    return clamped_percentage(goal.current_amount, goal.target_amount)


def describe_goal(goal: Goal) -> GoalProgress:
    """Display values for a goal. is_completed is passed through untouched."""
    target = to_amount(goal.target_amount)
    current = max(to_amount(goal.current_amount), ZERO)

    return GoalProgress(
        goal_id=goal.id,
        title=goal.title,
        description=goal.description,
        target_amount=target,
        current_amount=current,
        percent=goal_progress(goal),
        remaining=max(target - current, ZERO),
        target_date=goal.target_date,
        is_completed=goal.is_completed,
    )


def goals_progress(goals: Iterable[Goal]) -> list[GoalProgress]:
    return [describe_goal(goal) for goal in goals]
