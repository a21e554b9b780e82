"""Tests for the goal progress calculator."""

import pytest
from datetime import date
from decimal import Decimal

from ledger.engine.goals import describe_goal, goal_progress, goals_progress
from ledger.models.ledger import Goal


def make_goal(target, current="0", **extra) -> Goal:
    return Goal(title="Trip", target_amount=Decimal(target), current_amount=Decimal(current), **extra)


class TestGoalProgress:
    """Tests for goal_progress."""

    def test_simple_progress(self):
        assert goal_progress(make_goal("2000", "500")) == 25

    def test_rounds_half_up(self):
        assert goal_progress(make_goal("200", "1")) == 1  # 0.5%

    def test_capped_at_100(self):
        assert goal_progress(make_goal("100", "250")) == 100

    def test_zero_target(self):
        assert goal_progress(make_goal("0", "100")) == 0

    def test_negative_saved_amount_shows_zero(self):
        goal = make_goal("100", "-40")
        assert goal_progress(goal) == 0
        assert goal.current_amount == Decimal("-40")  # untouched

    @pytest.mark.parametrize("current", ["0", "0.01", "50", "99.99", "100", "1e6"])
    @pytest.mark.parametrize("target", ["0", "0.01", "100", "1e6"])
    def test_always_in_range(self, target, current):
        assert 0 <= goal_progress(make_goal(target, current)) <= 100


class TestDescribeGoal:
    """Tests for describe_goal."""

    def test_display_values(self):
        progress = describe_goal(make_goal("2000", "500", target_date=date(2025, 1, 1)))
        assert progress.percent == 25
        assert progress.remaining == Decimal("1500")
        assert progress.target_date == date(2025, 1, 1)

    def test_completion_flag_is_passed_through(self):
        # 10% saved, but the user marked it complete
        progress = describe_goal(make_goal("1000", "100", is_completed=True))
        assert progress.is_completed is True
        assert progress.percent == 10

        # fully saved, but not marked complete
        assert describe_goal(make_goal("100", "100")).is_completed is False

    def test_negative_saved_amount_displays_as_zero(self):
        progress = describe_goal(make_goal("100", "-5"))
        assert progress.current_amount == Decimal("0")
        assert progress.remaining == Decimal("100")

    def test_goals_progress_keeps_order(self, goals):
        result = goals_progress(goals)
        assert [(g.goal_id, g.percent) for g in result] == [("trip", 25), ("car", 0)]

    def test_empty(self):
        assert goals_progress([]) == []
