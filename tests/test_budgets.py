"""Tests for the budget progress calculator."""

import pytest
from decimal import Decimal

from conftest import make_transaction
from ledger.engine.budgets import (
    REMOVED_CATEGORY_LABEL,
    budget_progress,
    budget_summary,
    budgetable_categories,
    budgets_progress,
    spent_by_category,
)
from ledger.models.ledger import Budget, Category, CategoryType, TransactionType


def make_budget(category_id="groceries", amount="100", **extra) -> Budget:
    return Budget(category_id=category_id, month=3, year=2024, amount=Decimal(amount), **extra)


class TestSpentByCategory:
    """Tests for spent_by_category."""

    def test_sums_expense_magnitudes(self):
        spent = spent_by_category([
            make_transaction(-70, category_id="groceries"),
            make_transaction(50, category_id="groceries"),
            make_transaction(10, category_id="fun"),
        ])
        assert spent == {"groceries": Decimal("120"), "fun": Decimal("10")}

    def test_uncategorized_and_non_expenses_are_left_out(self):
        spent = spent_by_category([
            make_transaction(70, category_id=None),
            make_transaction(500, type=TransactionType.INCOME, category_id="groceries"),
            make_transaction(5, type=TransactionType.TRANSFER, category_id="groceries"),
        ])
        assert spent == {}


class TestBudgetProgress:
    """Tests for budget_progress."""

    def test_over_budget_is_clamped_with_overage(self, categories):
        progress = budget_progress(make_budget(), Decimal("120"), categories[0])
        assert progress.percent == 100
        assert progress.is_over is True
        assert progress.overage == Decimal("20")
        assert progress.category_name == "Groceries"

    def test_under_budget(self, categories):
        progress = budget_progress(make_budget(), Decimal("45"), categories[0])
        assert progress.percent == 45
        assert progress.is_over is False
        assert progress.overage == Decimal("0")
        assert progress.remaining == Decimal("55")

    def test_exactly_at_limit_is_not_over(self, categories):
        progress = budget_progress(make_budget(), Decimal("100"), categories[0])
        assert progress.percent == 100
        assert progress.is_over is False

    def test_no_spend(self, categories):
        progress = budget_progress(make_budget(), Decimal("0"), categories[0])
        assert progress.percent == 0
        assert progress.is_over is False

    def test_zero_limit(self, categories):
        progress = budget_progress(make_budget(amount="0"), Decimal("15"), categories[0])
        assert progress.percent == 0
        assert progress.is_over is True
        assert progress.overage == Decimal("15")

    def test_deleted_category_uses_placeholder(self):
        progress = budget_progress(make_budget(category_id="gone"), Decimal("10"))
        assert progress.category_name == REMOVED_CATEGORY_LABEL
        assert progress.category_color is None

    def test_custom_placeholder(self):
        progress = budget_progress(
            make_budget(category_id="gone"), Decimal("10"), removed_label="Category removed"
        )
        assert progress.category_name == "Category removed"

    def test_non_finite_limit_counts_as_zero(self, categories):
        progress = budget_progress(make_budget(amount="NaN"), Decimal("10"), categories[0])
        assert progress.limit == Decimal("0")
        assert progress.percent == 0

    @pytest.mark.parametrize("spent", ["0", "1", "99.4", "99.5", "100", "1000"])
    @pytest.mark.parametrize("limit", ["0", "0.5", "100", "5000"])
    def test_percent_always_in_range(self, spent, limit):
        progress = budget_progress(make_budget(amount=limit), Decimal(spent))
        assert 0 <= progress.percent <= 100


class TestBudgetsProgress:
    """Tests for budgets_progress and budget_summary."""

    def test_one_entry_per_budget_in_order(self, categories):
        transactions = [
            make_transaction(120, category_id="groceries"),
            make_transaction(300, category_id="rent"),
            make_transaction(999, category_id=None),
        ]
        entries = budgets_progress(
            [make_budget("rent", "1000"), make_budget("groceries", "100")],
            transactions,
            categories,
        )
        assert [(e.category_name, e.spent, e.percent) for e in entries] == [
            ("Rent", Decimal("300"), 30),
            ("Groceries", Decimal("120"), 100),
        ]

    def test_duplicate_budgets_are_not_merged(self, categories):
        transactions = [make_transaction(60, category_id="groceries")]
        entries = budgets_progress(
            [make_budget(amount="100"), make_budget(amount="50")],
            transactions,
            categories,
        )
        assert len(entries) == 2
        assert [e.spent for e in entries] == [Decimal("60"), Decimal("60")]
        assert [e.is_over for e in entries] == [False, True]

    def test_empty_budgets(self, categories):
        assert budgets_progress([], [make_transaction(5)], categories) == []

    def test_summary_totals(self, categories):
        summary = budget_summary(
            3,
            2024,
            [make_budget("rent", "1000"), make_budget("groceries", "100")],
            [
                make_transaction(120, category_id="groceries"),
                make_transaction(800, category_id="rent"),
            ],
            categories,
        )
        assert summary.total_budgeted == Decimal("1100")
        assert summary.total_spent == Decimal("920")
        assert summary.over_budget_count == 1
        assert (summary.month, summary.year) == (3, 2024)

    def test_empty_summary(self):
        summary = budget_summary(1, 2024, [], [], [])
        assert summary.items == []
        assert summary.total_budgeted == Decimal("0")
        assert summary.total_spent == Decimal("0")


class TestBudgetableCategories:
    """Tests for budgetable_categories."""

    def test_expense_categories_without_budget(self, categories):
        available = budgetable_categories(categories, [make_budget("groceries")])
        assert [c.id for c in available] == ["rent", "fun"]

    def test_income_categories_are_never_offered(self):
        categories = [Category(id="s", name="Salary", type=CategoryType.INCOME)]
        assert budgetable_categories(categories, []) == []
