"""Tests for the category breakdown builder."""

from datetime import date
from decimal import Decimal

from conftest import make_transaction
from ledger.engine.breakdown import category_breakdown
from ledger.engine.lookup import FALLBACK_CATEGORY_COLOR
from ledger.engine.periods import in_period, month_interval
from ledger.engine.totals import period_totals
from ledger.models.ledger import Category, TransactionType


class TestCategoryBreakdown:
    """Tests for category_breakdown."""

    def test_missing_category_falls_back_to_outros(self, categories):
        slices = category_breakdown(
            [
                make_transaction(50, category_id="groceries"),
                make_transaction(30, category_id=None),
            ],
            categories,
        )
        assert [(s.name, s.value) for s in slices] == [
            ("Groceries", Decimal("50")),
            ("Outros", Decimal("30")),
        ]
        assert slices[1].color == FALLBACK_CATEGORY_COLOR
        assert slices[1].category_id is None

    def test_null_and_deleted_references_share_one_group(self, categories):
        slices = category_breakdown(
            [
                make_transaction(10, category_id=None),
                make_transaction(15, category_id="deleted-category"),
            ],
            categories,
        )
        assert len(slices) == 1
        assert slices[0].name == "Outros"
        assert slices[0].value == Decimal("25")

    def test_only_expenses_are_grouped(self, categories):
        slices = category_breakdown(
            [
                make_transaction(1000, type=TransactionType.INCOME, category_id="salary"),
                make_transaction(200, type=TransactionType.TRANSFER),
                make_transaction(5, category_id="fun"),
            ],
            categories,
        )
        assert [s.name for s in slices] == ["Fun"]

    def test_sorted_descending_by_magnitude(self, categories):
        slices = category_breakdown(
            [
                make_transaction(10, category_id="fun"),
                make_transaction(-300, category_id="rent"),
                make_transaction(45, category_id="groceries"),
                make_transaction(60, category_id="groceries"),
            ],
            categories,
        )
        assert [(s.name, s.value) for s in slices] == [
            ("Rent", Decimal("300")),
            ("Groceries", Decimal("105")),
            ("Fun", Decimal("10")),
        ]

    def test_ties_keep_first_seen_order(self, categories):
        slices = category_breakdown(
            [
                make_transaction(20, category_id="fun"),
                make_transaction(20, category_id=None),
                make_transaction(20, category_id="rent"),
            ],
            categories,
        )
        assert [s.name for s in slices] == ["Fun", "Outros", "Rent"]

    def test_category_colour_or_fallback(self, categories):
        slices = category_breakdown(
            [make_transaction(2, category_id="groceries"), make_transaction(1, category_id="fun")],
            categories,
        )
        assert slices[0].color == "#2e7d32"
        assert slices[1].color == FALLBACK_CATEGORY_COLOR  # Fun has no colour

    def test_real_category_named_like_fallback_stays_separate(self):
        categories = [Category(id="mine", name="Outros", color="#000000")]
        slices = category_breakdown(
            [make_transaction(5, category_id="mine"), make_transaction(3, category_id=None)],
            categories,
        )
        assert [(s.category_id, s.value) for s in slices] == [
            ("mine", Decimal("5")),
            (None, Decimal("3")),
        ]

    def test_custom_fallback(self):
        slices = category_breakdown(
            [make_transaction(3)],
            [],
            fallback_name="Other",
            fallback_color="#cccccc",
        )
        assert slices[0].name == "Other"
        assert slices[0].color == "#cccccc"

    def test_empty_input(self, categories):
        assert category_breakdown([], categories) == []
        assert category_breakdown([], []) == []

    def test_values_sum_to_period_expense(self, transactions, categories):
        march = in_period(transactions, month_interval(2024, 3))
        slices = category_breakdown(march, categories)
        assert sum(s.value for s in slices) == period_totals(march).expense

        every = category_breakdown(transactions, categories)
        assert sum(s.value for s in every) == period_totals(transactions).expense

    def test_accumulates_mixed_sign_rows_per_group(self, categories):
        slices = category_breakdown(
            [
                make_transaction(10, category_id="rent"),
                make_transaction(-15, category_id="rent"),
                make_transaction(5, category_id="gone"),
                make_transaction(-5, category_id=None),
            ],
            categories,
        )
        assert [(s.category_id, s.name, s.color, s.value) for s in slices] == [
            ("rent", "Rent", "#1565c0", Decimal("25")),
            (None, "Outros", FALLBACK_CATEGORY_COLOR, Decimal("10")),
        ]
