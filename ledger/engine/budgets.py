"""
Budget Progress Calculator

Joins each budget with what was actually spent in its category during
the budget's month.

DESIGN DECISION: The store should hold at most one budget per
(category, month, year), but nothing here checks that. Every budget
record received yields its own progress entry; two budgets on one
category both see the full spend of that category.

DESIGN DECISION: Only transactions with a category can count against
a budget. Uncategorized spend sits outside every budget.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional

from ledger.engine.amounts import ZERO, clamped_percentage, magnitude, to_amount
from ledger.engine.lookup import LedgerLookup
from ledger.models.ledger import (
    Budget,
    Category,
    CategoryType,
    Transaction,
    TransactionType,
)
from ledger.models.reports import BudgetProgress, BudgetSummary


REMOVED_CATEGORY_LABEL = "Categoria removida"


def spent_by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Expense magnitude per category id; uncategorized spend is left out."""
    spent: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for transaction in transactions:
        if transaction.type == TransactionType.EXPENSE and transaction.category_id:
            spent[transaction.category_id] += magnitude(transaction.amount)
    return dict(spent)


def budget_progress(
    budget: Budget,
    spent: Decimal,
    category: Optional[Category] = None,
    removed_label: str = REMOVED_CATEGORY_LABEL,
) -> BudgetProgress:
    """
    Progress of one budget given the spend in its category.

    percent is clamped to 100 even when spend exceeds the limit; the
    excess is reported separately as overage. A limit of zero or less
    always shows 0%.
    """
    limit = to_amount(budget.amount)
    spent = to_amount(spent)
    is_over = spent > limit

    return BudgetProgress(
        budget_id=budget.id,
        category_id=budget.category_id,
        category_name=category.name if category else removed_label,
        category_color=category.color if category else None,
        month=budget.month,
        year=budget.year,
        limit=limit,
        spent=spent,
        percent=clamped_percentage(spent, limit),
        is_over=is_over,
        overage=spent - limit if is_over else ZERO,
    )


def budgets_progress(
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    removed_label: str = REMOVED_CATEGORY_LABEL,
) -> list[BudgetProgress]:
    """
    One progress entry per budget, in the order the budgets were given.

    transactions must already be narrowed to the budgets' month.
    """
    spent = spent_by_category(transactions)
    lookup = LedgerLookup(categories=categories)

    return [
        budget_progress(
            budget,
            spent.get(budget.category_id, ZERO),
            category=lookup.category(budget.category_id),
            removed_label=removed_label,
        )
        for budget in budgets
    ]


def budget_summary(
    month: int,
    year: int,
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    removed_label: str = REMOVED_CATEGORY_LABEL,
) -> BudgetSummary:
    """
    Progress for a month's budgets plus the page totals.

    Totals are summed over the entries, so a duplicated budget is
    counted twice on both sides.
    """
    items = budgets_progress(budgets, transactions, categories, removed_label)
    return BudgetSummary(
        month=month,
        year=year,
        total_budgeted=sum((item.limit for item in items), ZERO),
        total_spent=sum((item.spent for item in items), ZERO),
        items=items,
    )


def budgetable_categories(
    categories: Iterable[Category],
    budgets: Iterable[Budget],
) -> list[Category]:
    """Expense categories that have no budget yet among budgets."""
    taken = {budget.category_id for budget in budgets}
    return [
        c for c in categories
        if c.type == CategoryType.EXPENSE and c.id not in taken
    ]
