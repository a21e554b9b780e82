"""
Category Breakdown Builder

Groups expense transactions by category for the pie chart and its
legend. The largest category comes first.
"""

from decimal import Decimal
from typing import Iterable, Optional

from ledger.engine.amounts import ZERO, magnitude
from ledger.engine.lookup import (
    FALLBACK_CATEGORY_COLOR,
    FALLBACK_CATEGORY_NAME,
    LedgerLookup,
    ResolvedCategory,
)
from ledger.models.ledger import Category, Transaction, TransactionType
from ledger.models.reports import CategorySlice


def category_breakdown(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    fallback_name: str = FALLBACK_CATEGORY_NAME,
    fallback_color: str = FALLBACK_CATEGORY_COLOR,
) -> list[CategorySlice]:
    """
    Expense magnitude per category, largest first.

    Expenses with no category, or with a category that no longer
    exists, are pooled into one fallback slice. Slices with equal
    values keep the order in which their category was first seen.
    The values always add up to period_totals(transactions).expense.
    """
    lookup = LedgerLookup(
        categories=categories,
        fallback_name=fallback_name,
        fallback_color=fallback_color,
    )

    # dicts keep insertion order, which gives the tie-break for free
    totals: dict[Optional[str], Decimal] = {}
    resolved: dict[Optional[str], ResolvedCategory] = {}
    for transaction in transactions:
        if transaction.type != TransactionType.EXPENSE:
            continue

        category = lookup.resolve_category(transaction.category_id)
        key = category.category_id
        resolved.setdefault(key, category)
        totals[key] = totals.get(key, ZERO) + magnitude(transaction.amount)

    slices = [
        CategorySlice(
            category_id=key,
            name=resolved[key].name,
            color=resolved[key].color,
            value=value,
        )
        for key, value in totals.items()
    ]
    # sorted() is stable, including with reverse=True
    return sorted(slices, key=lambda s: s.value, reverse=True)
