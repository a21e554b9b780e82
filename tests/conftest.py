"""
Shared ledger fixtures.

One owner, three accounts, a handful of categories and a few months of
transactions around March 2024.
"""

from datetime import date
from decimal import Decimal

import pytest

from ledger.models.ledger import (
    Account,
    AccountType,
    Budget,
    Category,
    CategoryType,
    Goal,
    LedgerSnapshot,
    Transaction,
    TransactionType,
)


USER_ID = "user-1"


def make_transaction(
    amount,
    type=TransactionType.EXPENSE,
    day=date(2024, 3, 10),
    category_id=None,
    account_id="checking",
    description="",
    **extra,
) -> Transaction:
    return Transaction(
        user_id=USER_ID,
        account_id=account_id,
        category_id=category_id,
        description=description,
        amount=Decimal(str(amount)),
        type=type,
        date=day,
        **extra,
    )


@pytest.fixture
def user_id() -> str:
    return USER_ID


@pytest.fixture
def categories() -> list[Category]:
    return [
        Category(id="groceries", user_id=USER_ID, name="Groceries", color="#2e7d32"),
        Category(id="rent", user_id=USER_ID, name="Rent", color="#1565c0"),
        Category(id="fun", user_id=USER_ID, name="Fun"),
        Category(id="salary", user_id=USER_ID, name="Salary", type=CategoryType.INCOME),
    ]


@pytest.fixture
def accounts() -> list[Account]:
    return [
        Account(id="checking", user_id=USER_ID, name="Checking", balance=Decimal("1500.50")),
        Account(
            id="savings",
            user_id=USER_ID,
            name="Savings",
            type=AccountType.SAVINGS,
            balance=Decimal("3000"),
        ),
        Account(
            id="old-wallet",
            user_id=USER_ID,
            name="Old wallet",
            type=AccountType.CASH,
            balance=Decimal("-20.25"),
            is_active=False,
        ),
    ]


@pytest.fixture
def transactions() -> list[Transaction]:
    """Newest first, the way the store returns them."""
    return [
        make_transaction(40, day=date(2024, 3, 31), category_id="fun", description="Cinema"),
        make_transaction(
            3000, type=TransactionType.INCOME, day=date(2024, 3, 5), category_id="salary"
        ),
        make_transaction(-120, day=date(2024, 3, 3), category_id="groceries"),
        make_transaction(800, day=date(2024, 3, 1), category_id="rent"),
        make_transaction(
            500, type=TransactionType.TRANSFER, day=date(2024, 2, 20), account_id="savings"
        ),
        make_transaction(60, day=date(2024, 2, 14), category_id="groceries"),
        make_transaction(
            2800, type=TransactionType.INCOME, day=date(2024, 2, 5), category_id="salary"
        ),
        make_transaction(25, day=date(2023, 10, 1), category_id="deleted-category"),
    ]


@pytest.fixture
def budgets() -> list[Budget]:
    return [
        Budget(id="b-groceries", user_id=USER_ID, category_id="groceries", month=3, year=2024, amount=Decimal("100")),
        Budget(id="b-rent", user_id=USER_ID, category_id="rent", month=3, year=2024, amount=Decimal("1000")),
        Budget(id="b-feb", user_id=USER_ID, category_id="groceries", month=2, year=2024, amount=Decimal("80")),
    ]


@pytest.fixture
def goals() -> list[Goal]:
    return [
        Goal(id="trip", user_id=USER_ID, title="Trip", target_amount=Decimal("2000"), current_amount=Decimal("500")),
        Goal(id="car", user_id=USER_ID, title="Car", target_amount=Decimal("0"), current_amount=Decimal("100")),
    ]


@pytest.fixture
def snapshot(accounts, categories, transactions, budgets, goals) -> LedgerSnapshot:
    return LedgerSnapshot(
        accounts=tuple(accounts),
        categories=tuple(categories),
        transactions=tuple(transactions),
        budgets=tuple(budgets),
        goals=tuple(goals),
    )
