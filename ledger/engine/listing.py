"""
Transaction Listing

Display rows for the transactions page and the dashboard's
"latest transactions" card.
"""

from typing import Iterable, Optional

from ledger.engine.amounts import magnitude
from ledger.engine.lookup import LedgerLookup
from ledger.models.ledger import (
    Account,
    Category,
    CategoryType,
    Transaction,
    TransactionType,
)
from ledger.models.reports import TransactionLine


UNCATEGORIZED_LABEL = "Sem categoria"
MISSING_ACCOUNT_LABEL = "Conta não encontrada"

_SIGNS = {
    TransactionType.INCOME: "+ ",
    TransactionType.EXPENSE: "- ",
    TransactionType.TRANSFER: "",
}


def installment_label(transaction: Transaction) -> Optional[str]:
    """'3/10' for the third of ten installments; None for single payments."""
    total = transaction.installment_total
    if not total or total <= 1:
        return None
    return f"{transaction.installment_current or 1}/{total}"


def transaction_line(
    transaction: Transaction,
    lookup: LedgerLookup,
    uncategorized_label: str = UNCATEGORIZED_LABEL,
    missing_account_label: str = MISSING_ACCOUNT_LABEL,
) -> TransactionLine:
    return TransactionLine(
        transaction_id=transaction.id,
        date=transaction.date,
        description=transaction.description,
        type=transaction.type,
        amount=magnitude(transaction.amount),
        sign=_SIGNS[transaction.type],
        account_name=lookup.account_name(transaction.account_id, missing_account_label),
        category_name=lookup.category_name(transaction.category_id, uncategorized_label),
        is_recurring=transaction.is_recurring,
        installment_label=installment_label(transaction),
    )


def transaction_lines(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    accounts: Iterable[Account],
    uncategorized_label: str = UNCATEGORIZED_LABEL,
    missing_account_label: str = MISSING_ACCOUNT_LABEL,
) -> list[TransactionLine]:
    """One line per transaction, in the order given."""
    lookup = LedgerLookup(categories=categories, accounts=accounts)
    return [
        transaction_line(t, lookup, uncategorized_label, missing_account_label)
        for t in transactions
    ]


def recent_transactions(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    accounts: Iterable[Account],
    limit: int = 5,
    uncategorized_label: str = UNCATEGORIZED_LABEL,
    missing_account_label: str = MISSING_ACCOUNT_LABEL,
) -> list[TransactionLine]:
    """
    The first limit lines.

    The store returns transactions newest first, so these are the latest.
    """
    if limit <= 0:
        return []
    return transaction_lines(
        list(transactions)[:limit],
        categories,
        accounts,
        uncategorized_label,
        missing_account_label,
    )


def categories_for_type(
    categories: Iterable[Category],
    transaction_type: TransactionType,
) -> list[Category]:
    """Categories whose declared type matches a transaction type."""
    wanted = CategoryType(transaction_type.value)
    return [c for c in categories if c.type == wanted]
