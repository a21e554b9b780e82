"""
Balance & Totals Calculator

- total_balance(): what the user holds across every account
- period_totals(): income vs. expense for transactions the caller
  has already narrowed to a period
"""

from decimal import Decimal
from typing import Iterable

from ledger.engine.amounts import ZERO, magnitude, to_amount
from ledger.models.ledger import Account, Transaction, TransactionType
from ledger.models.reports import PeriodTotals


def total_balance(accounts: Iterable[Account]) -> Decimal:
    """
    Sum of every account balance, inactive accounts included.

    A missing or non-finite balance contributes zero.
    """
    return sum((to_amount(account.balance) for account in accounts), ZERO)


def period_totals(transactions: Iterable[Transaction]) -> PeriodTotals:
    """
    Split transactions into income and expense totals.

    Income is summed as stored; expenses are summed by magnitude so a
    negatively stored expense never subtracts twice. Transfers count
    toward neither.
    """
    income = ZERO
    expense = ZERO

    for transaction in transactions:
        if transaction.type == TransactionType.INCOME:
            income += to_amount(transaction.amount)
        elif transaction.type == TransactionType.EXPENSE:
            expense += magnitude(transaction.amount)

    return PeriodTotals(income=income, expense=expense)
