"""
Ledger Export Formatter

Flattens transactions into CSV text for the download sink. The document
is assembled here byte for byte; handing it to the browser or writing it
to disk is the caller's job.

Format:
- Header row with fixed column names
- One row per transaction, in the order given (callers sort and filter)
- Minimal quoting: a field is quoted when it contains the delimiter,
  a quote or a line break, with embedded quotes doubled, so any
  CSV reader splits rows back exactly
- "\\n" line endings, including after the last row
"""

import csv
import io
from datetime import date
from typing import Iterable

from ledger.engine.amounts import to_amount
from ledger.engine.lookup import LedgerLookup
from ledger.models.ledger import Account, Category, Transaction
from ledger.models.reports import ExportDocument


EXPORT_COLUMNS = ("Date", "Description", "Type", "Amount", "Category", "Account")

DEFAULT_FILENAME_PREFIX = "transacoes"


def export_row(transaction: Transaction, lookup: LedgerLookup) -> list[str]:
    """Field values for one transaction; missing names are left empty."""
    return [
        transaction.date.isoformat(),
        transaction.description,
        transaction.type.value,
        format(to_amount(transaction.amount), "f"),
        lookup.category_name(transaction.category_id),
        lookup.account_name(transaction.account_id),
    ]


def export_transactions(
    transactions: Iterable[Transaction],
    categories: Iterable[Category] = (),
    accounts: Iterable[Account] = (),
    delimiter: str = ",",
) -> str:
    """Render transactions as CSV text, header first."""
    lookup = LedgerLookup(categories=categories, accounts=accounts)

    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=delimiter,
        quotechar='"',
        quoting=csv.QUOTE_MINIMAL,
        doublequote=True,
        lineterminator="\n",
    )
    writer.writerow(EXPORT_COLUMNS)
    for transaction in transactions:
        writer.writerow(export_row(transaction, lookup))

    return buffer.getvalue()


def export_filename(day: date, prefix: str = DEFAULT_FILENAME_PREFIX) -> str:
    """e.g. 'transacoes_2024-03-15.csv'"""
    return f"{prefix}_{day.isoformat()}.csv"


def build_export(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    accounts: Iterable[Account],
    day: date,
    delimiter: str = ",",
    prefix: str = DEFAULT_FILENAME_PREFIX,
) -> ExportDocument:
    """Export text plus the file name and row count the sink needs."""
    transactions = list(transactions)
    return ExportDocument(
        filename=export_filename(day, prefix),
        content=export_transactions(transactions, categories, accounts, delimiter),
        row_count=len(transactions),
    )
