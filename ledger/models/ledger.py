"""
Ledger Data Models

These models define the records handed to the report builders.
They are designed to:
1. Load rows exactly as the persistence layer returns them
2. Stay immutable while a report is being built
3. Tolerate imperfect data (the builders clean it up at read time)

DESIGN DECISION: Amount fields accept NaN/Infinity on load.
Rejecting them here would make a single bad row crash a whole page;
the builders treat non-finite amounts as zero instead.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def new_record_id() -> str:
    """Generate an identifier for a record not yet persisted."""
    return str(uuid4())


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class AccountType(str, Enum):
    """Kinds of account a user can hold."""
    CHECKING = "checking"
    SAVINGS = "savings"
    INVESTMENT = "investment"
    CASH = "cash"


class CategoryType(str, Enum):
    """
    Declared type of a category.

    A category's type should match the transactions filed under it,
    but nothing downstream relies on that.
    """
    EXPENSE = "expense"
    INCOME = "income"
    TRANSFER = "transfer"


class TransactionType(str, Enum):
    """Direction of a transaction."""
    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"  # Excluded from income/expense totals


# =============================================================================
# BASE
# =============================================================================

class LedgerRecord(BaseModel):
    """Fields shared by every ledger entity."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(
        default_factory=new_record_id,
        min_length=1,
        description="Record identifier issued by the store"
    )
    user_id: str = Field(
        default="",
        description="Owner of the record"
    )


# =============================================================================
# ENTITIES
# =============================================================================

class Account(LedgerRecord):
    """
    A place money is held.

    The balance is maintained by whatever posts transactions;
    reports only read and sum it.
    """

    name: str = Field(
        ...,
        description="Display name"
    )
    type: AccountType = Field(
        default=AccountType.CHECKING,
        description="Account kind"
    )
    balance: Optional[Decimal] = Field(
        default=Decimal("0"),
        allow_inf_nan=True,
        description="Signed balance; missing counts as zero"
    )
    color: Optional[str] = None
    icon: Optional[str] = None
    is_active: bool = True


class Category(LedgerRecord):
    """A label transactions and budgets are filed under."""

    name: str = Field(
        ...,
        description="Display name"
    )
    type: CategoryType = Field(
        default=CategoryType.EXPENSE,
        description="Declared category type"
    )
    parent_id: Optional[str] = Field(
        default=None,
        description="Parent category, for display hierarchy only"
    )
    color: Optional[str] = None
    icon: Optional[str] = None


class Transaction(LedgerRecord):
    """
    A single ledger movement.

    CRITICAL: Expense amounts may be stored positive or negative.
    Aggregations always use the magnitude, see ledger.engine.amounts.
    """

    account_id: str = Field(
        ...,
        description="Account the movement was posted to"
    )
    category_id: Optional[str] = Field(
        default=None,
        description="Category, if the user picked one"
    )
    description: str = Field(
        default="",
        description="Free-text description"
    )
    amount: Decimal = Field(
        ...,
        allow_inf_nan=True,
        description="Monetary amount; sign depends on how it was stored"
    )
    type: TransactionType
    date: dt.date = Field(
        ...,
        description="Calendar day of the movement"
    )

    is_consolidated: bool = True

    # Recurrence
    is_recurring: bool = False
    recurrence_rule: Optional[str] = None
    recurrence_group_id: Optional[str] = None

    # Installments
    installment_current: Optional[int] = Field(default=None, ge=1)
    installment_total: Optional[int] = Field(default=None, ge=1)

    notes: Optional[str] = None
    attachment_url: Optional[str] = None
    transfer_peer_id: Optional[str] = Field(
        default=None,
        description="Other half of a linked transfer pair"
    )


class Budget(LedgerRecord):
    """
    A monthly spending limit for one category.

    At most one budget should exist per (owner, category, month, year).
    The store enforces that; the builders do not.
    """

    category_id: str = Field(
        ...,
        description="Category the limit applies to"
    )
    month: int = Field(
        ...,
        ge=1,
        le=12,
        description="Calendar month (1-12)"
    )
    year: int = Field(
        ...,
        ge=1,
        le=9999,
        description="Calendar year"
    )
    amount: Decimal = Field(
        ...,
        allow_inf_nan=True,
        description="Spending limit for the month"
    )
    created_at: Optional[dt.datetime] = None


class Goal(LedgerRecord):
    """A savings target."""

    title: str = Field(
        ...,
        description="Display title"
    )
    description: Optional[str] = None
    target_amount: Decimal = Field(
        ...,
        allow_inf_nan=True,
        description="Amount to reach (expected > 0)"
    )
    current_amount: Decimal = Field(
        default=Decimal("0"),
        allow_inf_nan=True,
        description="Amount saved so far (expected >= 0)"
    )
    target_date: Optional[dt.date] = None
    image_url: Optional[str] = None
    is_completed: bool = Field(
        default=False,
        description="Set by the user; never derived from progress"
    )
    created_at: Optional[dt.datetime] = None


# =============================================================================
# SNAPSHOT
# =============================================================================

class LedgerSnapshot(BaseModel):
    """
    Everything one report needs, fetched up front.

    The reporter reads from this and nothing else, so a refresh of the
    underlying store mid-build cannot leak into a result.
    """

    model_config = ConfigDict(frozen=True)

    accounts: tuple[Account, ...] = ()
    categories: tuple[Category, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    budgets: tuple[Budget, ...] = ()
    goals: tuple[Goal, ...] = ()
