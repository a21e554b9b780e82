"""
Reference Lookup with Fallback

Transactions and budgets point at categories and accounts by id, and
those ids may be null or refer to records that were since deleted.
Every builder that joins on them goes through LedgerLookup, so what a
missing reference turns into is decided in exactly one place.
"""

from typing import Iterable, NamedTuple, Optional

import structlog

from ledger.models.ledger import Account, Category


logger = structlog.get_logger(__name__)

FALLBACK_CATEGORY_NAME = "Outros"
FALLBACK_CATEGORY_COLOR = "#94a3b8"


class ResolvedCategory(NamedTuple):
    """A category reference after fallback resolution."""

    category_id: Optional[str]  # None means the fallback was used
    name: str
    color: str


class LedgerLookup:
    """
    Id-indexed view over categories and accounts.

    If the same id appears twice, the later record wins.
    """

    def __init__(
        self,
        categories: Iterable[Category] = (),
        accounts: Iterable[Account] = (),
        fallback_name: str = FALLBACK_CATEGORY_NAME,
        fallback_color: str = FALLBACK_CATEGORY_COLOR,
    ):
        self._categories = {c.id: c for c in categories}
        self._accounts = {a.id: a for a in accounts}
        self.fallback_name = fallback_name
        self.fallback_color = fallback_color

    def category(self, category_id: Optional[str]) -> Optional[Category]:
        if category_id is None:
            return None
        return self._categories.get(category_id)

    def account(self, account_id: Optional[str]) -> Optional[Account]:
        if account_id is None:
            return None
        return self._accounts.get(account_id)

    def resolve_category(self, category_id: Optional[str]) -> ResolvedCategory:
        """
        Name and colour to display for a category reference.

        Null and dangling references both collapse into the fallback group.
        A category without a colour of its own gets the fallback colour.
        """
        category = self.category(category_id)
        if category is None:
            if category_id is not None:
                logger.debug("category_reference_missing", category_id=category_id)
            return ResolvedCategory(None, self.fallback_name, self.fallback_color)

        return ResolvedCategory(
            category.id,
            category.name,
            category.color or self.fallback_color,
        )

    def category_name(self, category_id: Optional[str], default: str = "") -> str:
        category = self.category(category_id)
        return category.name if category else default

    def account_name(self, account_id: Optional[str], default: str = "") -> str:
        account = self.account(account_id)
        if account is None and account_id is not None:
            logger.debug("account_reference_missing", account_id=account_id)
        return account.name if account else default
