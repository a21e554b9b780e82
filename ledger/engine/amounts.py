"""
Amount Rules

The two numeric rules every builder relies on, defined once:

- magnitude(): the absolute value used wherever a total must not depend
  on how the store signed an amount
- clamped_percentage(): a whole-number percentage in [0, 100]

Anything that is not a finite number (None, NaN, Infinity, garbage
strings) counts as zero. Rendering must never crash on a bad row.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

import structlog


logger = structlog.get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_amount(value: Any) -> Decimal:
    """
    Coerce a stored monetary value to a finite Decimal.

    Returns ZERO for missing or non-finite values.
    """
    if value is None:
        return ZERO
    if isinstance(value, bool):
        # bool is an int subclass; a flag is never an amount
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            # str() keeps floats from dragging binary noise into the Decimal
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            logger.debug("amount_unparseable", value=repr(value))
            return ZERO

    if not amount.is_finite():
        logger.debug("amount_not_finite", value=str(amount))
        return ZERO
    return amount


def magnitude(value: Any) -> Decimal:
    """Absolute value of a stored amount; ZERO when unusable."""
    return abs(to_amount(value))


def clamped_percentage(part: Any, whole: Any) -> int:
    """
    Whole-number share of part in whole, capped at 100.

    Returns 0 unless both part and whole are positive, so a zero or
    negative denominator never produces a division error, and a
    negative numerator never produces a negative percentage.
    Halves round up (49.5 -> 50).
    """
    part = to_amount(part)
    whole = to_amount(whole)
    if part <= ZERO or whole <= ZERO:
        return 0
    if part >= whole:
        return 100

    ratio = (part / whole * HUNDRED).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return min(100, int(ratio))
