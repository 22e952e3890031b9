"""
Money Coercion

DESIGN DECISION: The engine never rejects a number. Anything that is not a
finite, non-negative amount becomes zero before it reaches a calculator.
Validation with user-facing messages belongs to the form layer.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")


def to_money(value: Any, field: str = "amount") -> Decimal:
    """
    Coerce an arbitrary value to a non-negative, finite Decimal.

    None, empty or unparseable strings, booleans, NaN, infinities and
    negative numbers all become Decimal("0").
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        number = _parse(str(value))
    elif isinstance(value, str):
        number = _parse(value.strip().replace(",", ""))
    else:
        number = None

    if number is None or not number.is_finite() or number < 0:
        logger.warning("invalid_number_coerced", field=field, value=repr(value))
        return ZERO

    return number


def to_rate(value: Any, field: str = "rate") -> Decimal:
    """Coerce a percentage the same way as an amount."""
    return to_money(value, field=field)


def _parse(text: str):
    if not text:
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None
