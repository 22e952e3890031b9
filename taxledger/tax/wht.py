"""Withholding tax per expense transaction."""

from decimal import Decimal
from typing import Any

from taxledger.models.money import ZERO, to_money, to_rate


def wht(amount: Any, rate_percent: Any) -> Decimal:
    """
    Tax withheld from a payment at a flat percentage.

    A zero, missing or invalid rate returns exactly zero.
    """
    rate = to_rate(rate_percent, field="withholding_rate")
    if not rate:
        return ZERO
    return to_money(amount) * rate / 100
