"""Value-added tax extraction per transaction."""

from decimal import Decimal
from typing import Any

from taxledger.models.money import ZERO, to_money
from taxledger.models.transaction import TaxMode
from taxledger.tax.rates import (
    VAT_INCLUSIVE_DENOMINATOR,
    VAT_INCLUSIVE_NUMERATOR,
    VAT_RATE,
)


def vat(amount: Any, mode: Any) -> Decimal:
    """
    VAT contained in (inclusive) or added on top of (exclusive) an amount.

    vat(107, VAT_INCLUSIVE) == 7, vat(100, VAT_EXCLUSIVE) == 7.
    Invalid amounts count as zero; an unknown mode means no VAT.
    """
    mode = TaxMode.parse(mode)
    if mode == TaxMode.NO_VAT:
        return ZERO

    value = to_money(amount)
    if mode == TaxMode.VAT_INCLUSIVE:
        return value * VAT_INCLUSIVE_NUMERATOR / VAT_INCLUSIVE_DENOMINATOR
    return value * VAT_RATE


def vat_base(amount: Any, mode: Any) -> Decimal:
    """Pre-tax base of an amount recorded under the given mode."""
    value = to_money(amount)
    if TaxMode.parse(mode) == TaxMode.VAT_INCLUSIVE:
        return value - vat(value, TaxMode.VAT_INCLUSIVE)
    return value
