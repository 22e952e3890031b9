"""
Summary calculations for tax returns and the dashboard.

All figures are computed from the transaction list passed in.
No summary data is stored or cached; callers scope the list to a period
first (see taxledger.aggregation).
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from taxledger.aggregation.aggregator import (
    incomes,
    tax_invoice_expenses,
    total,
    withholding_buckets,
)
from taxledger.models.money import ZERO
from taxledger.models.reports import VatSummary, WhtBucket, WhtSummary
from taxledger.models.transaction import TaxMode, Transaction
from taxledger.tax.vat import vat
from taxledger.tax.wht import wht


def output_vat(transactions: Iterable[Transaction]) -> Decimal:
    """VAT collected on sales, each sale under its own tax mode."""
    return sum(
        (vat(tx.amount, tx.tax_mode) for tx in transactions if tx.is_income),
        ZERO,
    )


def input_vat(transactions: Iterable[Transaction]) -> Decimal:
    """
    VAT claimable on purchases backed by a tax invoice.

    Purchase amounts are treated as the pre-tax base.
    """
    return sum(
        (vat(tx.amount, TaxMode.VAT_EXCLUSIVE) for tx in tax_invoice_expenses(transactions)),
        ZERO,
    )


def vat_summary(transactions: Sequence[Transaction]) -> VatSummary:
    """
    PP.30 figures: sales and output VAT against invoiced purchases and
    input VAT.
    """
    purchases = tax_invoice_expenses(transactions)

    out_vat = output_vat(transactions)
    in_vat = input_vat(transactions)
    return VatSummary(
        total_sales=total(incomes(transactions)),
        output_vat=out_vat,
        total_purchases=total(purchases),
        input_vat=in_vat,
        net_vat_payable=out_vat - in_vat,
    )


def wht_summary(transactions: Sequence[Transaction]) -> WhtSummary:
    """Withholding tax per rate, only for rates that have rows."""
    buckets = []
    for rate, rows in withholding_buckets(transactions).items():
        if not rows:
            continue
        buckets.append(WhtBucket(
            rate=rate,
            base_amount=total(rows),
            tax_amount=sum((wht(tx.amount, rate) for tx in rows), ZERO),
            count=len(rows),
        ))

    return WhtSummary(
        buckets=buckets,
        total_wht=sum((bucket.tax_amount for bucket in buckets), ZERO),
    )
