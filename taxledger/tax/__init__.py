"""Tax calculators package."""

from taxledger.tax.income_tax import (
    allowable_donation,
    allowance_total,
    capped_insurance,
    expense_deduction,
    marginal_rate,
    net_taxable_income,
    resolve_income_tax,
    tax_by_bracket,
    tax_owed,
)
from taxledger.tax.vat import vat, vat_base
from taxledger.tax.wht import wht

__all__ = [
    # VAT / WHT
    "vat",
    "vat_base",
    "wht",
    # Personal income tax
    "allowable_donation",
    "allowance_total",
    "capped_insurance",
    "expense_deduction",
    "marginal_rate",
    "net_taxable_income",
    "resolve_income_tax",
    "tax_by_bracket",
    "tax_owed",
]
