"""Period aggregation package."""

from taxledger.aggregation.aggregator import (
    SortOrder,
    by_kind,
    expense_mix,
    expenses,
    in_period,
    incomes,
    latest_activity,
    monthly_trend,
    sort_transactions,
    tax_invoice_expenses,
    total,
    totals_by_category,
    withholding_buckets,
)

__all__ = [
    "SortOrder",
    "by_kind",
    "expense_mix",
    "expenses",
    "in_period",
    "incomes",
    "latest_activity",
    "monthly_trend",
    "sort_transactions",
    "tax_invoice_expenses",
    "total",
    "totals_by_category",
    "withholding_buckets",
]
