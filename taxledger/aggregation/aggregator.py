"""
Period Aggregator

Filters and groups a transaction collection into the inputs the tax
calculators and the budget evaluator need.

GUARANTEES:
- Never mutates or reorders the caller's sequence
- Every result is a new list
- Ordering is always chosen explicitly by the caller (SortOrder); the
  aggregator has no implicit default
"""

from collections.abc import Iterable
from decimal import Decimal
from enum import Enum

from taxledger.models.money import ZERO
from taxledger.models.period import MonthPeriod, Period
from taxledger.models.reports import CategoryTotal, TrendPoint
from taxledger.models.transaction import (
    WITHHOLDING_RATES,
    Transaction,
    TransactionKind,
)


class SortOrder(str, Enum):
    """Result ordering."""
    NEWEST_FIRST = "newest_first"  # lists and recent activity
    OLDEST_FIRST = "oldest_first"  # trends and time series


def _created_key(tx: Transaction) -> float:
    if tx.created_at is None:
        return float("-inf")
    return tx.created_at.timestamp()


def sort_transactions(
    transactions: Iterable[Transaction],
    order: SortOrder,
) -> list[Transaction]:
    """
    Sort by date, then insertion time.

    Records with identical keys keep their input order in both directions.
    """
    return sorted(
        transactions,
        key=lambda tx: (tx.occurred_on, _created_key(tx)),
        reverse=SortOrder(order) == SortOrder.NEWEST_FIRST,
    )


def in_period(
    transactions: Iterable[Transaction],
    period: Period,
    *,
    order: SortOrder,
) -> list[Transaction]:
    """Transactions whose date falls inside the period, sorted by order."""
    return sort_transactions(
        (tx for tx in transactions if period.contains(tx.occurred_on)),
        order,
    )


# =========================
# GROUPING
# =========================
def by_kind(transactions: Iterable[Transaction]) -> dict[TransactionKind, list[Transaction]]:
    """Split into income and expense lists (both keys always present)."""
    groups = {TransactionKind.INCOME: [], TransactionKind.EXPENSE: []}
    for tx in transactions:
        groups[tx.kind].append(tx)
    return groups


def incomes(transactions: Iterable[Transaction]) -> list[Transaction]:
    return [tx for tx in transactions if tx.is_income]


def expenses(transactions: Iterable[Transaction]) -> list[Transaction]:
    return [tx for tx in transactions if tx.is_expense]


def tax_invoice_expenses(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Expenses backed by a full tax invoice (input VAT eligible)."""
    return [tx for tx in transactions if tx.is_expense and tx.has_tax_invoice]


def withholding_buckets(transactions: Iterable[Transaction]) -> dict[int, list[Transaction]]:
    """
    Expense rows grouped by withholding rate.

    Keys are always 1, 2, 3 and 5 in that order; zero-rate rows are left out.
    """
    buckets = {rate: [] for rate in WITHHOLDING_RATES}
    for tx in transactions:
        if tx.is_expense and tx.withholding_rate in buckets:
            buckets[tx.withholding_rate].append(tx)
    return buckets


# =========================
# TOTALS
# =========================
def total(transactions: Iterable[Transaction]) -> Decimal:
    return sum((tx.amount for tx in transactions), ZERO)


def totals_by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Sum of amounts per category, in first-seen order."""
    totals: dict[str, Decimal] = {}
    for tx in transactions:
        totals[tx.category] = totals.get(tx.category, ZERO) + tx.amount
    return totals


def expense_mix(transactions: Iterable[Transaction], top: int) -> list[CategoryTotal]:
    """Largest expense categories, biggest first."""
    totals = totals_by_category(expenses(transactions))
    ranked = sorted(
        (CategoryTotal(category=category, total=amount) for category, amount in totals.items()),
        key=lambda item: item.total,
        reverse=True,
    )
    return ranked[:top]


def monthly_trend(
    transactions: Iterable[Transaction],
    end: MonthPeriod,
    months: int,
) -> list[TrendPoint]:
    """
    Income and expense per calendar month, oldest month first.

    Covers the `months` months ending with `end`. Months without records
    are present with zero totals.
    """
    points = {}
    for offset in range(months - 1, -1, -1):
        month = end.shifted(-offset)
        points[(month.year, month.month)] = TrendPoint(year=month.year, month=month.month)

    for tx in transactions:
        point = points.get((tx.occurred_on.year, tx.occurred_on.month))
        if point is None:
            continue
        if tx.is_income:
            point.income += tx.amount
        else:
            point.expense += tx.amount

    return list(points.values())


def latest_activity(transactions: Iterable[Transaction], limit: int) -> list[Transaction]:
    """The `limit` most recent transactions."""
    return sort_transactions(transactions, SortOrder.NEWEST_FIRST)[:limit]
