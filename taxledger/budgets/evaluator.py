"""
Budget Status Evaluator

Compares spend per category against the user's budget ceilings.

GUARANTEES:
- Spend is recomputed from the supplied transactions on every call
- Only budgeted categories appear in the result
- A category never gets an invented zero-ceiling budget
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Optional

from taxledger.aggregation.aggregator import (
    SortOrder,
    expenses,
    in_period,
    totals_by_category,
)
from taxledger.models.budget import Budget, BudgetState, BudgetStatus
from taxledger.models.money import ZERO, to_money
from taxledger.models.period import Period
from taxledger.models.transaction import Transaction


def classify_spend(ceiling: Any, alert_threshold_percent: Any, spent: Any) -> BudgetState:
    """
    Health of one budget.

    over beats warning: spend above the ceiling is OVER even though it is
    also above the alert threshold.
    """
    ceiling = to_money(ceiling, field="ceiling_amount")
    spent = to_money(spent, field="spent_amount")
    threshold = to_money(alert_threshold_percent, field="alert_threshold_percent")

    if spent > ceiling:
        return BudgetState.OVER
    if spent > ceiling * threshold / 100:
        return BudgetState.WARNING
    return BudgetState.OK


class BudgetBook:
    """
    A user's budgets, one per category.

    Saving a budget for a category that already has one replaces it; the
    category keeps its original position.
    """

    def __init__(self, budgets: Iterable[Budget] = ()):
        self._budgets: dict[str, Budget] = {}
        for budget in budgets:
            self.upsert(budget)

    def upsert(self, budget: Budget) -> Budget:
        self._budgets[budget.category] = budget
        return budget

    def remove(self, category: str) -> bool:
        """Delete a category's budget. Returns False if there was none."""
        return self._budgets.pop(category, None) is not None

    def get(self, category: str) -> Optional[Budget]:
        return self._budgets.get(category)

    def budgets(self) -> list[Budget]:
        return list(self._budgets.values())

    def __len__(self) -> int:
        return len(self._budgets)

    def __contains__(self, category: str) -> bool:
        return category in self._budgets


def budget_status(
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    period: Optional[Period] = None,
) -> list[BudgetStatus]:
    """
    Spend against every budget.

    Only expense transactions count. When a period is given, only the
    transactions inside it count; otherwise the caller is expected to have
    scoped them already.
    """
    spend = expenses(transactions)
    if period is not None:
        spend = in_period(spend, period, order=SortOrder.OLDEST_FIRST)
    spent_by_category = totals_by_category(spend)

    statuses = []
    for budget in BudgetBook(budgets).budgets():
        spent: Decimal = spent_by_category.get(budget.category, ZERO)
        statuses.append(BudgetStatus(
            category=budget.category,
            ceiling_amount=budget.ceiling_amount,
            spent_amount=spent,
            state=classify_spend(
                budget.ceiling_amount,
                budget.alert_threshold_percent,
                spent,
            ),
        ))
    return statuses
