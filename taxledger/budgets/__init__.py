"""Budget evaluation package."""

from taxledger.budgets.evaluator import BudgetBook, budget_status, classify_spend

__all__ = ["BudgetBook", "budget_status", "classify_spend"]
