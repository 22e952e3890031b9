"""
Budget Models

A Budget is a per-category spending ceiling set by the user.
A BudgetStatus is derived from live transactions on every query and is
never persisted or cached.
"""

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from taxledger.config import get_settings
from taxledger.models.money import to_money


class BudgetState(str, Enum):
    """Health of a budgeted category."""
    OK = "ok"
    WARNING = "warning"  # spend passed the alert threshold
    OVER = "over"        # spend passed the ceiling


def _default_threshold() -> Decimal:
    return Decimal(get_settings().reports.default_alert_threshold_percent)


class Budget(BaseModel):
    """
    Spending ceiling for one category.

    One budget per category; saving again with the same category replaces
    the earlier ceiling (see BudgetBook).
    """
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    category: str = Field(
        ...,
        min_length=1,
        description="Expense category the ceiling applies to"
    )
    ceiling_amount: Decimal = Field(
        ...,
        validation_alias=AliasChoices("ceiling_amount", "amount"),
        description="Spending ceiling for the period"
    )
    alert_threshold_percent: Decimal = Field(
        default_factory=_default_threshold,
        validation_alias=AliasChoices("alert_threshold_percent", "alert_threshold"),
        description="Warn once spend passes this share of the ceiling (0-100)"
    )

    @field_validator("ceiling_amount", "alert_threshold_percent", mode="before")
    @classmethod
    def coerce_numbers(cls, v: Any, info) -> Decimal:
        return to_money(v, field=info.field_name)


class BudgetStatus(BaseModel):
    """Spend against one budget for one period."""

    category: str
    ceiling_amount: Decimal
    spent_amount: Decimal
    state: BudgetState

    @property
    def remaining_amount(self) -> Decimal:
        """What is left before the ceiling, never negative."""
        return max(Decimal("0"), self.ceiling_amount - self.spent_amount)

    @property
    def percent_used(self) -> Decimal:
        if self.ceiling_amount <= 0:
            return Decimal("0")
        return self.spent_amount / self.ceiling_amount * 100
