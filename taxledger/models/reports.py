"""
Report Models

The figures each consumer (dashboard, VAT return, WHT remittance,
PND 90 / PND 94) displays. All amounts are exact Decimals; rounding and
currency formatting are the presentation layer's job.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from taxledger.models.transaction import Transaction


class ExpensePolicy(str, Enum):
    """How business expenses are deducted from gross income."""
    STANDARD = "standard"  # flat 60% of gross income
    ACTUAL = "actual"      # recorded expense total


class VatSummary(BaseModel):
    """VAT return (PP.30) figures for a period."""

    total_sales: Decimal = Decimal("0")
    output_vat: Decimal = Decimal("0")
    total_purchases: Decimal = Decimal("0")
    input_vat: Decimal = Decimal("0")
    net_vat_payable: Decimal = Field(
        default=Decimal("0"),
        description="Output minus input VAT; negative means refundable"
    )

    @property
    def is_refundable(self) -> bool:
        return self.net_vat_payable < 0


class WhtBucket(BaseModel):
    """Expense rows sharing one withholding rate."""

    rate: int
    base_amount: Decimal
    tax_amount: Decimal
    count: int


class WhtSummary(BaseModel):
    """Withholding tax to remit for a period."""

    buckets: list[WhtBucket] = Field(default_factory=list)
    total_wht: Decimal = Decimal("0")


class BracketSlice(BaseModel):
    """Income taxed inside one bracket."""

    lower_bound: Decimal
    upper_bound: Optional[Decimal]  # None for the open top bracket
    rate: Decimal
    taxable_amount: Decimal
    tax: Decimal


class IncomeTaxBreakdown(BaseModel):
    """
    Every intermediate figure of the net taxable income resolution.

    The order of the fields follows the order of the computation:
    expenses, then allowances, then donation.
    """

    gross_income: Decimal
    expense_policy: ExpensePolicy
    expense_deduction: Decimal
    income_after_expenses: Decimal
    allowance_total: Decimal
    capped_insurance: Decimal
    income_after_allowances: Decimal
    allowable_donation: Decimal
    net_taxable_income: Decimal
    tax_owed: Decimal
    marginal_rate: Decimal
    brackets: list[BracketSlice] = Field(default_factory=list)

    @property
    def effective_rate(self) -> Decimal:
        """Tax owed as a share of net taxable income."""
        if self.net_taxable_income <= 0:
            return Decimal("0")
        return self.tax_owed / self.net_taxable_income


class CategoryTotal(BaseModel):
    category: str
    total: Decimal


class TrendPoint(BaseModel):
    """Income and expense totals for one calendar month."""

    year: int
    month: int
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


class DashboardSummary(BaseModel):
    """Headline figures for the day or month currently in view."""

    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    net_profit: Decimal = Decimal("0")
    output_vat: Decimal = Decimal("0")
    input_vat: Decimal = Decimal("0")
    vat_payable: Decimal = Decimal("0")
    wht_payable: Decimal = Decimal("0")
    recent_transactions: list[Transaction] = Field(default_factory=list)
    expense_mix: list[CategoryTotal] = Field(default_factory=list)
