"""
Personal Income Tax (PND 90 / PND 94)

Two pieces:
1. The progressive stepper - net taxable income to tax owed via
   marginal brackets.
2. The net taxable income resolver - gross income down to net taxable
   income in three sequentially clamped stages.

IMPORTANT: The stage order (expenses, allowances, donation) and the floor
at zero after EACH stage are part of the law's arithmetic. Reordering or
clamping once at the end changes the result.
"""

from decimal import Decimal
from typing import Any, Optional

from taxledger.models.deductions import DeductionProfile
from taxledger.models.money import ZERO, to_money
from taxledger.models.reports import BracketSlice, ExpensePolicy, IncomeTaxBreakdown
from taxledger.tax.rates import (
    COMBINED_INSURANCE_CAP,
    DONATION_CAP_RATE,
    HEALTH_INSURANCE_CAP,
    LIFE_INSURANCE_CAP,
    PERSONAL_INCOME_TAX_BRACKETS,
    STANDARD_EXPENSE_RATE,
)


# =========================
# PROGRESSIVE STEPPER
# =========================
def tax_by_bracket(net_taxable_income: Any) -> list[BracketSlice]:
    """
    Split income across the brackets it reaches.

    Brackets above the income are not listed.
    """
    income = to_money(net_taxable_income, field="net_taxable_income")
    slices = []
    previous_upper = ZERO

    for upper, rate in PERSONAL_INCOME_TAX_BRACKETS:
        if income <= previous_upper:
            break

        top = income if upper is None else min(income, upper)
        taxable = max(ZERO, top - previous_upper)
        slices.append(BracketSlice(
            lower_bound=previous_upper,
            upper_bound=upper,
            rate=rate,
            taxable_amount=taxable,
            tax=taxable * rate,
        ))

        if upper is None:
            break
        previous_upper = upper

    return slices


def tax_owed(net_taxable_income: Any) -> Decimal:
    """
    Tax on net taxable income, bracket by bracket.

    tax_owed(150000) == 0, tax_owed(300000) == 7500,
    tax_owed(500000) == 27500. Zero or negative income owes nothing.
    """
    return sum((s.tax for s in tax_by_bracket(net_taxable_income)), ZERO)


def marginal_rate(net_taxable_income: Any) -> Decimal:
    """Rate applied to the last baht of income (0 for no income)."""
    slices = tax_by_bracket(net_taxable_income)
    return slices[-1].rate if slices else ZERO


# =========================
# NET TAXABLE INCOME RESOLVER
# =========================
def expense_deduction(
    gross_income: Any,
    expense_policy: ExpensePolicy,
    actual_expense_total: Any = ZERO,
) -> Decimal:
    """Stage 1 deduction: 60% of gross, or recorded expenses."""
    if ExpensePolicy(expense_policy) == ExpensePolicy.STANDARD:
        return to_money(gross_income, field="gross_income") * STANDARD_EXPENSE_RATE
    return to_money(actual_expense_total, field="actual_expense_total")


def capped_insurance(life_insurance: Any, health_insurance: Any) -> Decimal:
    """
    Life + health insurance premiums allowed as a deduction.

    Health is capped at 25,000 on its own, life at 100,000, and the two
    together at 100,000 again.
    """
    life = min(LIFE_INSURANCE_CAP, to_money(life_insurance))
    health = min(HEALTH_INSURANCE_CAP, to_money(health_insurance))
    return min(COMBINED_INSURANCE_CAP, life + health)


def allowance_total(deductions: DeductionProfile) -> Decimal:
    """Stage 2 deduction: every allowance except donation."""
    return (
        deductions.personal
        + deductions.spouse
        + deductions.child
        + deductions.parent
        + deductions.social_security
        + capped_insurance(deductions.life_insurance, deductions.health_insurance)
        + deductions.retirement_funds
        + deductions.other
    )


def allowable_donation(declared_donation: Any, income_after_allowances: Any) -> Decimal:
    """Stage 3 deduction: donations up to 10% of what is left."""
    cap = to_money(income_after_allowances) * DONATION_CAP_RATE
    return min(to_money(declared_donation, field="donation"), cap)


def resolve_income_tax(
    gross_income: Any,
    deductions: Optional[DeductionProfile],
    expense_policy: ExpensePolicy,
    actual_expense_total: Any = ZERO,
) -> IncomeTaxBreakdown:
    """
    Resolve net taxable income and the tax on it, keeping every
    intermediate figure for the return form.
    """
    deductions = deductions or DeductionProfile()
    expense_policy = ExpensePolicy(expense_policy)
    gross = to_money(gross_income, field="gross_income")

    # 1. Expenses
    expenses = expense_deduction(gross, expense_policy, actual_expense_total)
    after_expenses = max(ZERO, gross - expenses)

    # 2. Allowances
    allowances = allowance_total(deductions)
    after_allowances = max(ZERO, after_expenses - allowances)

    # 3. Donation
    donation = allowable_donation(deductions.donation, after_allowances)
    net = max(ZERO, after_allowances - donation)

    slices = tax_by_bracket(net)
    return IncomeTaxBreakdown(
        gross_income=gross,
        expense_policy=expense_policy,
        expense_deduction=expenses,
        income_after_expenses=after_expenses,
        allowance_total=allowances,
        capped_insurance=capped_insurance(
            deductions.life_insurance, deductions.health_insurance
        ),
        income_after_allowances=after_allowances,
        allowable_donation=donation,
        net_taxable_income=net,
        tax_owed=sum((s.tax for s in slices), ZERO),
        marginal_rate=slices[-1].rate if slices else ZERO,
        brackets=slices,
    )


def net_taxable_income(
    gross_income: Any,
    deductions: Optional[DeductionProfile],
    expense_policy: ExpensePolicy,
    actual_expense_total: Any = ZERO,
) -> Decimal:
    """Gross income minus expenses, allowances and donation; never negative."""
    return resolve_income_tax(
        gross_income, deductions, expense_policy, actual_expense_total
    ).net_taxable_income
