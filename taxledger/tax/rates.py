"""
Statutory figures for Thai VAT, withholding tax and personal income tax
(PND 90 / PND 94, tax year 2024 onwards).

These are law, not configuration.
"""

from decimal import Decimal

# =========================
# VAT
# =========================
VAT_RATE = Decimal("0.07")
VAT_INCLUSIVE_NUMERATOR = Decimal("7")
VAT_INCLUSIVE_DENOMINATOR = Decimal("107")


# =========================
# PERSONAL INCOME TAX BRACKETS
# =========================
# (cumulative upper bound, marginal rate); None is the open top bracket
PERSONAL_INCOME_TAX_BRACKETS = [
    (Decimal("150000"), Decimal("0")),
    (Decimal("300000"), Decimal("0.05")),
    (Decimal("500000"), Decimal("0.10")),
    (Decimal("750000"), Decimal("0.15")),
    (Decimal("1000000"), Decimal("0.20")),
    (Decimal("2000000"), Decimal("0.25")),
    (Decimal("5000000"), Decimal("0.30")),
    (None, Decimal("0.35")),
]


# =========================
# DEDUCTIONS
# =========================
STANDARD_EXPENSE_RATE = Decimal("0.6")  # section 40(8) flat expense deduction

LIFE_INSURANCE_CAP = Decimal("100000")
HEALTH_INSURANCE_CAP = Decimal("25000")
COMBINED_INSURANCE_CAP = Decimal("100000")  # life + health together

DONATION_CAP_RATE = Decimal("0.10")  # of income remaining after allowances
