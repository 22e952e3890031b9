"""
Data Models Package

This package contains all Pydantic models used by the engine.
All data flowing into and out of the calculators conforms to these schemas.
"""

from taxledger.models.audit import (
    AuditSeverity,
    CalculationEvent,
    CalculationEventBuilder,
    CalculationEventType,
)
from taxledger.models.budget import Budget, BudgetState, BudgetStatus
from taxledger.models.deductions import PERSONAL_ALLOWANCE, DeductionProfile
from taxledger.models.money import to_money, to_rate
from taxledger.models.period import (
    DayPeriod,
    HalfYearPeriod,
    MonthPeriod,
    Period,
    YearPeriod,
)
from taxledger.models.reports import (
    BracketSlice,
    CategoryTotal,
    DashboardSummary,
    ExpensePolicy,
    IncomeTaxBreakdown,
    TrendPoint,
    VatSummary,
    WhtBucket,
    WhtSummary,
)
from taxledger.models.transaction import (
    WITHHOLDING_RATES,
    TaxMode,
    Transaction,
    TransactionKind,
)

__all__ = [
    # Ledger models
    "Transaction",
    "TransactionKind",
    "TaxMode",
    "WITHHOLDING_RATES",
    "DeductionProfile",
    "PERSONAL_ALLOWANCE",
    "Budget",
    "BudgetState",
    "BudgetStatus",
    # Periods
    "Period",
    "DayPeriod",
    "MonthPeriod",
    "HalfYearPeriod",
    "YearPeriod",
    # Reports
    "BracketSlice",
    "CategoryTotal",
    "DashboardSummary",
    "ExpensePolicy",
    "IncomeTaxBreakdown",
    "TrendPoint",
    "VatSummary",
    "WhtBucket",
    "WhtSummary",
    # Audit models
    "AuditSeverity",
    "CalculationEvent",
    "CalculationEventBuilder",
    "CalculationEventType",
    # Coercion
    "to_money",
    "to_rate",
]
