"""
Tax Report Service

DESIGN DECISION: The service is a thin facade. It scopes the caller's
transaction snapshot to a period, hands the subset to the pure
calculators and audits the headline result. It keeps no state between
calls, so one instance can serve concurrent requests.

The collaborator layer fetches transactions, budgets and the deduction
profile (in parallel if it likes) and then calls the service with the
fresh snapshot.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Optional
from uuid import UUID

from taxledger.aggregation.aggregator import (
    SortOrder,
    expense_mix,
    expenses,
    in_period,
    incomes,
    latest_activity,
    monthly_trend,
    total,
)
from taxledger.audit.logger import AuditLogger
from taxledger.budgets.evaluator import budget_status
from taxledger.config import ReportSettings, get_settings
from taxledger.errors import ReportError
from taxledger.models.audit import CalculationEventBuilder
from taxledger.models.budget import Budget, BudgetStatus
from taxledger.models.deductions import DeductionProfile
from taxledger.models.period import HalfYearPeriod, MonthPeriod, Period, YearPeriod
from taxledger.models.reports import (
    DashboardSummary,
    ExpensePolicy,
    IncomeTaxBreakdown,
    TrendPoint,
    VatSummary,
    WhtSummary,
)
from taxledger.models.transaction import Transaction
from taxledger.reports.summaries import (
    input_vat,
    output_vat,
    vat_summary,
    wht_summary,
)
from taxledger.tax.income_tax import resolve_income_tax

HALF = Decimal("0.5")


class TaxReportService:
    """
    Builds the figures each screen displays.

    - vat_report: PP.30 monthly VAT return
    - wht_report: withholding tax to remit
    - income_tax_report: PND 90 (year) / PND 94 (January-June)
    - dashboard: headline figures for a day or month
    - trend: income vs expense per month
    - budget_overview: spend against budgets
    """

    def __init__(
        self,
        settings: Optional[ReportSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._settings = settings or get_settings().reports
        self._audit = audit_logger or AuditLogger()

    def vat_report(
        self,
        transactions: Iterable[Transaction],
        period: Period,
        correlation_id: Optional[UUID] = None,
    ) -> VatSummary:
        scoped = in_period(transactions, period, order=SortOrder.NEWEST_FIRST)
        summary = vat_summary(scoped)

        self._audit.log(CalculationEventBuilder.vat_report(
            period=repr(period),
            transaction_count=len(scoped),
            net_vat_payable=str(summary.net_vat_payable),
            correlation_id=correlation_id,
        ))
        return summary

    def wht_report(
        self,
        transactions: Iterable[Transaction],
        period: Period,
        correlation_id: Optional[UUID] = None,
    ) -> WhtSummary:
        scoped = in_period(transactions, period, order=SortOrder.NEWEST_FIRST)
        summary = wht_summary(scoped)

        self._audit.log(CalculationEventBuilder.wht_report(
            period=repr(period),
            rates=[bucket.rate for bucket in summary.buckets],
            total_wht=str(summary.total_wht),
            correlation_id=correlation_id,
        ))
        return summary

    def income_tax_report(
        self,
        transactions: Iterable[Transaction],
        deductions: Optional[DeductionProfile],
        period: Period,
        expense_policy: ExpensePolicy = ExpensePolicy.STANDARD,
        correlation_id: Optional[UUID] = None,
    ) -> IncomeTaxBreakdown:
        """
        Personal income tax for a full year (PND 90) or for January-June
        (PND 94).

        Raises:
            ReportError: the period is neither a year nor the first half-year
        """
        deductions = deductions or DeductionProfile()

        if isinstance(period, HalfYearPeriod):
            if period.half != 1:
                self._reject("income_tax", "PND 94 covers January-June only", period, correlation_id)
            if self._settings.halve_deductions_for_half_year:
                deductions = deductions.scaled(HALF)
        elif not isinstance(period, YearPeriod):
            self._reject(
                "income_tax",
                f"income tax is assessed per year or half-year, not {type(period).__name__}",
                period,
                correlation_id,
            )

        scoped = in_period(transactions, period, order=SortOrder.OLDEST_FIRST)
        breakdown = resolve_income_tax(
            gross_income=total(incomes(scoped)),
            deductions=deductions,
            expense_policy=expense_policy,
            actual_expense_total=total(expenses(scoped)),
        )

        self._audit.log(CalculationEventBuilder.income_tax(
            period=repr(period),
            expense_policy=breakdown.expense_policy.value,
            net_taxable_income=str(breakdown.net_taxable_income),
            tax_owed=str(breakdown.tax_owed),
            correlation_id=correlation_id,
        ))
        return breakdown

    def dashboard(
        self,
        transactions: Iterable[Transaction],
        period: Period,
        correlation_id: Optional[UUID] = None,
    ) -> DashboardSummary:
        scoped = in_period(transactions, period, order=SortOrder.NEWEST_FIRST)

        income = total(incomes(scoped))
        expense = total(expenses(scoped))
        out_vat = output_vat(scoped)
        in_vat = input_vat(scoped)

        summary = DashboardSummary(
            total_income=income,
            total_expense=expense,
            net_profit=income - expense,
            output_vat=out_vat,
            input_vat=in_vat,
            vat_payable=out_vat - in_vat,
            wht_payable=wht_summary(scoped).total_wht,
            recent_transactions=latest_activity(scoped, self._settings.recent_transactions),
            expense_mix=expense_mix(scoped, self._settings.expense_mix_size),
        )

        self._audit.log(CalculationEventBuilder.dashboard(
            period=repr(period),
            transaction_count=len(scoped),
            net_profit=str(summary.net_profit),
            correlation_id=correlation_id,
        ))
        return summary

    def trend(
        self,
        transactions: Iterable[Transaction],
        end: MonthPeriod,
        months: Optional[int] = None,
        correlation_id: Optional[UUID] = None,
    ) -> list[TrendPoint]:
        months = months or self._settings.trend_months
        points = monthly_trend(transactions, end, months)

        self._audit.log(CalculationEventBuilder.trend(
            period=repr(end),
            months=months,
            correlation_id=correlation_id,
        ))
        return points

    def budget_overview(
        self,
        budgets: Iterable[Budget],
        transactions: Iterable[Transaction],
        period: Period,
        correlation_id: Optional[UUID] = None,
    ) -> list[BudgetStatus]:
        statuses = budget_status(budgets, transactions, period)

        self._audit.log(CalculationEventBuilder.budget_status(
            period=repr(period),
            states={status.category: status.state.value for status in statuses},
            correlation_id=correlation_id,
        ))
        return statuses

    def _reject(
        self,
        report: str,
        reason: str,
        period: Period,
        correlation_id: Optional[UUID],
    ) -> None:
        self._audit.log(CalculationEventBuilder.report_rejected(
            report=report,
            reason=reason,
            period=repr(period),
            correlation_id=correlation_id,
        ))
        raise ReportError(reason)
