"""
Tests for the report summaries and TaxReportService.

The audit logger is replaced by a recording fake so no log output is
involved.
"""

import pytest
from datetime import date
from decimal import Decimal

from taxledger.audit import AuditLogger, create_correlation_id
from taxledger.config import ReportSettings
from taxledger.errors import ReportError, TaxLedgerError
from taxledger.models import (
    Budget,
    BudgetState,
    CalculationEventType,
    DayPeriod,
    DeductionProfile,
    ExpensePolicy,
    HalfYearPeriod,
    MonthPeriod,
    TaxMode,
    Transaction,
    YearPeriod,
)
from taxledger.reports import TaxReportService, vat_summary, wht_summary


class RecordingAuditLogger(AuditLogger):
    """Keeps events in memory instead of logging them."""

    def __init__(self):
        super().__init__()
        self.events = []

    def log(self, event):
        self.events.append(event)


def income(amount, on, tax_mode=TaxMode.NO_VAT, category="Sales"):
    return Transaction(kind="income", amount=amount, occurred_on=on, tax_mode=tax_mode, category=category)


def expense(amount, on, category="Food Cost", **extra):
    return Transaction(kind="expense", amount=amount, occurred_on=on, category=category, **extra)


@pytest.fixture
def audit():
    return RecordingAuditLogger()


@pytest.fixture
def service(audit):
    return TaxReportService(settings=ReportSettings(), audit_logger=audit)


MARCH = MonthPeriod(year=2024, month=3)


class TestVatSummary:
    """Tests for the VAT (PP.30) figures."""

    def test_end_to_end_scenario(self):
        """1070 inclusive sale and 500 invoiced purchase -> 70 - 35 = 35."""
        transactions = [
            income(1070, date(2024, 3, 5), TaxMode.VAT_INCLUSIVE),
            expense(500, date(2024, 3, 6), has_tax_invoice=True),
        ]
        summary = vat_summary(transactions)
        assert summary.output_vat == 70
        assert summary.input_vat == 35
        assert summary.net_vat_payable == 35
        assert summary.total_sales == 1070
        assert summary.total_purchases == 500
        assert summary.is_refundable is False

    def test_purchases_without_invoice_are_not_claimable(self):
        summary = vat_summary([expense(500, date(2024, 3, 6))])
        assert summary.input_vat == 0
        assert summary.total_purchases == 0

    def test_mixed_tax_modes(self):
        summary = vat_summary([
            income(107, date(2024, 3, 1), TaxMode.VAT_INCLUSIVE),
            income(100, date(2024, 3, 1), TaxMode.VAT_EXCLUSIVE),
            income(999, date(2024, 3, 1), TaxMode.NO_VAT),
        ])
        assert summary.output_vat == 14
        assert summary.total_sales == 1206

    def test_refundable(self):
        summary = vat_summary([expense(1000, date(2024, 3, 6), has_tax_invoice=True)])
        assert summary.net_vat_payable == -70
        assert summary.is_refundable is True

    def test_empty(self):
        summary = vat_summary([])
        assert summary.net_vat_payable == 0


class TestWhtSummary:
    """Tests for withholding tax per rate."""

    def test_buckets(self):
        transactions = [
            expense(1000, date(2024, 3, 1), withholding_rate=3),
            expense(2000, date(2024, 3, 2), withholding_rate=3),
            expense(500, date(2024, 3, 3), withholding_rate=1),
            expense(800, date(2024, 3, 4), withholding_rate=0),
        ]
        summary = wht_summary(transactions)
        assert [b.rate for b in summary.buckets] == [1, 3]
        three = summary.buckets[1]
        assert three.base_amount == 3000
        assert three.tax_amount == 90
        assert three.count == 2
        assert summary.total_wht == 95

    def test_empty(self):
        summary = wht_summary([])
        assert summary.buckets == []
        assert summary.total_wht == 0


class TestServiceVatAndWht:
    """Tests for period scoping in the service."""

    def test_vat_report_scopes_to_period(self, service, audit):
        transactions = [
            income(1070, date(2024, 3, 5), TaxMode.VAT_INCLUSIVE),
            expense(500, date(2024, 3, 6), has_tax_invoice=True),
            income(10700, date(2024, 4, 1), TaxMode.VAT_INCLUSIVE),
        ]
        summary = service.vat_report(transactions, MARCH)
        assert summary.net_vat_payable == 35

        assert len(audit.events) == 1
        assert audit.events[0].event_type == CalculationEventType.VAT_REPORT_COMPUTED
        assert audit.events[0].details["transaction_count"] == 2

    def test_wht_report(self, service, audit):
        transactions = [
            expense(1000, date(2024, 3, 1), withholding_rate=5),
            expense(1000, date(2024, 2, 1), withholding_rate=5),
        ]
        summary = service.wht_report(transactions, MARCH)
        assert summary.total_wht == 50
        assert audit.events[0].details["rates"] == [5]

    def test_correlation_id_is_passed_through(self, service, audit):
        correlation_id = create_correlation_id()
        service.vat_report([], MARCH, correlation_id=correlation_id)
        service.wht_report([], MARCH, correlation_id=correlation_id)
        assert {e.correlation_id for e in audit.events} == {correlation_id}


class TestServiceIncomeTax:
    """Tests for PND 90 / PND 94."""

    def test_annual_standard(self, service, audit):
        transactions = [
            income(600000, date(2024, 2, 1)),
            income(400000, date(2024, 9, 1)),
            income(999999, date(2023, 12, 31)),
        ]
        breakdown = service.income_tax_report(
            transactions, DeductionProfile(), YearPeriod(year=2024), ExpensePolicy.STANDARD
        )
        assert breakdown.gross_income == 1000000
        assert breakdown.net_taxable_income == 340000
        assert breakdown.tax_owed == 11500
        assert audit.events[0].event_type == CalculationEventType.INCOME_TAX_COMPUTED

    def test_annual_actual_expenses(self, service):
        transactions = [
            income(1000000, date(2024, 2, 1)),
            expense(300000, date(2024, 3, 1)),
            expense(100000, date(2024, 11, 1)),
        ]
        breakdown = service.income_tax_report(
            transactions, DeductionProfile(), YearPeriod(year=2024), ExpensePolicy.ACTUAL
        )
        assert breakdown.expense_deduction == 400000
        # 600,000 - 60,000
        assert breakdown.net_taxable_income == 540000

    def test_half_year_halves_deductions(self, service):
        transactions = [
            income(500000, date(2024, 3, 1)),
            income(500000, date(2024, 8, 1)),
        ]
        breakdown = service.income_tax_report(
            transactions, DeductionProfile(), HalfYearPeriod(year=2024, half=1), ExpensePolicy.STANDARD
        )
        assert breakdown.gross_income == 500000
        # 200,000 - 30,000 (half of the personal allowance)
        assert breakdown.net_taxable_income == 170000
        assert breakdown.tax_owed == 1000

    def test_half_year_without_halving(self, audit):
        service = TaxReportService(
            settings=ReportSettings(halve_deductions_for_half_year=False),
            audit_logger=audit,
        )
        breakdown = service.income_tax_report(
            [income(500000, date(2024, 3, 1))],
            DeductionProfile(),
            HalfYearPeriod(year=2024, half=1),
        )
        assert breakdown.net_taxable_income == 140000
        assert breakdown.tax_owed == 0

    def test_missing_profile(self, service):
        breakdown = service.income_tax_report([income(500000, date(2024, 3, 1))], None, YearPeriod(year=2024))
        assert breakdown.net_taxable_income == 140000

    def test_month_period_is_rejected(self, service, audit):
        with pytest.raises(ReportError):
            service.income_tax_report([], DeductionProfile(), MARCH)
        assert audit.events[-1].event_type == CalculationEventType.REPORT_REJECTED

    def test_second_half_is_rejected(self, service):
        with pytest.raises(TaxLedgerError, match="January-June"):
            service.income_tax_report([], DeductionProfile(), HalfYearPeriod(year=2024, half=2))

    def test_empty_ledger(self, service):
        breakdown = service.income_tax_report([], DeductionProfile(), YearPeriod(year=2024))
        assert breakdown.net_taxable_income == 0
        assert breakdown.tax_owed == 0


class TestServiceDashboard:
    """Tests for the dashboard figures."""

    def test_month_dashboard(self, service):
        transactions = [
            income(1070, date(2024, 3, 5), TaxMode.VAT_INCLUSIVE),
            expense(500, date(2024, 3, 6), category="Food Cost", has_tax_invoice=True),
            expense(1000, date(2024, 3, 7), category="Wages", withholding_rate=3),
            expense(200, date(2024, 3, 8), category="Food Cost"),
            income(5000, date(2024, 4, 1)),
        ]
        summary = service.dashboard(transactions, MARCH)

        assert summary.total_income == 1070
        assert summary.total_expense == 1700
        assert summary.net_profit == -630
        assert summary.output_vat == 70
        assert summary.input_vat == 35
        assert summary.vat_payable == 35
        assert summary.wht_payable == 30
        assert [tx.occurred_on.day for tx in summary.recent_transactions] == [8, 7, 6, 5]
        assert [(m.category, m.total) for m in summary.expense_mix] == [
            ("Wages", Decimal("1000")),
            ("Food Cost", Decimal("700")),
        ]

    def test_day_dashboard(self, service):
        transactions = [
            income(100, date(2024, 3, 5)),
            income(200, date(2024, 3, 6)),
        ]
        summary = service.dashboard(transactions, DayPeriod(on=date(2024, 3, 6)))
        assert summary.total_income == 200

    def test_recent_transactions_limit(self, audit):
        service = TaxReportService(settings=ReportSettings(recent_transactions=2), audit_logger=audit)
        transactions = [income(1, date(2024, 3, day)) for day in range(1, 10)]
        summary = service.dashboard(transactions, MARCH)
        assert [tx.occurred_on.day for tx in summary.recent_transactions] == [9, 8]

    def test_empty_dashboard(self, service):
        summary = service.dashboard([], MARCH)
        assert summary.net_profit == 0
        assert summary.recent_transactions == []
        assert summary.expense_mix == []

    def test_idempotent(self, service):
        transactions = [
            income(1070, date(2024, 3, 5), TaxMode.VAT_INCLUSIVE),
            expense(500, date(2024, 3, 6), has_tax_invoice=True),
        ]
        assert service.dashboard(transactions, MARCH) == service.dashboard(transactions, MARCH)


class TestServiceTrendAndBudgets:
    """Tests for the trend series and budget overview."""

    def test_trend_uses_settings_default(self, service):
        points = service.trend([income(100, date(2024, 3, 1))], MARCH)
        assert len(points) == 6
        assert (points[0].year, points[0].month) == (2023, 10)
        assert points[-1].income == 100

    def test_trend_explicit_months(self, service):
        assert len(service.trend([], MARCH, months=12)) == 12

    def test_budget_overview(self, service, audit):
        budgets = [Budget(category="Food Cost", ceiling_amount=10000, alert_threshold_percent=80)]
        transactions = [
            expense(8500, date(2024, 3, 1)),
            expense(5000, date(2024, 2, 1)),
        ]
        statuses = service.budget_overview(budgets, transactions, MARCH)
        assert statuses[0].state == BudgetState.WARNING
        assert audit.events[0].details["states"] == {"Food Cost": "warning"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
