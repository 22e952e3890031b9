"""
Audit Models for taxledger

Every report the engine computes can be traced: which report, for which
period, over how many records, with which headline result.

DESIGN DECISION: Events describe computations, they never carry the raw
transaction list. Counts and totals are enough to reconstruct what was
asked without copying a user's ledger into the log.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class CalculationEventType(str, Enum):
    """Types of computations we audit."""
    VAT_REPORT_COMPUTED = "vat_report_computed"
    WHT_REPORT_COMPUTED = "wht_report_computed"
    INCOME_TAX_COMPUTED = "income_tax_computed"
    DASHBOARD_COMPUTED = "dashboard_computed"
    TREND_COMPUTED = "trend_computed"
    BUDGET_STATUS_COMPUTED = "budget_status_computed"

    REPORT_REJECTED = "report_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class CalculationEvent(BaseModel):
    """A single audited computation."""

    event_id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the computation ran (UTC)"
    )
    event_type: CalculationEventType
    severity: AuditSeverity = AuditSeverity.INFO

    period: Optional[str] = Field(
        default=None,
        description="repr of the period descriptor the report covers"
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Ties together the reports built for one screen"
    )
    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "period": self.period,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class CalculationEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = CalculationEventBuilder.vat_report(period, 12, summary.net_vat_payable)
    """

    @staticmethod
    def vat_report(
        period: str,
        transaction_count: int,
        net_vat_payable: str,
        correlation_id: Optional[UUID] = None,
    ) -> CalculationEvent:
        return CalculationEvent(
            event_type=CalculationEventType.VAT_REPORT_COMPUTED,
            period=period,
            correlation_id=correlation_id,
            description=f"VAT report over {transaction_count} transactions",
            details={
                "transaction_count": transaction_count,
                "net_vat_payable": net_vat_payable,
            },
        )

    @staticmethod
    def wht_report(
        period: str,
        rates: list[int],
        total_wht: str,
        correlation_id: Optional[UUID] = None,
    ) -> CalculationEvent:
        return CalculationEvent(
            event_type=CalculationEventType.WHT_REPORT_COMPUTED,
            period=period,
            correlation_id=correlation_id,
            description=f"WHT report with {len(rates)} rate buckets",
            details={
                "rates": rates,
                "total_wht": total_wht,
            },
        )

    @staticmethod
    def income_tax(
        period: str,
        expense_policy: str,
        net_taxable_income: str,
        tax_owed: str,
        correlation_id: Optional[UUID] = None,
    ) -> CalculationEvent:
        return CalculationEvent(
            event_type=CalculationEventType.INCOME_TAX_COMPUTED,
            period=period,
            correlation_id=correlation_id,
            description=f"Personal income tax computed ({expense_policy} expenses)",
            details={
                "expense_policy": expense_policy,
                "net_taxable_income": net_taxable_income,
                "tax_owed": tax_owed,
            },
        )

    @staticmethod
    def dashboard(
        period: str,
        transaction_count: int,
        net_profit: str,
        correlation_id: Optional[UUID] = None,
    ) -> CalculationEvent:
        return CalculationEvent(
            event_type=CalculationEventType.DASHBOARD_COMPUTED,
            period=period,
            correlation_id=correlation_id,
            description=f"Dashboard over {transaction_count} transactions",
            details={
                "transaction_count": transaction_count,
                "net_profit": net_profit,
            },
        )

    @staticmethod
    def trend(
        period: str,
        months: int,
        correlation_id: Optional[UUID] = None,
    ) -> CalculationEvent:
        return CalculationEvent(
            event_type=CalculationEventType.TREND_COMPUTED,
            severity=AuditSeverity.DEBUG,
            period=period,
            correlation_id=correlation_id,
            description=f"Monthly trend over {months} months",
            details={"months": months},
        )

    @staticmethod
    def budget_status(
        period: str,
        states: dict[str, str],
        correlation_id: Optional[UUID] = None,
    ) -> CalculationEvent:
        over = [category for category, state in states.items() if state == "over"]
        return CalculationEvent(
            event_type=CalculationEventType.BUDGET_STATUS_COMPUTED,
            severity=AuditSeverity.WARNING if over else AuditSeverity.INFO,
            period=period,
            correlation_id=correlation_id,
            description=f"Budget status for {len(states)} categories, {len(over)} over",
            details={"states": states},
        )

    @staticmethod
    def report_rejected(
        report: str,
        reason: str,
        period: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
    ) -> CalculationEvent:
        return CalculationEvent(
            event_type=CalculationEventType.REPORT_REJECTED,
            severity=AuditSeverity.ERROR,
            period=period,
            correlation_id=correlation_id,
            description=f"Report rejected: {report}",
            error_message=reason,
            details={"report": report},
        )
