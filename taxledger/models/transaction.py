"""
Transaction Model

A transaction is one recorded income or expense line, exactly as the data
store hands it over. The engine reads it, never writes it.

Tax attributes only mean something on one side of the ledger:
- tax_mode applies to income (how VAT is embedded in the sale price)
- has_tax_invoice and withholding_rate apply to expenses
The model normalises the meaningless side away so calculators never
have to ask which kind of record they are looking at.
"""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import uuid4

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from taxledger.models.money import to_money, to_rate

# Withholding rates (percent) that exist on the withholding certificate
WITHHOLDING_RATES = (1, 2, 3, 5)


class TransactionKind(str, Enum):
    """Side of the ledger."""
    INCOME = "income"
    EXPENSE = "expense"


class TaxMode(str, Enum):
    """
    How VAT relates to the recorded amount of an income transaction.

    The data store uses the short spellings vat_inc / vat_exc; both are
    accepted on input.
    """
    VAT_INCLUSIVE = "vat_inclusive"  # amount already contains 7% VAT
    VAT_EXCLUSIVE = "vat_exclusive"  # amount is the pre-tax base
    NO_VAT = "no_vat"

    @classmethod
    def parse(cls, value: Any) -> "TaxMode":
        """Lenient lookup; anything unrecognised means no VAT."""
        if isinstance(value, TaxMode):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _TAX_MODE_ALIASES:
                return _TAX_MODE_ALIASES[key]
        return cls.NO_VAT


_TAX_MODE_ALIASES = {
    "vat_inclusive": TaxMode.VAT_INCLUSIVE,
    "vat_inc": TaxMode.VAT_INCLUSIVE,
    "vat_exclusive": TaxMode.VAT_EXCLUSIVE,
    "vat_exc": TaxMode.VAT_EXCLUSIVE,
    "no_vat": TaxMode.NO_VAT,
}


class Transaction(BaseModel):
    """
    A single recorded income or expense.

    Field names follow the engine's vocabulary; the data store's column
    names (type, date, tax_type, tax_invoice, wht_rate) are accepted as
    aliases so raw rows can be validated directly.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Record identifier from the data store"
    )
    kind: TransactionKind = Field(
        ...,
        validation_alias=AliasChoices("kind", "type"),
        description="income or expense"
    )
    amount: Decimal = Field(
        default=Decimal("0"),
        description="Face value; VAT-inclusive when tax_mode is vat_inclusive"
    )
    category: str = Field(
        default="",
        description="Free-text category name"
    )
    occurred_on: date = Field(
        ...,
        validation_alias=AliasChoices("occurred_on", "date"),
        description="Calendar date of the transaction"
    )

    # Income only
    tax_mode: TaxMode = Field(
        default=TaxMode.NO_VAT,
        validation_alias=AliasChoices("tax_mode", "tax_type"),
    )

    # Expense only
    has_tax_invoice: bool = Field(
        default=False,
        validation_alias=AliasChoices("has_tax_invoice", "tax_invoice"),
        description="A full tax invoice was received (input VAT claimable)"
    )
    withholding_rate: int = Field(
        default=0,
        validation_alias=AliasChoices("withholding_rate", "wht_rate"),
        description="Withholding percentage, one of 0, 1, 2, 3, 5"
    )

    note: Optional[str] = None
    created_at: Optional[datetime] = Field(
        default=None,
        description="Insertion time, used to order same-day records"
    )

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        return str(v) if v is not None else v

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> Decimal:
        return to_money(v, field="amount")

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v: Any) -> str:
        return "" if v is None else v

    @field_validator("tax_mode", mode="before")
    @classmethod
    def parse_tax_mode(cls, v: Any) -> TaxMode:
        return TaxMode.parse(v)

    @field_validator("has_tax_invoice", mode="before")
    @classmethod
    def missing_invoice_is_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("withholding_rate", mode="before")
    @classmethod
    def coerce_withholding_rate(cls, v: Any) -> int:
        rate = to_rate(v, field="withholding_rate")
        if rate == rate.to_integral_value() and int(rate) in WITHHOLDING_RATES:
            return int(rate)
        return 0

    @model_validator(mode="after")
    def drop_meaningless_tax_fields(self) -> "Transaction":
        if self.kind == TransactionKind.INCOME:
            self.has_tax_invoice = False
            self.withholding_rate = 0
        else:
            self.tax_mode = TaxMode.NO_VAT
        return self

    @classmethod
    def from_record(cls, row: Mapping) -> "Transaction":
        """Build a transaction from a raw data-store row."""
        return cls.model_validate(dict(row))

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self.kind == TransactionKind.EXPENSE

    def __str__(self) -> str:
        sign = "+" if self.is_income else "-"
        return f"{sign}{self.amount} | {self.category} | {self.occurred_on}"
