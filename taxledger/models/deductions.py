"""
Deduction Profile

The itemised allowances a taxpayer declares for one tax year.

CRITICAL: Values are stored as the user entered them. Statutory caps
(insurance, donation) are applied when net taxable income is computed,
never here - an over-cap entry is kept, not rejected.
"""

from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from taxledger.models.money import to_money

# Statutory personal allowance, applied when the profile omits it
PERSONAL_ALLOWANCE = Decimal("60000")


class DeductionProfile(BaseModel):
    """Annual allowance amounts, keyed by allowance category."""
    model_config = ConfigDict(populate_by_name=True)

    personal: Decimal = Field(
        default=PERSONAL_ALLOWANCE,
        validation_alias=AliasChoices("personal", "personal_allowance"),
    )
    spouse: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("spouse", "spouse_allowance"),
    )
    child: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("child", "child_allowance"),
    )
    parent: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("parent", "parent_allowance"),
    )
    social_security: Decimal = Decimal("0")
    life_insurance: Decimal = Decimal("0")
    health_insurance: Decimal = Decimal("0")
    retirement_funds: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("retirement_funds", "pvd_rmf_ssf"),
        description="Provident / RMF / SSF contributions"
    )
    donation: Decimal = Field(
        default=Decimal("0"),
        description="Declared donations, capped at 10% of remaining income"
    )
    other: Decimal = Decimal("0")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_amounts(cls, v: Any, info) -> Decimal:
        return to_money(v, field=info.field_name)

    def scaled(self, factor: Decimal) -> "DeductionProfile":
        """Return a copy with every allowance multiplied by factor."""
        return self.model_copy(
            update={
                name: getattr(self, name) * factor
                for name in type(self).model_fields
            }
        )
