"""
Configuration Management for taxledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Statutory figures (VAT rate, brackets, allowance caps) are
NOT configuration. They live in taxledger.tax.rates as constants. Only the
knobs that shape reports are configurable here.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    """Settings that shape report and dashboard figures."""

    model_config = SettingsConfigDict(
        env_prefix="TAXLEDGER_REPORT_",
        extra="ignore"
    )

    trend_months: int = Field(
        default=6,
        ge=1,
        le=24,
        description="Number of calendar months in the income/expense trend"
    )
    expense_mix_size: int = Field(
        default=5,
        ge=1,
        description="How many top expense categories the dashboard shows"
    )
    recent_transactions: int = Field(
        default=5,
        ge=0,
        description="How many recent transactions the dashboard lists"
    )
    halve_deductions_for_half_year: bool = Field(
        default=True,
        description=(
            "PND 94: use half of the annual deduction profile "
            "for the January-June return"
        )
    )
    default_alert_threshold_percent: int = Field(
        default=80,
        ge=0,
        le=100,
        description="Alert threshold applied to budgets saved without one"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for engine log records"
    )
    json_logs: bool = Field(
        default=True,
        description="Render log records as JSON (False = console renderer)"
    )


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def reports(self) -> ReportSettings:
        return ReportSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
