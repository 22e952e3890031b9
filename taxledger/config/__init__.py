"""Configuration package."""

from taxledger.config.settings import (
    AppSettings,
    ReportSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "ReportSettings",
    "Settings",
    "get_settings",
]
