"""
Audit Logger

Every report the engine builds is logged as a structured event, so a
figure shown on screen can be traced back to the computation behind it.

The audit logger:
- Is synchronous, like the engine itself
- Only emits log records; it holds no state between calls
- Supports correlation IDs to tie together the reports of one screen
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from taxledger.config import AppSettings, get_settings
from taxledger.models.audit import AuditSeverity, CalculationEvent


def configure_logging(app_settings: Optional[AppSettings] = None) -> None:
    """Configure structlog on top of the standard library logger."""
    app_settings = app_settings or get_settings().app

    level = logging.getLevelName(app_settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(format="%(message)s", level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if app_settings.json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


class AuditLogger:
    """Writes calculation events to the structured log."""

    def __init__(self, logger_name: str = "taxledger.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: CalculationEvent) -> None:
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("calculation_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("calculation_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("calculation_event", **log_dict)
        else:
            self._logger.info("calculation_event", **log_dict)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use one per screen refresh and pass it to every report built for it.
    """
    return uuid4()
