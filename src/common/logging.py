"""
Logging configuration helpers.
The service modules log through named `storefront.*` loggers and never configure handlers themselves.
Entry points call `configure_logging` once so library users keep control of their own logging setup.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

_LOGGING_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level_name = (level or get_settings().log_level).upper()
    resolved_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
