"""
Structured logging module.

Provides JSON and console logging with provider/region context propagation.
"""

from zoho_oauth2.logging.context import (
    clear_log_context,
    get_log_context,
    set_log_context,
)
from zoho_oauth2.logging.formatters import ConsoleFormatter, JSONFormatter
from zoho_oauth2.logging.setup import get_logger, setup_logging

__all__ = [
    # Setup
    "setup_logging",
    "get_logger",
    # Formatters
    "JSONFormatter",
    "ConsoleFormatter",
    # Context
    "set_log_context",
    "get_log_context",
    "clear_log_context",
]
