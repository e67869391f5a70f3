"""Logging setup and configuration."""

import io
import logging
import sys

from zoho_oauth2.logging.formatters import ConsoleFormatter, JSONFormatter

DEFAULT_LEVEL = logging.INFO

# Noisy loggers to suppress
NOISY_LOGGERS = [
    "urllib3",
    "aiohttp",
    "httpx",
    "httpcore",
]


def setup_logging(
    level: int = DEFAULT_LEVEL,
    json_format: bool = False,
    suppress_noisy: bool = True,
) -> logging.Logger:
    """
    Configure root logging to stdout.

    Args:
        level: Log level for the stdout handler (default: INFO)
        json_format: Emit one JSON object per line instead of console text
        suppress_noisy: Quiet down HTTP client loggers

    Returns:
        The package logger
    """
    if sys.platform == "win32":
        safe_stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
        handler = logging.StreamHandler(safe_stdout)
    else:
        handler = logging.StreamHandler(sys.stdout)

    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_format else ConsoleFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if suppress_noisy:
        for logger_name in NOISY_LOGGERS:
            logging.getLogger(logger_name).setLevel(logging.WARNING)

    return logging.getLogger("zoho_oauth2")


def get_logger(name: str) -> logging.Logger:
    """Get a logger; configuration comes from setup_logging()."""
    return logging.getLogger(name)
