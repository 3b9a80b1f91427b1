# hedged_twr/utils/logging.py
"""
Logging configuration for the hedged TWR calculator.

The calculation modules only ever call logging.getLogger(__name__) and pass
the numbers behind each message as `extra` fields. They never configure
handlers. An application embedding the calculator either lets the records
propagate to its own setup, or calls setup_logging() once at startup to give
the `hedged_twr` logger a handler of its own:
- Level and format from the validated settings
- Correlation ID on every record
- JSON format carrying the calculation fields for log aggregation

Log Levels:
    DEBUG   - Per-calculation detail (period count, annualization, result)
    WARNING - Rejected input (insufficient periods, zero denominator,
              negative growth under annualization)

Environment Configuration:
    LOG_LEVEL=DEBUG       # See every calculation
    LOG_LEVEL=INFO        # Default
    LOG_FORMAT=json       # Machine-readable logs
    LOG_FORMAT=text       # Human-readable logs (default)
"""

import json
import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, TextIO

from hedged_twr.config import settings
from hedged_twr.utils.context import get_correlation_id

# =============================================================================
# CONSTANTS
# =============================================================================

# Logger every calculation module logs under
PACKAGE_LOGGER = "hedged_twr"

# Default text format: timestamp | level | correlation_id | logger_name | message
DEFAULT_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(correlation_id)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Placeholder when no correlation ID is available
NO_CORRELATION_ID = "no-correlation-id"

# `extra` fields the calculation modules attach to their records
CALCULATION_FIELDS = (
    "period_count",
    "total_days",
    "annualized",
    "twr",
    "index",
    "denominator_index",
    "growth_factor",
)


# =============================================================================
# CORRELATION ID FILTER
# =============================================================================

class CorrelationIdFilter(logging.Filter):
    """
    Logging filter that adds the correlation ID of the enclosing scope.

    Access in format string: %(correlation_id)s
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return True


# =============================================================================
# JSON FORMATTER
# =============================================================================

def _json_value(value: Any) -> Any:
    # Decimal keeps its exact digits as a string, like the response schema
    if isinstance(value, Decimal):
        return str(value)
    return value


class JsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Output format:
    {
        "timestamp": "2024-01-15T10:30:00.123+00:00",
        "level": "DEBUG",
        "logger": "hedged_twr.services.analytics.returns",
        "correlation_id": "report-2024-q4",
        "message": "Hedged TWR: 2 periods, 30 days, twr=0.039744",
        "calculation": {"period_count": 2, "total_days": 30,
                        "annualized": false, "twr": "0.039744"}
    }

    Only CALCULATION_FIELDS are picked up from the record; "calculation" is
    omitted when the record carries none of them.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "correlation_id": getattr(record, "correlation_id", NO_CORRELATION_ID),
            "message": record.getMessage(),
        }

        calculation = {
            name: _json_value(getattr(record, name))
            for name in CALCULATION_FIELDS
            if hasattr(record, name)
        }
        if calculation:
            log_entry["calculation"] = calculation

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


# =============================================================================
# SETUP FUNCTION
# =============================================================================

def setup_logging(
        level: str | None = None,
        log_format: str | None = None,
        stream: TextIO | None = None,
) -> logging.Logger:
    """
    Attach a correlation-aware handler to the `hedged_twr` logger.

    Repeated calls replace the handler rather than adding another one.
    Records stop propagating to the root logger, so an application that
    also logs the root does not print them twice.

    Args:
        level: Level name. Defaults to settings.log_level, which is
               validated when the settings load.
        log_format: 'text' or 'json'. Defaults to settings.log_format.
        stream: Output stream. Defaults to sys.stdout.

    Returns:
        The configured package logger

    Example:
        setup_logging()
        setup_logging(level="DEBUG", log_format="json")
    """
    log_level = level or settings.log_level
    format_type = log_format or settings.log_format

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=DEFAULT_TEXT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False

    logging.getLogger(__name__).info(
        f"Logging configured: level={log_level}, format={format_type}"
    )

    return package_logger
