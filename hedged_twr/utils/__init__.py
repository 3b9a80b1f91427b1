# hedged_twr/utils/__init__.py
"""
Cross-cutting utilities:
- logging: Handler setup for the hedged_twr logger with correlation ID support
- context: Correlation ID scope (contextvars)

Usage:
    from hedged_twr.utils import setup_logging, correlation_scope
"""

from hedged_twr.utils.context import correlation_scope, get_correlation_id
from hedged_twr.utils.logging import setup_logging

__all__ = [
    # Logging
    "setup_logging",
    # Context
    "correlation_scope",
    "get_correlation_id",
]
