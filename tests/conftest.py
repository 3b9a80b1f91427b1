# tests/conftest.py
"""
Pytest configuration and fixtures.

This module provides shared fixtures for all tests:
- Period factory with the common hedge settings (FX=0.5, h=0.95)
- Reference series used across calculation and schema tests
- Package logger cleanup for tests that call setup_logging()
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")

import logging
from decimal import Decimal
from typing import Callable, Iterator

import pytest

from hedged_twr.services.analytics import HedgedReturnCalculator, Period
from hedged_twr.utils.logging import PACKAGE_LOGGER


# =============================================================================
# PERIOD FACTORIES
# =============================================================================

@pytest.fixture
def make_period() -> Callable[..., Period]:
    """
    Factory for periods with the default hedge settings.

    Usage:
        make_period("105000", cash_flow="1000")
    """
    def _make(
            portfolio_value,
            cash_flow="0",
            hedge_ratio="0.5",
            hedge_factor="0.95",
    ) -> Period:
        return Period(
            portfolio_value=Decimal(str(portfolio_value)),
            cash_flow=Decimal(str(cash_flow)),
            hedge_ratio=Decimal(str(hedge_ratio)),
            hedge_factor=Decimal(str(hedge_factor)),
        )

    return _make


@pytest.fixture
def single_period_series(make_period) -> list[Period]:
    """100000 -> 105000 with a 1000 deposit (TWR 0.039744 over 30 days)."""
    return [
        make_period("100000"),
        make_period("105000", cash_flow="1000"),
    ]


@pytest.fixture
def two_year_series(make_period) -> list[Period]:
    """100000 -> 112000, no flows (raw TWR 0.12)."""
    return [
        make_period("100000"),
        make_period("112000"),
    ]


@pytest.fixture
def calculator() -> HedgedReturnCalculator:
    return HedgedReturnCalculator()


# =============================================================================
# LOGGING
# =============================================================================

@pytest.fixture
def restore_package_logger() -> Iterator[logging.Logger]:
    """Undo setup_logging(): handlers, level and propagation of the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
