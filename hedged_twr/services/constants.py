# hedged_twr/services/constants.py
"""
Centralized constants for the hedged return calculator.

Single source of truth for the calendar and rounding rules applied by the
calculation core. These are part of the reporting contract and are
deliberately not exposed through environment configuration.

Usage:
    from hedged_twr.services.constants import (
        CALENDAR_DAYS_PER_YEAR,
        INTERNAL_PRECISION,
    )
"""

from decimal import Decimal


# =============================================================================
# FINANCIAL CALENDAR CONSTANTS
# =============================================================================

# Standard number of calendar days in a year
# Series spanning MORE than this many days are annualized (365 itself is not)
CALENDAR_DAYS_PER_YEAR: int = 365

# Minimum number of periods in a series: one baseline plus one return period
MIN_PERIODS: int = 2


# =============================================================================
# ROUNDING / PRECISION
# =============================================================================

# Decimal places kept in the returned TWR (0.039744)
INTERNAL_PRECISION: int = 6

# Significant digits for every intermediate step (the decimal module default)
# Rounding to a fixed number of places widens this as the magnitude needs
CALCULATION_PRECISION: int = 28

# Decimal places shown in tables and charts (0.0397)
DISPLAY_PRECISION: int = 4

# Decimal places of the percentage string (3.97%)
PERCENTAGE_PRECISION: int = 2


# =============================================================================
# DECIMAL HELPERS
# =============================================================================

ZERO: Decimal = Decimal("0")
ONE: Decimal = Decimal("1")
