# hedged_twr/services/__init__.py
"""
Service layer for the return calculation.

Services have NO knowledge of transport or presentation: they take plain
domain objects, return Decimals, and raise domain-specific exceptions.

Architecture:
    services/
    ├── __init__.py                  # This file - main exports
    ├── exceptions.py                # Domain exceptions
    ├── constants.py                 # Calendar and precision constants
    └── analytics/                   # Hedged TWR engine
        ├── types.py                 # Period / result types
        └── returns.py               # Calculation core and formatters
"""

from hedged_twr.services.analytics import HedgedReturnCalculator, HedgedReturnResult, Period
from hedged_twr.services.exceptions import (
    ServiceError,
    ValidationError,
    ReturnCalculationError,
    InsufficientPeriodsError,
    ZeroDenominatorError,
    UndefinedAnnualizationError,
)

__all__ = [
    # Calculator
    "HedgedReturnCalculator",
    "HedgedReturnResult",
    "Period",

    # Exceptions
    "ServiceError",
    "ValidationError",
    "ReturnCalculationError",
    "InsufficientPeriodsError",
    "ZeroDenominatorError",
    "UndefinedAnnualizationError",
]
