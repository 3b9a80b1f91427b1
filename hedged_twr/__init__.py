"""
Hedged Time-Weighted Return calculator.

    from hedged_twr import HedgedReturnCalculator, Period
"""

from hedged_twr.services import (
    HedgedReturnCalculator,
    HedgedReturnResult,
    Period,
    InsufficientPeriodsError,
    ReturnCalculationError,
    UndefinedAnnualizationError,
    ZeroDenominatorError,
)

__version__ = "1.0.0"

__all__ = [
    "HedgedReturnCalculator",
    "HedgedReturnResult",
    "Period",
    "ReturnCalculationError",
    "InsufficientPeriodsError",
    "ZeroDenominatorError",
    "UndefinedAnnualizationError",
]
