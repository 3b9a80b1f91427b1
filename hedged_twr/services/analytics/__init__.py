# hedged_twr/services/analytics/__init__.py
"""
Analytics package: hedged Time-Weighted Return.

Architecture:
    analytics/
    ├── __init__.py              # This file - package exports
    ├── types.py                 # Period input, HedgedReturnResult output
    └── returns.py               # Hedge adjustment, chaining, annualization

Usage:
    from hedged_twr.services.analytics import HedgedReturnCalculator, Period

    periods = [
        Period(Decimal("100000"), Decimal("0"), Decimal("0.5"), Decimal("0.95")),
        Period(Decimal("105000"), Decimal("1000"), Decimal("0.5"), Decimal("0.95")),
    ]

    twr = HedgedReturnCalculator.calculate(periods, total_days=30)
    print(HedgedReturnCalculator.format_for_display(twr))     # 0.0397
    print(HedgedReturnCalculator.to_percentage_string(twr))   # 3.97%
"""

from hedged_twr.services.analytics.returns import (
    HedgedReturnCalculator,
    annualize_return,
    calculate_adjusted_value,
    calculate_hedged_twr,
    calculate_hedged_twr_breakdown,
    calculate_period_factors,
    format_for_display,
    round_half_up,
    to_percentage_string,
)
from hedged_twr.services.analytics.types import (
    HedgedReturnResult,
    Period,
    to_decimal,
)

__all__ = [
    # Calculator
    "HedgedReturnCalculator",

    # Types
    "Period",
    "HedgedReturnResult",
    "to_decimal",

    # Individual functions (for testing)
    "calculate_adjusted_value",
    "calculate_period_factors",
    "annualize_return",
    "calculate_hedged_twr",
    "calculate_hedged_twr_breakdown",
    "round_half_up",
    "format_for_display",
    "to_percentage_string",
]
