# hedged_twr/services/analytics/types.py
"""
Data types for the hedged return calculator.

All types use Decimal for financial precision.

Architecture:
    - Period: One valuation point of the series (input, immutable)
    - HedgedReturnResult: Full trace of a single calculation (output)
"""

import decimal
from dataclasses import dataclass, field
from decimal import Decimal

from hedged_twr.services.exceptions import ValidationError


def to_decimal(value: Decimal | float | int | str, field: str | None = None) -> Decimal:
    """
    Convert a numeric input to a finite Decimal without binary float artifacts.

    Floats go through str() so 0.95 becomes Decimal("0.95"),
    not Decimal("0.9499999999999999555910790149937...").

    Args:
        value: Number to convert
        field: Name reported in the error when the value is rejected

    Raises:
        TypeError: If value is a bool
        ValidationError: If value is NaN, infinite, or not a number
    """
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid numeric input")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except decimal.InvalidOperation as exc:
            raise ValidationError(f"Not a number: {value!r}", field=field) from exc

    if not result.is_finite():
        raise ValidationError(f"Value must be finite, got {result}", field=field)

    return result


# =============================================================================
# INPUT TYPES
# =============================================================================

@dataclass(frozen=True)
class Period:
    """
    A single period of the portfolio series.

    The first period of a series is the baseline: only its adjusted value
    is used (as the first denominator), its cash flow is ignored.

    Attributes:
        portfolio_value: V, portfolio value in base currency at period end
        cash_flow: C, net external flow (positive = deposit, negative = withdrawal)
        hedge_ratio: FX, share of currency exposure hedged (nominally 0-1)
        hedge_factor: h, hedge effectiveness (nominally 0-1, 1 = perfect)

    Note:
        hedge_ratio and hedge_factor are not range-checked. Values outside
        [0, 1] flow through the formula unchanged.
    """
    portfolio_value: Decimal
    cash_flow: Decimal = field(default_factory=lambda: Decimal("0"))
    hedge_ratio: Decimal = field(default_factory=lambda: Decimal("0"))
    hedge_factor: Decimal = field(default_factory=lambda: Decimal("1"))

    def __post_init__(self) -> None:
        for name in ("portfolio_value", "cash_flow", "hedge_ratio", "hedge_factor"):
            object.__setattr__(self, name, to_decimal(getattr(self, name), field=name))


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass
class HedgedReturnResult:
    """
    Trace of one hedged TWR calculation.

    Attributes:
        adjusted_values: V'_i for every period, in series order
        period_factors: (V'_i - C_i) / V'_{i-1} for i = 1..n-1
        raw_twr: Chained product minus one, before annualization and rounding
        annualized: True if total_days > 365 and annualization was applied
        total_days: Day count the calculation was made for
        twr: Final value, rounded half-up to 6 decimal places
    """
    adjusted_values: list[Decimal]
    period_factors: list[Decimal]
    raw_twr: Decimal
    annualized: bool
    total_days: int
    twr: Decimal

    @property
    def period_count(self) -> int:
        return len(self.adjusted_values)
