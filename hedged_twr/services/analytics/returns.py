# hedged_twr/services/analytics/returns.py
"""
Hedged Time-Weighted Return calculation.

This module contains pure functions for the hedged TWR formula family:
- Hedge adjustment of each period's portfolio value
- Chained period return over the adjusted series
- Optional annualization for series longer than one year
- Half-up decimal rounding and display formatting

All functions are stateless and never mutate their inputs, so they are
safe to call concurrently with distinct series.

Formulas:
    Hedge adjustment:
        V'_i = V_i × (1 − FX_i × (1 − h_i))

    Chained return (i = 1 .. n-1):
        r_i = (V'_i − C_i) / V'_{i-1}
        TWR = ∏ r_i − 1

    Annualization (days > 365 only):
        TWR_ann = (1 + TWR)^(365/days) − 1

Precision Note:
    Every step runs in Decimal. Exponentiation uses Decimal.__pow__(), which
    supports non-integer exponents; float is used only as a fallback when
    Decimal signals InvalidOperation for extreme magnitudes. Rounding is
    always Decimal.quantize() with ROUND_HALF_UP, never float round(), so
    6dp / 4dp / 2dp outputs are exact.

    Arithmetic runs in a fixed local context (28 digits, half-even for
    intermediates), so a caller that changed decimal.getcontext() gets the
    same result as everyone else. Fixed-place rounding widens the precision
    to fit the magnitude instead of failing on very large values.
"""

import decimal
import logging
from collections.abc import Sequence
from decimal import Decimal, ROUND_HALF_UP

from hedged_twr.services.analytics.types import HedgedReturnResult, Period, to_decimal
from hedged_twr.services.constants import (
    CALCULATION_PRECISION,
    CALENDAR_DAYS_PER_YEAR,
    DISPLAY_PRECISION,
    INTERNAL_PRECISION,
    MIN_PERIODS,
    ONE,
    PERCENTAGE_PRECISION,
    ZERO,
)
from hedged_twr.services.exceptions import (
    InsufficientPeriodsError,
    UndefinedAnnualizationError,
    ZeroDenominatorError,
)

logger = logging.getLogger(__name__)


def _calculation_context(precision: int = CALCULATION_PRECISION) -> decimal.Context:
    return decimal.Context(
        prec=precision,
        rounding=decimal.ROUND_HALF_EVEN,
        Emin=-999999,
        Emax=999999,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
    )


# =============================================================================
# ROUNDING
# =============================================================================

def round_half_up(value: Decimal | float | int | str, places: int) -> Decimal:
    """
    Round to a fixed number of decimal places, ties away from zero.

    Floats are converted through their shortest string form first, so
    round_half_up(0.0000005, 6) == Decimal("0.000001") rather than whatever
    the nearest binary fraction would produce.

    Args:
        value: Number to round
        places: Decimal places to keep

    Returns:
        Decimal with exactly `places` digits after the point
    """
    number = to_decimal(value)
    # Result needs every integer digit plus `places` fractional ones
    precision = max(CALCULATION_PRECISION, number.adjusted() + places + 2)
    with decimal.localcontext(_calculation_context(precision)):
        return number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


# =============================================================================
# HEDGE ADJUSTMENT
# =============================================================================

def calculate_adjusted_value(
        portfolio_value: Decimal,
        hedge_ratio: Decimal,
        hedge_factor: Decimal,
) -> Decimal:
    """
    Apply the hedge correction to a portfolio value.

    Formula: V' = V × (1 − FX × (1 − h))

    Neutral (V' == V) when hedge_ratio is 0 or hedge_factor is 1.
    Maximal (V' == V × h) when hedge_ratio is 1.

    Args:
        portfolio_value: V
        hedge_ratio: FX
        hedge_factor: h

    Returns:
        Adjusted value V'
    """
    with decimal.localcontext(_calculation_context()):
        return portfolio_value * (ONE - hedge_ratio * (ONE - hedge_factor))


# =============================================================================
# CHAINED PERIOD RETURN
# =============================================================================

def calculate_period_factors(
        adjusted_values: Sequence[Decimal],
        periods: Sequence[Period],
) -> list[Decimal]:
    """
    Calculate the growth factor of every non-baseline period.

    Formula: r_i = (V'_i − C_i) / V'_{i-1}, for i = 1 .. n-1

    The zero check runs before each division. A zero adjusted value is
    fine on the last period (it is only ever a numerator there).

    Args:
        adjusted_values: V' for every period
        periods: The input periods (for cash flows)

    Returns:
        List of n-1 growth factors

    Raises:
        ZeroDenominatorError: If V'_{i-1} is zero for some i
    """
    factors = []

    for i in range(1, len(adjusted_values)):
        previous_value = adjusted_values[i - 1]

        if previous_value == ZERO:
            logger.warning(
                f"Hedged TWR: zero adjusted value at period {i - 1}, "
                f"cannot compute return for period {i}",
                extra={"index": i, "denominator_index": i - 1},
            )
            raise ZeroDenominatorError(index=i)

        with decimal.localcontext(_calculation_context()):
            factor = (adjusted_values[i] - periods[i].cash_flow) / previous_value
        factors.append(factor)

    return factors


# =============================================================================
# ANNUALIZATION
# =============================================================================

def annualize_return(total_return: Decimal, total_days: int) -> Decimal:
    """
    Annualize a cumulative return for series longer than one year.

    Formula: (1 + r)^(365/days) − 1

    Series of 365 days or fewer are returned unchanged (365 itself is
    NOT annualized).

    Args:
        total_return: Cumulative return as decimal (e.g., 0.12 = 12%)
        total_days: Calendar days spanned by the series

    Returns:
        Annualized return, or total_return when days <= 365

    Raises:
        UndefinedAnnualizationError: If 1 + total_return is negative
    """
    if total_days <= CALENDAR_DAYS_PER_YEAR:
        return total_return

    with decimal.localcontext(_calculation_context()):
        base = ONE + total_return

        if base < ZERO:
            logger.warning(
                f"Hedged TWR: cannot annualize negative growth factor {base} "
                f"over {total_days} days",
                extra={"growth_factor": base, "total_days": total_days},
            )
            raise UndefinedAnnualizationError(growth_factor=base, total_days=total_days)

        if base == ZERO:
            return -ONE  # Total loss stays a total loss

        exponent = Decimal(CALENDAR_DAYS_PER_YEAR) / Decimal(total_days)

        try:
            annualized = base ** exponent - ONE
        except decimal.InvalidOperation:
            # Fallback to float for edge cases (extremely large/small values)
            annualized = Decimal(str(float(base) ** float(exponent))) - ONE

    return annualized


# =============================================================================
# HEDGED TWR
# =============================================================================

def calculate_hedged_twr_breakdown(
        periods: Sequence[Period] | None,
        total_days: int,
) -> HedgedReturnResult:
    """
    Calculate the hedged TWR and keep every intermediate value.

    Steps:
        1. Hedge-adjust every period value
        2. Chain (V'_i − C_i) / V'_{i-1} over the series
        3. TWR = product − 1
        4. Annualize if total_days > 365
        5. Round half-up to 6 decimal places

    Args:
        periods: Chronologically ordered periods, first one is the baseline
        total_days: Calendar days spanned by the series

    Returns:
        HedgedReturnResult with adjusted values, factors, raw and rounded TWR

    Raises:
        InsufficientPeriodsError: If periods is None or has fewer than 2 entries
        ZeroDenominatorError: If a non-final adjusted value is zero
        UndefinedAnnualizationError: If a negative growth factor must be annualized
    """
    if periods is None or len(periods) < MIN_PERIODS:
        count = 0 if periods is None else len(periods)
        logger.warning(
            f"Hedged TWR: insufficient periods ({count})",
            extra={"period_count": count},
        )
        raise InsufficientPeriodsError(period_count=count, minimum=MIN_PERIODS)

    adjusted_values = [
        calculate_adjusted_value(p.portfolio_value, p.hedge_ratio, p.hedge_factor)
        for p in periods
    ]

    factors = calculate_period_factors(adjusted_values, periods)

    with decimal.localcontext(_calculation_context()):
        product = ONE
        for factor in factors:
            product *= factor

        raw_twr = product - ONE

    annualized = total_days > CALENDAR_DAYS_PER_YEAR
    twr = annualize_return(raw_twr, total_days)

    if annualized:
        logger.debug(
            f"Hedged TWR: annualized {raw_twr} over {total_days} days -> {twr}",
            extra={"total_days": total_days, "annualized": True},
        )

    result = HedgedReturnResult(
        adjusted_values=adjusted_values,
        period_factors=factors,
        raw_twr=raw_twr,
        annualized=annualized,
        total_days=total_days,
        twr=round_half_up(twr, INTERNAL_PRECISION),
    )

    logger.debug(
        f"Hedged TWR: {result.period_count} periods, {total_days} days, "
        f"twr={result.twr}",
        extra={
            "period_count": result.period_count,
            "total_days": total_days,
            "annualized": annualized,
            "twr": result.twr,
        },
    )

    return result


def calculate_hedged_twr(periods: Sequence[Period] | None, total_days: int) -> Decimal:
    """
    Calculate the hedged TWR rounded to 6 decimal places.

    See calculate_hedged_twr_breakdown() for the formula and failures.

    Example:
        >>> periods = [
        ...     Period(Decimal("100000"), Decimal("0"), Decimal("0.5"), Decimal("0.95")),
        ...     Period(Decimal("105000"), Decimal("1000"), Decimal("0.5"), Decimal("0.95")),
        ... ]
        >>> calculate_hedged_twr(periods, 30)
        Decimal('0.039744')
    """
    return calculate_hedged_twr_breakdown(periods, total_days).twr


# =============================================================================
# DISPLAY FORMATTING
# =============================================================================

def _format_fixed(value: Decimal, places: int) -> str:
    # -0.0000 reads as a loss; render zero unsigned
    if value.is_zero():
        value = value.copy_abs()
    return f"{value:.{places}f}"


def format_for_display(value: Decimal | float | int | str) -> str:
    """
    Format a return for tables and charts: exactly 4 decimal places.

    Rounds half-up from the given value, it does not truncate.

    Example:
        >>> format_for_display(Decimal("0.039744"))
        '0.0397'
    """
    return _format_fixed(round_half_up(value, DISPLAY_PRECISION), DISPLAY_PRECISION)


def to_percentage_string(value: Decimal | float | int | str) -> str:
    """
    Format a return as a percentage with 2 decimal places and a '%' suffix.

    Example:
        >>> to_percentage_string(Decimal("0.039744"))
        '3.97%'
    """
    number = to_decimal(value)
    # Shifting the point is exact once every digit fits
    precision = max(CALCULATION_PRECISION, len(number.as_tuple().digits))
    with decimal.localcontext(_calculation_context(precision)):
        percent = round_half_up(number.scaleb(2), PERCENTAGE_PRECISION)
    return f"{_format_fixed(percent, PERCENTAGE_PRECISION)}%"


# =============================================================================
# CALCULATOR FACADE
# =============================================================================

class HedgedReturnCalculator:
    """
    Calculator for hedged time-weighted returns.

    Stateless wrapper around the module functions, for callers that want
    a single object to inject. Holds no caches or counters.
    """

    @staticmethod
    def calculate(periods: Sequence[Period] | None, total_days: int) -> Decimal:
        """Hedged TWR rounded to 6 decimal places."""
        return calculate_hedged_twr(periods, total_days)

    @staticmethod
    def calculate_breakdown(
            periods: Sequence[Period] | None,
            total_days: int,
    ) -> HedgedReturnResult:
        """Hedged TWR with adjusted values and period factors."""
        return calculate_hedged_twr_breakdown(periods, total_days)

    @staticmethod
    def format_for_display(value: Decimal | float | int | str) -> str:
        return format_for_display(value)

    @staticmethod
    def to_percentage_string(value: Decimal | float | int | str) -> str:
        return to_percentage_string(value)
