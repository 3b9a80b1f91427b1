# hedged_twr/schemas/returns.py
"""
Pydantic schemas for the hedged TWR caller contract.

These schemas sit between a calling service (API handler, report job) and
the calculation core:
- HedgedReturnRequest: ordered periods + day count, converted to Period objects
- HedgedReturnResponse: rounded result plus display strings

Design decisions:
- Numeric inputs are parsed straight into Decimal (floats via their
  string form) so the core never sees binary float artifacts
- Output numbers are serialized as STRINGS to preserve Decimal precision
- Series length is NOT validated here; the core raises
  InsufficientPeriodsError so callers get one failure type for it
- hedge_ratio / hedge_factor are NOT range-checked, matching the core
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from hedged_twr.services.analytics import (
    HedgedReturnResult,
    Period,
    format_for_display,
    to_percentage_string,
)


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class PeriodInput(BaseModel):
    """One period of the series as supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    portfolio_value: Decimal = Field(
        ...,
        ge=Decimal("0"),
        description="Portfolio value in base currency at period end (V)"
    )
    cash_flow: Decimal = Field(
        default=Decimal("0"),
        description="Net external cash flow during the period (C), deposit > 0"
    )
    hedge_ratio: Decimal = Field(
        default=Decimal("0"),
        description="Proportion of currency exposure hedged (FX), nominally 0-1"
    )
    hedge_factor: Decimal = Field(
        default=Decimal("1"),
        description="Hedge effectiveness (h), nominally 0-1"
    )

    def to_period(self) -> Period:
        return Period(
            portfolio_value=self.portfolio_value,
            cash_flow=self.cash_flow,
            hedge_ratio=self.hedge_ratio,
            hedge_factor=self.hedge_factor,
        )


class HedgedReturnRequest(BaseModel):
    """
    Hedged TWR calculation request.

    Periods must be in chronological order; the first is the baseline.
    """

    periods: list[PeriodInput] = Field(
        ...,
        description="Chronologically ordered periods (at least 2)"
    )
    total_days: int = Field(
        ...,
        ge=1,
        description="Calendar days spanned by the series (annualized if > 365)"
    )

    def to_periods(self) -> list[Period]:
        return [p.to_period() for p in self.periods]


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class HedgedReturnResponse(BaseModel):
    """
    Hedged TWR calculation result.

    All numeric values are strings to preserve precision.
    """

    twr: str = Field(
        ...,
        description="Hedged TWR as decimal, 6 places (e.g., '0.039744')"
    )
    twr_display: str = Field(
        ...,
        description="TWR for tables and charts, 4 places (e.g., '0.0397')"
    )
    twr_percentage: str = Field(
        ...,
        description="TWR as percentage, 2 places (e.g., '3.97%')"
    )
    annualized: bool = Field(
        ...,
        description="True if the series spans more than 365 days"
    )
    total_days: int = Field(..., description="Calendar days of the series")
    period_count: int = Field(..., description="Number of periods in the series")

    @classmethod
    def from_result(cls, result: HedgedReturnResult) -> "HedgedReturnResponse":
        return cls(
            twr=str(result.twr),
            twr_display=format_for_display(result.twr),
            twr_percentage=to_percentage_string(result.twr),
            annualized=result.annualized,
            total_days=result.total_days,
            period_count=result.period_count,
        )
