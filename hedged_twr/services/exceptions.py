# hedged_twr/services/exceptions.py
"""
Service layer exceptions.

These exceptions represent domain-specific errors and contain NO presentation
knowledge. Callers (UI, API layers) are responsible for turning them into
human-readable messages; see hedged_twr.schemas.errors for the structured
payload.

Exception Hierarchy:
    ServiceError (base)
    └── ValidationError
        └── ReturnCalculationError
            ├── InsufficientPeriodsError
            ├── ZeroDenominatorError
            └── UndefinedAnnualizationError

All of these are caller-input failures: the same input always fails the
same way, so none of them is retryable.
"""

from decimal import Decimal


class ServiceError(Exception):
    """
    Base exception for all service layer errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def context(self) -> dict:
        """Structured context for error payloads (empty by default)."""
        return {}


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(ServiceError):
    """
    Raised when input validation fails.

    This is for programmatic validation errors (invalid series, bad day
    counts), NOT for payload validation which is handled by Pydantic.

    Attributes:
        field: The field that failed validation (optional)
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)

    @property
    def context(self) -> dict:
        return {"field": self.field} if self.field else {}


# =============================================================================
# RETURN CALCULATION ERRORS
# =============================================================================


class ReturnCalculationError(ValidationError):
    """
    Base exception for hedged TWR calculation failures.

    Raised before any partial result is produced.
    """
    pass


class InsufficientPeriodsError(ReturnCalculationError):
    """
    Raised when the series is missing, empty, or has fewer than 2 periods.

    Attributes:
        period_count: Number of periods supplied (0 when the series is None)
    """

    def __init__(self, period_count: int, minimum: int = 2) -> None:
        self.period_count = period_count
        self.minimum = minimum
        super().__init__(
            f"At least {minimum} periods required for TWR calculation, got {period_count}",
            field="periods",
        )

    @property
    def context(self) -> dict:
        return {
            "field": self.field,
            "period_count": self.period_count,
            "minimum": self.minimum,
        }


class ZeroDenominatorError(ReturnCalculationError):
    """
    Raised when an adjusted value used as a denominator is exactly zero.

    A zero adjusted value is only tolerated on the final period, where it
    is a numerator and represents a total loss.

    Attributes:
        index: Index of the period whose return cannot be computed
        denominator_index: Index of the zero-valued period (index - 1)
    """

    def __init__(self, index: int) -> None:
        self.index = index
        self.denominator_index = index - 1
        super().__init__(
            f"Cannot compute return for period {index}: "
            f"adjusted portfolio value of period {self.denominator_index} is zero",
            field="periods",
        )

    @property
    def context(self) -> dict:
        return {
            "field": self.field,
            "index": self.index,
            "denominator_index": self.denominator_index,
        }


class UndefinedAnnualizationError(ReturnCalculationError):
    """
    Raised when annualization would need a fractional power of a negative number.

    The growth factor (1 + TWR) only goes negative when cash flows exceed
    the adjusted value or hedge inputs are outside [0, 1].

    Attributes:
        growth_factor: The chained product (1 + TWR) before annualization
        total_days: Day count that triggered annualization
    """

    def __init__(self, growth_factor: Decimal, total_days: int) -> None:
        self.growth_factor = growth_factor
        self.total_days = total_days
        super().__init__(
            f"Cannot annualize negative growth factor {growth_factor} "
            f"over {total_days} days",
            field="total_days",
        )

    @property
    def context(self) -> dict:
        return {
            "field": self.field,
            "growth_factor": str(self.growth_factor),
            "total_days": self.total_days,
        }


__all__ = [
    # Base
    "ServiceError",
    # Validation
    "ValidationError",
    # Return calculation
    "ReturnCalculationError",
    "InsufficientPeriodsError",
    "ZeroDenominatorError",
    "UndefinedAnnualizationError",
]
