# hedged_twr/schemas/errors.py
"""
Pydantic schemas for structured failure payloads.

The calculation core raises typed exceptions; calling layers that need a
serializable form (API responses, audit records) build an ErrorDetail from
them. Presentation text stays with the caller.
"""

from pydantic import BaseModel, Field

from hedged_twr.services.exceptions import ServiceError


class ErrorDetail(BaseModel):
    """
    Standard error format.

    Example:
        {
            "error": "ZeroDenominatorError",
            "message": "Cannot compute return for period 2: ...",
            "details": {"field": "periods", "index": 2, "denominator_index": 1}
        }
    """

    error: str = Field(
        ...,
        description="Error type/code (e.g., 'InsufficientPeriodsError')"
    )
    message: str = Field(
        ...,
        description="Human-readable error message"
    )
    details: dict | None = Field(
        default=None,
        description="Additional error context (optional)"
    )

    @classmethod
    def from_exception(cls, exc: ServiceError) -> "ErrorDetail":
        return cls(
            error=type(exc).__name__,
            message=exc.message,
            details=exc.context or None,
        )
