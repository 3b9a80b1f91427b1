# hedged_twr/schemas/__init__.py
"""
Pydantic schemas for the caller contract.

- returns: Hedged TWR request/response
- errors: Structured failure payload

Usage:
    from hedged_twr.schemas import HedgedReturnRequest, HedgedReturnResponse
    from hedged_twr.schemas import ErrorDetail
"""

from hedged_twr.schemas.errors import ErrorDetail
from hedged_twr.schemas.returns import (
    HedgedReturnRequest,
    HedgedReturnResponse,
    PeriodInput,
)

__all__ = [
    # Returns
    "PeriodInput",
    "HedgedReturnRequest",
    "HedgedReturnResponse",
    # Errors
    "ErrorDetail",
]
