"""Shared domain building blocks."""

from conduit.domain.shared.result import (
    Failure,
    Result,
    Success,
    UnwrapFailureError,
    from_optional,
)
from conduit.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "Failure",
    "Result",
    "Success",
    "UnwrapFailureError",
    "ensure_tz_aware",
    "from_optional",
    "utc_now",
]
