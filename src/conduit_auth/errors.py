"""Authentication error values.

Token verification failures are returned inside a ``Failure`` rather than
raised. Callers at the HTTP boundary must collapse all of them into one
rejection so the reason is never revealed to the client.
"""

from enum import Enum


class TokenError(str, Enum):
    """Reasons a bearer token fails verification."""

    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"
