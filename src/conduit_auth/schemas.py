"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the claims extracted from a token whose signature has
    already been verified.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    issued_at
        Token issuance timestamp (``iat`` claim)
    expires_at
        Token expiration timestamp (``exp`` claim), None if the token
        was issued without an expiry policy
    """

    user_id: UUID
    issued_at: datetime
    expires_at: datetime | None = None

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        if self.expires_at is None:
            return False
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at
