"""Request-scoped authentication context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from conduit_auth import TokenPayload


@dataclass(frozen=True)
class JwtContext:
    """Immutable context for the caller of one authenticated request.

    Built by the guard after the token verified; handed to the handler as
    an explicit argument and discarded with the request.
    """

    user_id: UUID
    token: str = field(repr=False)

    @classmethod
    def create(cls, payload: TokenPayload, token: str) -> JwtContext:
        return cls(user_id=payload.user_id, token=token)

    def __str__(self) -> str:
        return f"JwtContext({self.user_id})"
