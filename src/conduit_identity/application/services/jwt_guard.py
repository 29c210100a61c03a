"""Guard for authenticated requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from conduit.domain.shared.result import Failure, Result, Success
from conduit_identity.application.context import JwtContext

if TYPE_CHECKING:
    from conduit_auth import JWTService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unauthenticated:
    """Uniform rejection of a request without a valid token."""


class JwtGuard:
    """Turn an ``Authorization`` header into a ``JwtContext``.

    Accepts ``Token <jwt>`` (the RealWorld scheme) and ``Bearer <jwt>``.
    A missing header, an unknown scheme and every token failure (malformed,
    bad signature, expired) produce the same ``Unauthenticated`` value.

    The check is pure: it verifies the signature and never queries the
    user store, so rejecting unauthenticated traffic stays cheap.
    """

    SCHEMES = frozenset({"token", "bearer"})

    def __init__(self, jwt_service: JWTService):
        self._jwt_service = jwt_service

    def authenticate(
        self,
        authorization: str | None,
    ) -> Result[JwtContext, Unauthenticated]:
        token = self.extract_token(authorization)
        if token is None:
            logger.debug("Rejected request: missing or unparsable authorization header")
            return Failure(Unauthenticated())

        verified = self._jwt_service.verify_token(token)
        if verified.is_failure():
            logger.debug("Rejected request: token %s", verified.error.value)
            return Failure(Unauthenticated())

        return Success(JwtContext.create(verified.value, token))

    @classmethod
    def extract_token(cls, authorization: str | None) -> str | None:
        if not authorization:
            return None

        parts = authorization.strip().split()
        if len(parts) != 2:
            return None

        scheme, token = parts
        if scheme.lower() not in cls.SCHEMES:
            return None
        return token
