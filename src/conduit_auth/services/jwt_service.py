"""JWT token service.

Provides stateless bearer token issuance and verification.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from conduit.domain.shared.result import Failure, Result, Success
from conduit_auth.errors import TokenError
from conduit_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    The signing secret is injected once at construction and never exposed.
    Tokens carry the user id (``sub``), the issuance time (``iat``) and,
    when an expiry policy is configured, an expiration (``exp``).

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id)
    >>> service.verify_token(token).unwrap().user_id == user_id
    True
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "iat")

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int | None = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until a token expires (default 24). ``None`` or ``0``
            issues tokens without an ``exp`` claim.
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = (
            timedelta(hours=access_token_expire_hours)
            if access_token_expire_hours
            else None
        )

    @property
    def access_token_expire(self) -> timedelta | None:
        return self._access_expire

    def create_access_token(
        self,
        user_id: UUID,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token for a user.

        Parameters
        ----------
        user_id
            The user's unique identifier
        expires_delta
            Custom expiration time (optional, overrides the configured one)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload: dict = {
            "sub": str(user_id),
            "iat": now,
        }

        expire = expires_delta or self._access_expire
        if expire is not None:
            payload["exp"] = now + expire

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> Result[TokenPayload, TokenError]:
        """Verify and decode a JWT token.

        The signature is checked before any claim is read; the accepted
        algorithm is pinned so a token cannot pick its own.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        ``Success(TokenPayload)`` or ``Failure(TokenError)``
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError:
            return Failure(TokenError.EXPIRED)
        except jwt.InvalidSignatureError:
            return Failure(TokenError.INVALID_SIGNATURE)
        except jwt.InvalidTokenError:
            return Failure(TokenError.MALFORMED)

        try:
            user_id = UUID(payload["sub"])
            issued_at = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
            expires_at = (
                datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
                if "exp" in payload
                else None
            )
        except (KeyError, TypeError, ValueError, OverflowError):
            return Failure(TokenError.MALFORMED)

        return Success(
            TokenPayload(
                user_id=user_id,
                issued_at=issued_at,
                expires_at=expires_at,
            ),
        )

    def __repr__(self) -> str:
        return f"JWTService(algorithm={self.ALGORITHM!r}, expire={self._access_expire})"
