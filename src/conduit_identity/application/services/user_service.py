"""User service for registration, login, token issuance and profile lookup."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from uuid import UUID

from conduit.domain.shared.result import Failure, Result, Success
from conduit_identity.application.errors import (
    Conflict,
    IncorrectLoginCredentials,
    Internal,
    ServiceError,
    Validation,
)
from conduit_identity.domain.user import (
    Email,
    NewUser,
    ProfileInfo,
    UniqueViolation,
    UserProfile,
    UserRepositoryError,
    UserStorageError,
)

if TYPE_CHECKING:
    from conduit_auth import JWTService, PasswordHashingService
    from conduit_identity.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user accounts.

    Orchestrates the user repository, password hashing and JWT issuance to
    provide:
    - Registration
    - Login with email and password
    - Token issuance for an already authenticated user
    - Profile lookup by id

    Every operation returns a ``Result``; expected failures are values from
    ``conduit_identity.application.errors`` and are never raised. Storage
    outages surface as ``Internal`` and are logged here, never returned
    in detail.
    """

    BLANK = "can't be blank"

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(
        self,
        username: str,
        email: str,
        password: str,
    ) -> Result[UUID, ServiceError]:
        errors = self._validate_registration(username, email, password)
        if errors:
            return Failure(Validation(tuple(errors)))

        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        new_user = NewUser(
            username=username.strip(),
            email=Email(email).value,
            password_hash=password_hash,
        )

        # The insert's conflict signal is authoritative; no pre-check.
        inserted = await self._user_repo.insert_user(new_user)
        if inserted.is_failure():
            return Failure(self._from_repository_error(inserted.error))

        logger.info("User registered: %s (%s)", inserted.value, new_user.username)
        return Success(inserted.value)

    async def login(
        self,
        email: str,
        password: str,
    ) -> Result[tuple[UUID, ProfileInfo], ServiceError]:
        if not email or not email.strip() or not password:
            return Failure(IncorrectLoginCredentials())

        try:
            user = await self._user_repo.find_by_email(Email.normalize(email))
        except UserStorageError as e:
            return Failure(self._internal("login lookup", e))

        if user is None:
            return Failure(IncorrectLoginCredentials())

        matches = await asyncio.to_thread(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not matches:
            return Failure(IncorrectLoginCredentials())

        logger.info("User logged in: %s", user.id)
        return Success((user.id, user.profile_info()))

    async def generate_jwt_token(
        self,
        user_id: UUID,
        password: str,
    ) -> Result[str, ServiceError]:
        """Issue a bearer token for ``user_id``.

        Trust boundary: the password is only checked for structural
        validity, not against the stored hash. Call this only right after
        a successful ``register`` or ``login`` for the same user in the
        same request.
        """
        if not password:
            return Failure(Validation((f"password {self.BLANK}",)))

        token = self._jwt_service.create_access_token(user_id)
        logger.debug("Token issued for user: %s", user_id)
        return Success(token)

    async def get_user(self, user_id: UUID) -> Result[UserProfile | None, ServiceError]:
        try:
            user: User | None = await self._user_repo.find_by_id(user_id)
        except UserStorageError as e:
            return Failure(self._internal("user lookup", e))

        return Success(user.profile() if user is not None else None)

    def _validate_registration(
        self,
        username: str,
        email: str,
        password: str,
    ) -> list[str]:
        """Collect every violation, in field order."""
        errors: list[str] = []

        if not username or not username.strip():
            errors.append(f"username {self.BLANK}")

        if not email or not email.strip():
            errors.append(f"email {self.BLANK}")
        elif not Email.is_valid(email):
            errors.append("email is invalid")

        if not password:
            errors.append(f"password {self.BLANK}")
        elif not self._password_service.is_well_formed(password):
            errors.append(
                "password is too long "
                f"(maximum is {self._password_service.MAX_PASSWORD_BYTES} bytes)",
            )

        return errors

    def _from_repository_error(self, error: UserRepositoryError) -> ServiceError:
        if isinstance(error, UniqueViolation):
            return Conflict(error.field)
        logger.error("User insert failed: %s", error.reason)
        return Internal()

    def _internal(self, operation: str, error: UserStorageError) -> Internal:
        logger.error("Storage failure during %s: %s", operation, error.message)
        return Internal()
