"""SQLAlchemy implementation of UserRepository."""

import logging
import re
from typing import Union
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.shared.result import Failure, Result, Success
from conduit.domain.shared.time import ensure_tz_aware
from conduit_identity.domain.user import (
    Email,
    NewUser,
    StorageFailure,
    UniqueField,
    UniqueViolation,
    User,
    UserRepository,
    UserRepositoryError,
    UserStorageError,
)
from conduit_identity.infrastructure.persistence.sqlalchemy.models import (
    EMAIL_CONSTRAINT,
    USERNAME_CONSTRAINT,
    UserModel,
)

logger = logging.getLogger(__name__)

_FIELD_BY_CONSTRAINT: dict[str, UniqueField] = {
    USERNAME_CONSTRAINT: UniqueField.USERNAME,
    EMAIL_CONSTRAINT: UniqueField.EMAIL,
}
_FIELD_BY_COLUMN: dict[str, UniqueField] = {
    "users.username": UniqueField.USERNAME,
    "users.email": UniqueField.EMAIL,
}

# Only the first line of a driver message is matched; later lines
# (PostgreSQL DETAIL) echo the rejected values.
_PG_CONSTRAINT = re.compile(r'unique constraint "([^"]+)"', re.IGNORECASE)
_SQLITE_COLUMN = re.compile(r"unique constraint failed: (\S+)$", re.IGNORECASE)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Uniqueness is left to the database constraints; a failed insert rolls
    the session back so no partial row survives. Committing a successful
    insert is the caller's unit of work.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_user(
        self,
        new_user: NewUser,
    ) -> Result[UUID, UserRepositoryError]:
        model = UserModel(
            id=uuid4(),
            username=new_user.username,
            email=Email.normalize(new_user.email),
            password_hash=new_user.password_hash,
            bio=new_user.bio,
            image=new_user.image,
        )

        try:
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            field = self._violated_field(e)
            if field is None:
                logger.error("Unexpected integrity error on user insert: %s", e.orig)
                return Failure(StorageFailure(str(e.orig)))
            logger.info("Rejected user insert: %s already taken", field.value)
            return Failure(UniqueViolation(field))
        except (SQLAlchemyError, OSError) as e:
            await self._safe_rollback()
            logger.exception("User insert failed")
            return Failure(StorageFailure(str(e)))

        logger.debug("Inserted user: %s", model.id)
        return Success(model.id)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email.normalize(email)

        stmt = select(UserModel).where(UserModel.email == email_value)
        model = await self._scalar_one_or_none(stmt, "find_by_email")

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        model = await self._scalar_one_or_none(stmt, "find_by_id")

        if model is None:
            return None

        return self._map_to_domain(model)

    async def _scalar_one_or_none(self, stmt, operation: str) -> UserModel | None:
        try:
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            msg = f"{operation} failed: {e}"
            raise UserStorageError(msg) from e

    async def _safe_rollback(self) -> None:
        try:
            await self._session.rollback()
        except (SQLAlchemyError, OSError):
            logger.warning("Rollback after failed user insert did not complete")

    @staticmethod
    def _violated_field(error: IntegrityError) -> UniqueField | None:
        # asyncpg exposes the constraint name on the wrapped driver error
        for source in (error.orig, getattr(error.orig, "__cause__", None)):
            constraint = getattr(source, "constraint_name", None)
            if constraint in _FIELD_BY_CONSTRAINT:
                return _FIELD_BY_CONSTRAINT[constraint]

        lines = str(error.orig).strip().splitlines()
        first_line = lines[0].strip() if lines else ""

        match = _PG_CONSTRAINT.search(first_line)
        if match:
            return _FIELD_BY_CONSTRAINT.get(match.group(1).lower())

        match = _SQLITE_COLUMN.search(first_line)
        if match:
            return _FIELD_BY_COLUMN.get(match.group(1).lower())
        return None

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            bio=model.bio,
            image=model.image,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
