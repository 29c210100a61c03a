"""User repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union
from uuid import UUID

from conduit.domain.shared.result import Result
from conduit_identity.domain.user.aggregates.user import NewUser, User
from conduit_identity.domain.user.value_objects import Email, UniqueField


@dataclass(frozen=True)
class UniqueViolation:
    """Insert rejected by a uniqueness constraint on ``field``."""

    field: UniqueField


@dataclass(frozen=True)
class StorageFailure:
    """Insert failed for a reason unrelated to the data (outage, bug)."""

    reason: str


UserRepositoryError = Union[UniqueViolation, StorageFailure]


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Uniqueness of username and email must be enforced atomically by the
    store at write time; ``insert_user`` reports the violated field.
    Lookups raise ``UserStorageError`` when the store fails.
    """

    @abstractmethod
    async def insert_user(
        self,
        new_user: NewUser,
    ) -> Result[UUID, UserRepositoryError]:
        """Insert a user and return the id assigned by the store."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their (normalized) email address."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""
