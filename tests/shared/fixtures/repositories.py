"""In-memory UserRepository for service-level tests.

Behaves like the SQL store: ids are assigned on insert, email and
username are unique, and a lookup outage can be simulated.
"""

from typing import Optional, Union
from uuid import UUID, uuid4

from conduit.domain.shared.result import Failure, Result, Success
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


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.users: dict[UUID, User] = {}
        self.unavailable = False

    async def insert_user(
        self,
        new_user: NewUser,
    ) -> Result[UUID, UserRepositoryError]:
        if self.unavailable:
            return Failure(StorageFailure("store unavailable"))

        email = Email.normalize(new_user.email)
        for user in self.users.values():
            if user.username == new_user.username:
                return Failure(UniqueViolation(UniqueField.USERNAME))
            if user.email == email:
                return Failure(UniqueViolation(UniqueField.EMAIL))

        user_id = uuid4()
        self.users[user_id] = User(
            id=user_id,
            username=new_user.username,
            email=email,
            password_hash=new_user.password_hash,
            bio=new_user.bio,
            image=new_user.image,
        )
        return Success(user_id)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        self._check_available()
        value = email.value if isinstance(email, Email) else Email.normalize(email)
        return next((u for u in self.users.values() if u.email == value), None)

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        self._check_available()
        return self.users.get(user_id)

    def _check_available(self) -> None:
        if self.unavailable:
            msg = "store unavailable"
            raise UserStorageError(msg)
