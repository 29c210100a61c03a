"""User aggregate and its read projections."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union
from uuid import UUID

from conduit.domain.shared.time import utc_now
from conduit_identity.domain.user.value_objects.email import Email


@dataclass(frozen=True)
class NewUser:
    """Insert command for a user that has no id yet.

    The repository assigns the id when the row is written.
    """

    username: str
    email: str
    password_hash: str = field(repr=False)
    bio: str = ""
    image: str = ""


@dataclass(frozen=True)
class ProfileInfo:
    """Profile fields returned on login."""

    username: str
    bio: str = ""
    image: str = ""


@dataclass(frozen=True)
class UserProfile:
    """Externally safe view of a user (no password hash)."""

    user_id: UUID
    username: str
    email: str
    bio: str = ""
    image: str = ""


class User:
    """
    User aggregate root.

    Holds identity, credentials and profile fields. The password hash is
    available to the service for verification but is never part of any
    projection or ``repr``.
    """

    def __init__(
        self,
        id: UUID,
        username: str,
        email: Union[str, Email],
        password_hash: str,
        bio: str = "",
        image: str = "",
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id
        self._username = username
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._bio = bio or ""
        self._image = image or ""
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def bio(self) -> str:
        return self._bio

    @property
    def image(self) -> str:
        return self._image

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def profile(self) -> UserProfile:
        return UserProfile(
            user_id=self._id,
            username=self._username,
            email=self.email,
            bio=self._bio,
            image=self._image,
        )

    def profile_info(self) -> ProfileInfo:
        return ProfileInfo(username=self._username, bio=self._bio, image=self._image)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        username: str,
        email: Union[str, Email],
        password_hash: str,
        bio: str | None,
        image: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            bio=bio or "",
            image=image or "",
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username!r}, email={self.email})"
