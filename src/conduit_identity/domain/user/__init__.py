"""User domain manages user identity and credentials.

This domain handles:
- User aggregate (id, username, email, password hash, profile fields)
- Insert command and read projections
- Repository interface with atomic uniqueness
"""

from conduit_identity.domain.user.aggregates import (
    NewUser,
    ProfileInfo,
    User,
    UserProfile,
)
from conduit_identity.domain.user.exceptions import (
    InvalidEmailError,
    UserStorageError,
)
from conduit_identity.domain.user.repositories import (
    StorageFailure,
    UniqueViolation,
    UserRepository,
    UserRepositoryError,
)
from conduit_identity.domain.user.value_objects import Email, UniqueField

__all__ = [
    "Email",
    "InvalidEmailError",
    "NewUser",
    "ProfileInfo",
    "StorageFailure",
    "UniqueField",
    "UniqueViolation",
    "User",
    "UserProfile",
    "UserRepository",
    "UserRepositoryError",
    "UserStorageError",
]
