"""Conduit Identity - User accounts and authentication.

This module handles all identity-related concerns:
- User domain (aggregate, email value object, repository interface)
- Registration, login and token issuance (UserService)
- Authenticated-request guard (JwtGuard -> JwtContext)
- SQLAlchemy persistence

Expected failures are returned as Result values using the closed error
taxonomy in ``conduit_identity.application.errors``.
"""

from conduit_identity.application.context import JwtContext
from conduit_identity.application.errors import (
    Conflict,
    IncorrectLoginCredentials,
    Internal,
    NotFound,
    ServiceError,
    Validation,
)
from conduit_identity.application.services import (
    JwtGuard,
    Unauthenticated,
    UserService,
)
from conduit_identity.domain.user import (
    Email,
    InvalidEmailError,
    NewUser,
    ProfileInfo,
    StorageFailure,
    UniqueField,
    UniqueViolation,
    User,
    UserProfile,
    UserRepository,
    UserStorageError,
)

__all__ = [
    # Domain - User
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
    "UserStorageError",
    # Service errors
    "Conflict",
    "IncorrectLoginCredentials",
    "Internal",
    "NotFound",
    "ServiceError",
    "Validation",
    # Application
    "JwtContext",
    "JwtGuard",
    "Unauthenticated",
    "UserService",
]
