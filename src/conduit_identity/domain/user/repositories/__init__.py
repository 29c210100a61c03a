from conduit_identity.domain.user.repositories.user_repository import (
    StorageFailure,
    UniqueViolation,
    UserRepository,
    UserRepositoryError,
)

__all__ = [
    "StorageFailure",
    "UniqueViolation",
    "UserRepository",
    "UserRepositoryError",
]
