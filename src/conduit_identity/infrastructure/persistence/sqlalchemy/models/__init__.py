"""SQLAlchemy models for conduit_identity."""

from conduit_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    EMAIL_CONSTRAINT,
    USERNAME_CONSTRAINT,
    UserModel,
)

__all__ = [
    "EMAIL_CONSTRAINT",
    "USERNAME_CONSTRAINT",
    "UserModel",
]
