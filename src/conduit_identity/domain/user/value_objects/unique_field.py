from enum import Enum


class UniqueField(str, Enum):
    """User fields guarded by a uniqueness constraint."""

    USERNAME = "username"
    EMAIL = "email"
