"""Closed error taxonomy of the user service.

Every expected failure of ``UserService`` is one of these values, wrapped in
a ``Failure``. They are plain frozen dataclasses so two errors of the same
kind and content compare equal; in particular every
``IncorrectLoginCredentials()`` is indistinguishable from any other.
"""

from dataclasses import dataclass
from typing import Union

from conduit_identity.domain.user import UniqueField


@dataclass(frozen=True)
class Validation:
    """Structurally invalid input; lists every violation found."""

    errors: tuple[str, ...]


@dataclass(frozen=True)
class Conflict:
    """A uniqueness constraint rejected the value of ``field``."""

    field: UniqueField


@dataclass(frozen=True)
class IncorrectLoginCredentials:
    """Unknown email or wrong password, deliberately not told apart."""


@dataclass(frozen=True)
class NotFound:
    """An entity the caller asked for does not exist."""

    entity: str
    key: str


@dataclass(frozen=True)
class Internal:
    """Unexpected collaborator failure. Carries no storage detail."""

    message: str = "Internal error"


ServiceError = Union[
    Validation,
    Conflict,
    IncorrectLoginCredentials,
    NotFound,
    Internal,
]

__all__ = [
    "Conflict",
    "IncorrectLoginCredentials",
    "Internal",
    "NotFound",
    "ServiceError",
    "Validation",
]
