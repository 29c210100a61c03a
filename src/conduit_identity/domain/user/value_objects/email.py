"""Email value object.

Provides validated, normalized email addresses used as the login key.
"""

import re
from dataclasses import dataclass

from conduit_identity.domain.user.exceptions import InvalidEmailError

# Validates: user@domain.tld (minimum requirements)
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        normalized = self.normalize(self.value)

        if not EMAIL_PATTERN.match(normalized):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    @staticmethod
    def normalize(value: str) -> str:
        """Lower-case and trim an address without validating it."""
        return value.strip().lower()

    @classmethod
    def is_valid(cls, value: str) -> bool:
        if not value:
            return False
        return EMAIL_PATTERN.match(cls.normalize(value)) is not None

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
