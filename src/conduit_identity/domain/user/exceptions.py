"""User domain exceptions.

These signal programming errors or storage outages. Expected failures
(duplicate accounts, bad input) travel as Result values instead.
"""


class InvalidEmailError(ValueError):
    """Raised when an Email value object is built from an invalid address."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UserStorageError(Exception):
    """The user store could not be reached or failed unexpectedly.

    The message is for logs only and must never reach an API client.
    """

    def __init__(self, message: str = "User storage failure") -> None:
        self.message = message
        super().__init__(message)
