"""Password hashing service using bcrypt.

Provides salted, deliberately slow password hashing and a verification
that never raises on corrupt stored hashes.
"""

import bcrypt


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt with a configurable work factor. Every call to ``hash``
    draws a fresh random salt, so hashing the same password twice yields
    different strings that both verify.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hashed = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hashed)
    True
    >>> service.verify("wrong_password", hashed)
    False
    """

    DEFAULT_ROUNDS = 12

    # bcrypt ignores (or rejects) input beyond 72 bytes
    MAX_PASSWORD_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Tests use 4 to stay fast.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def is_well_formed(self, password: str) -> bool:
        """Check that a password can be hashed.

        A well-formed password is non-empty and fits bcrypt's input limit
        once encoded as UTF-8.
        """
        if not password:
            return False
        return len(password.encode("utf-8")) <= self.MAX_PASSWORD_BYTES

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash. Must be well-formed
            (see ``is_well_formed``); callers validate before hashing.

        Returns
        -------
        The bcrypt hash as a string
        """
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise (including malformed
        hashes and over-long passwords)
        """
        if not self.is_well_formed(password):
            return False

        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (AttributeError, TypeError, ValueError):
            # Invalid hash format
            return False
