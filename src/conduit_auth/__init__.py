"""Conduit Auth - Generic authentication primitives.

This package provides authentication building blocks that are independent
of the user domain:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    conduit_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── errors.py           # Token error values

Usage:
    from conduit_auth import JWTService, PasswordHashingService
"""

from conduit_auth.errors import TokenError
from conduit_auth.schemas import TokenPayload
from conduit_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Errors
    "TokenError",
]
