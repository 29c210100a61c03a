from conduit_identity.application.services.jwt_guard import JwtGuard, Unauthenticated
from conduit_identity.application.services.user_service import UserService

__all__ = [
    "JwtGuard",
    "Unauthenticated",
    "UserService",
]
