from conduit_identity.domain.user.aggregates.user import (
    NewUser,
    ProfileInfo,
    User,
    UserProfile,
)

__all__ = [
    "NewUser",
    "ProfileInfo",
    "User",
    "UserProfile",
]
