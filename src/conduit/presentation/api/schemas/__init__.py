from conduit.presentation.api.schemas.users import (
    GenericErrorResponse,
    LoginUser,
    LoginUserRequest,
    RegisterUser,
    RegisterUserRequest,
    UserBody,
    UserResponse,
)

__all__ = [
    "GenericErrorResponse",
    "LoginUser",
    "LoginUserRequest",
    "RegisterUser",
    "RegisterUserRequest",
    "UserBody",
    "UserResponse",
]
