"""User schemas for request/response models.

Shapes follow the RealWorld API: every payload is wrapped in a ``user``
envelope. Field content is validated by the user service, not here, so
blank values reach it and come back as a structured validation error.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterUser(BaseModel):
    username: str
    email: str
    password: str = Field(..., repr=False)


class RegisterUserRequest(BaseModel):
    """Request schema for user registration."""

    user: RegisterUser

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "username": "jake",
                    "email": "jake@jake.jake",
                    "password": "jakejake",
                },
            },
        },
    )


class LoginUser(BaseModel):
    email: str
    password: str = Field(..., repr=False)


class LoginUserRequest(BaseModel):
    """Request schema for user login."""

    user: LoginUser

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "email": "jake@jake.jake",
                    "password": "jakejake",
                },
            },
        },
    )


class UserBody(BaseModel):
    """Authenticated user as returned to the client."""

    email: str
    token: str
    username: str
    bio: str = ""
    image: str = ""


class UserResponse(BaseModel):
    """Response schema wrapping the authenticated user."""

    user: UserBody


class ErrorBody(BaseModel):
    body: list[str]


class GenericErrorResponse(BaseModel):
    """Error payload for every non-authentication failure."""

    errors: ErrorBody
