"""Users router for registration, login and the current user."""

import logging

from fastapi import APIRouter, Response, status

from conduit.domain.shared.result import Failure, Success, from_optional
from conduit.presentation.api.dependencies import (
    CurrentJwtContext,
    DBSession,
    UserServiceDep,
)
from conduit.presentation.api.errors import respond
from conduit.presentation.api.schemas.users import (
    GenericErrorResponse,
    LoginUserRequest,
    RegisterUserRequest,
    UserBody,
    UserResponse,
)
from conduit_identity.application.errors import NotFound
from conduit_identity.domain.user import Email, UserProfile

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    401: {"description": "Missing, invalid or expired credentials"},
    422: {"model": GenericErrorResponse, "description": "Request rejected"},
}


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    summary="Register a new user",
    responses={422: _ERROR_RESPONSES[422]},
)
async def register(
    request: RegisterUserRequest,
    user_service: UserServiceDep,
    session: DBSession,
) -> Response:
    """
    Register a new account and return it with a bearer token.

    Usernames and emails are unique; a taken value is reported as
    ``"<field> has already been taken"``.
    """
    body = request.user

    registered = await user_service.register(body.username, body.email, body.password)
    if registered.is_failure():
        await session.rollback()
        return respond(registered, status.HTTP_201_CREATED)

    token = await user_service.generate_jwt_token(registered.value, body.password)
    if token.is_failure():
        await session.rollback()
        return respond(token, status.HTTP_201_CREATED)

    await session.commit()

    return respond(
        Success(
            UserResponse(
                user=UserBody(
                    email=Email.normalize(body.email),
                    token=token.value,
                    username=body.username.strip(),
                ),
            ),
        ),
        status.HTTP_201_CREATED,
    )


@router.post(
    "/users/login",
    response_model=UserResponse,
    summary="Authenticate user",
    responses=_ERROR_RESPONSES,
)
async def login(
    request: LoginUserRequest,
    user_service: UserServiceDep,
) -> Response:
    """
    Authenticate with email and password.

    An unknown email and a wrong password are answered identically.
    """
    body = request.user

    logged_in = await user_service.login(body.email, body.password)
    if logged_in.is_failure():
        return respond(logged_in, status.HTTP_200_OK)

    user_id, info = logged_in.value
    token = await user_service.generate_jwt_token(user_id, body.password)

    return respond(
        token.map(
            lambda signed: UserResponse(
                user=UserBody(
                    email=Email.normalize(body.email),
                    token=signed,
                    username=info.username,
                    bio=info.bio,
                    image=info.image,
                ),
            ),
        ),
        status.HTTP_200_OK,
    )


@router.get(
    "/user",
    response_model=UserResponse,
    summary="Get the current user",
    responses=_ERROR_RESPONSES,
)
async def get_current_user(
    context: CurrentJwtContext,
    user_service: UserServiceDep,
) -> Response:
    """Return the authenticated caller, echoing the presented token."""
    found = await user_service.get_user(context.user_id)

    def to_response(profile: UserProfile) -> Success[UserResponse]:
        return Success(
            UserResponse(
                user=UserBody(
                    email=profile.email,
                    token=context.token,
                    username=profile.username,
                    bio=profile.bio,
                    image=profile.image,
                ),
            ),
        )

    result = found.bind(
        lambda profile: from_optional(profile, NotFound("User", str(context.user_id))),
    ).bind(to_response)
    if isinstance(result, Failure):
        logger.info("Current user lookup failed for %s: %r", context.user_id, result.error)
    return respond(result, status.HTTP_200_OK)
