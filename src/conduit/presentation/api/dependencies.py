"""FastAPI dependency injection for the Conduit API.

Provides dependencies for:
- Database sessions
- Authentication (JWT context from the Authorization header)
- Service instances

The engine, session maker, JWT service and password service are built
once per application in ``create_app`` and read from ``app.state`` here.
"""

import logging
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.presentation.api.errors import AuthenticationRejected
from conduit_auth import JWTService, PasswordHashingService
from conduit_identity.application.context import JwtContext
from conduit_identity.application.services import JwtGuard, UserService
from conduit_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the application's
    shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


def get_user_service(
    session: DBSession,
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
) -> UserService:
    """
    Get user service dependency.

    Parameters
    ----------
    session
        Request-scoped database session
    jwt_service
        Application-wide JWT service
    password_service
        Application-wide password hashing service

    Returns
    -------
    UserService bound to the request's session
    """
    return UserService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def get_jwt_guard(
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> JwtGuard:
    return JwtGuard(jwt_service)


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


def get_jwt_context(
    guard: Annotated[JwtGuard, Depends(get_jwt_guard)],
    authorization: Annotated[Optional[str], Header()] = None,
) -> JwtContext:
    """
    Resolve the caller's JWT context from the Authorization header.

    Raises
    ------
    AuthenticationRejected
        If the header is missing or the token does not verify; rendered
        as a bare 401 by the exception handlers
    """
    authenticated = guard.authenticate(authorization)
    if authenticated.is_failure():
        raise AuthenticationRejected
    return authenticated.value


# Type alias for the authenticated caller
CurrentJwtContext = Annotated[JwtContext, Depends(get_jwt_context)]
