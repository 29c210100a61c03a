"""Mapping of service failures to API error shapes.

The API knows exactly two error shapes:

- ``Unauthorized``: rendered as HTTP 401 with an empty body. Used for
  incorrect login credentials and for every rejected token, so a client
  cannot tell unknown accounts, wrong passwords, forged, malformed or
  expired tokens apart.
- ``GenericErrorModel``: rendered as the RealWorld error payload

      {"errors": {"body": ["human readable message", ...]}}

  with status 422 by default and 500 for internal failures.

Unexpected exceptions are logged with their traceback and rendered as a
generic 500 model; storage detail never reaches the client.
"""

import logging
from dataclasses import dataclass
from typing import Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from conduit.domain.shared.result import Result
from conduit_identity.application.errors import (
    Conflict,
    IncorrectLoginCredentials,
    Internal,
    NotFound,
    ServiceError,
    Validation,
)
from conduit_identity.application.services import Unauthenticated

logger = logging.getLogger(__name__)

AUTH_SCHEME = "Token"
INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class Unauthorized:
    """Authentication rejected, without detail."""


@dataclass(frozen=True)
class GenericErrorModel:
    """Client-facing error with a list of messages."""

    body: tuple[str, ...]
    status_code: int = status.HTTP_422_UNPROCESSABLE_ENTITY


ApiError = Union[Unauthorized, GenericErrorModel]


class AuthenticationRejected(Exception):  # NOQA: N818
    """Raised by the guard dependency to stop a request with a 401."""


def to_api_error(error: Union[ServiceError, Unauthenticated, ApiError]) -> ApiError:
    """Translate a service or guard failure into an API error shape."""
    if isinstance(error, (Unauthorized, GenericErrorModel)):
        return error
    if isinstance(error, (IncorrectLoginCredentials, Unauthenticated)):
        return Unauthorized()
    if isinstance(error, Validation):
        return GenericErrorModel(error.errors)
    if isinstance(error, Conflict):
        return GenericErrorModel((f"{error.field.value} has already been taken",))
    if isinstance(error, NotFound):
        return GenericErrorModel((f"{error.entity} not found",))
    if isinstance(error, Internal):
        return GenericErrorModel(
            (INTERNAL_ERROR_MESSAGE,),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    msg = f"Unmapped error value: {error!r}"
    raise TypeError(msg)


def render_api_error(error: ApiError) -> Response:
    if isinstance(error, Unauthorized):
        return Response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": AUTH_SCHEME},
        )
    return JSONResponse(
        status_code=error.status_code,
        content={"errors": {"body": list(error.body)}},
    )


def respond(result: Result[BaseModel, object], status_code: int) -> Response:
    """Render a handler result: the model on success, the mapped error otherwise."""
    if result.is_failure():
        return render_api_error(to_api_error(result.error))
    return JSONResponse(
        status_code=status_code,
        content=result.value.model_dump(mode="json"),
    )


def _validation_messages(exc: RequestValidationError) -> tuple[str, ...]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return tuple(messages) or ("Received malformed request body",)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the error handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(AuthenticationRejected)
    async def authentication_rejected_handler(
        request: Request,
        exc: AuthenticationRejected,
    ) -> Response:
        return render_api_error(Unauthorized())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> Response:
        """Malformed or incomplete request bodies become a 422 error model."""
        logger.info(
            "Rejected malformed request on %s %s",
            request.method,
            request.url.path,
        )
        return render_api_error(GenericErrorModel(_validation_messages(exc)))

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> Response:
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return render_api_error(
            GenericErrorModel(
                (INTERNAL_ERROR_MESSAGE,),
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        )
