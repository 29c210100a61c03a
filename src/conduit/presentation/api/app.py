"""FastAPI application factory.

Creates and configures the FastAPI application with the users router,
middleware, and exception handlers.

All RealWorld endpoints live under the /api prefix. The health check
endpoint stays outside it at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from conduit.presentation.api.errors import setup_exception_handlers
from conduit.presentation.api.routers import users_router
from conduit_auth import JWTService, PasswordHashingService
from conduit_config.settings import Settings, get_settings
from conduit_identity.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
)


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Configure application logging.

    Sets up logging for the conduit packages with:
    - Console output with timestamps and module names
    - Configurable log level for conduit modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, level_name.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("conduit", "conduit_auth", "conduit_config", "conduit_identity"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """Registration, login and the current user.

**Authentication:**
- Send `Authorization: Token <jwt>` (or `Bearer <jwt>`)
- Tokens are HS256 JWTs issued on register and login
- Passwords are hashed with bcrypt
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    engine = app.state.engine

    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    if settings.database_create_tables:
        try:
            await create_tables(engine)
        except (ConnectionRefusedError, OSError):
            logger.critical("Could not connect to the database.")
            raise SystemExit(1) from None
    yield

    # Shutdown - dispose the engine and its connection pool
    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User registration and authentication for the **Conduit** API.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Long-lived collaborators, shared by every request
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url, echo=settings.database_echo)
    app.state.session_maker = create_session_maker(app.state.engine)
    app.state.jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours or None,
    )
    app.state.password_service = PasswordHashingService(
        rounds=settings.password_hash_rounds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(users_router, prefix=API_PREFIX, tags=["Users"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Unprefixed for load balancer/monitoring compatibility.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_PREFIX,
            "endpoints": {
                "health": "/health",
                "users": f"{API_PREFIX}/users",
                "login": f"{API_PREFIX}/users/login",
                "current_user": f"{API_PREFIX}/user",
            },
        }

    return app
