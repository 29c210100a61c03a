"""REST API presentation layer for Conduit.

This package provides the FastAPI-based RealWorld users API.

Structure:
    api/
    ├── app.py          # FastAPI application factory
    ├── dependencies.py # Dependency injection
    ├── errors.py       # Error mapping and exception handlers
    ├── routers/        # API route handlers
    └── schemas/        # Pydantic request/response schemas
"""

from conduit.presentation.api.app import create_app

__all__ = ["create_app"]
