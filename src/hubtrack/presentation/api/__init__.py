"""REST API presentation layer for Hubtrack.

This package provides a FastAPI-based REST API for Hubtrack accounts.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Error code to HTTP status mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from hubtrack.presentation.api.app import create_app

__all__ = ["create_app"]
