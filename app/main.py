"""
FastAPI application entrypoint for the Threads token exchange function.
"""

from __future__ import annotations

from fastapi import FastAPI
from pydantic import ValidationError

from app.api.routes import router as api_router
from app.core.config import get_settings
from app.core.logging import configure_logging


def _log_level() -> str:
    # Invalid settings are reported per request as an error redirect.
    try:
        return get_settings().log_level
    except ValidationError:
        return "INFO"


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    configure_logging(_log_level())

    app = FastAPI(
        title="Threads Token Exchange",
        version="0.1.0",
        description="Exchanges Threads authorization codes and redirects to the mobile app.",
    )
    # Mounted at the root: the function URL itself is the registered redirect URI.
    app.include_router(api_router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
