"""
FastAPI routes for the token exchange function.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import RedirectResponse

from app.core.config import DEFAULT_CALLBACK_URL, ThreadsCredentials
from app.dependencies import CredentialsDependency, HandlerDependency
from app.schemas import IncomingRequest
from app.services.token_exchange import (
    INVALID_SETTINGS_MESSAGE,
    TokenExchangeHandler,
    build_error_url,
)

router = APIRouter()


@router.get("/health", status_code=HTTPStatus.OK)
async def healthcheck() -> dict:
    """Simple health endpoint for monitoring."""
    return {"status": "ok"}


@router.get("/", status_code=HTTPStatus.FOUND, response_class=RedirectResponse)
async def exchange_code_for_token(
    handler: Optional[TokenExchangeHandler] = HandlerDependency,
    credentials: Optional[ThreadsCredentials] = CredentialsDependency,
    code: Optional[str] = Query(
        default=None, description="Authorization code issued by Threads."
    ),
) -> RedirectResponse:
    """
    Exchange the authorization code and send the caller back to the app.

    Always answers with a redirect, carrying either the token or an error.
    """
    if handler is None:
        url = build_error_url(DEFAULT_CALLBACK_URL, INVALID_SETTINGS_MESSAGE)
        return RedirectResponse(url=url, status_code=HTTPStatus.FOUND)

    incoming = IncomingRequest(code=code)
    result = await handler.handle(incoming.code, credentials)
    return RedirectResponse(
        url=handler.build_redirect_url(result), status_code=HTTPStatus.FOUND
    )
