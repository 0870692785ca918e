"""
Threads OAuth utilities.

Exchanges an authorization code for a short-lived user access token against
the Threads Graph API token endpoint.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from fastapi import status

from app.core.config import ThreadsCredentials, ThreadsSettings
from app.models.oauth import ProviderErrorBody, TokenGrant

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Access token not found in response"


class TokenExchangeError(Exception):
    """Raised when the authorization code could not be turned into a token.

    Keeps whatever the provider sent back so the failure can be logged in full.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        request_echo: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.headers = headers
        self.body = body
        self.request_echo = request_echo

    def details(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "response": {
                "status": self.status_code,
                "headers": self.headers,
                "data": self.body,
                "config": self.request_echo,
            },
        }


class ProviderRejection(TokenExchangeError):
    """Raised when the token endpoint answers with a non-2xx status."""


class MissingToken(TokenExchangeError):
    """Raised when a 2xx response carries no access token."""


class TransportFailure(TokenExchangeError):
    """Raised when the token endpoint could not be reached."""


def _parse_body(response: httpx.Response) -> Any:
    """Return the decoded JSON body, falling back to raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


class ThreadsOAuthClient:
    """Exchange Threads authorization codes for access tokens."""

    GRANT_TYPE = "authorization_code"

    def __init__(
        self,
        settings: ThreadsSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    def build_token_form(
        self, code: Optional[str], credentials: ThreadsCredentials
    ) -> Dict[str, str]:
        """Form fields for the token request; credentials are whitespace-trimmed."""
        trimmed = credentials.trimmed()
        return {
            "client_id": trimmed.client_id,
            "client_secret": trimmed.client_secret,
            "code": code if code is not None else "",
            "grant_type": self.GRANT_TYPE,
            "redirect_uri": self._settings.redirect_uri,
        }

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"follow_redirects": False}
        if self._settings.http_timeout is not None:
            kwargs["timeout"] = self._settings.http_timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    async def exchange_authorization_code(
        self, code: Optional[str], credentials: ThreadsCredentials
    ) -> TokenGrant:
        """
        Exchange an authorization code for an access token.

        Exactly one POST is made. Redirects from the endpoint are returned as
        failures rather than followed.
        """
        form_data = urlencode(self.build_token_form(code, credentials))
        content = form_data.encode("utf-8")
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Content-Length": str(len(content)),
            "Accept": "application/json",
        }
        request_echo = {
            "url": self._settings.token_url,
            "method": "post",
            "headers": headers,
            "data": form_data,
        }
        logger.info("Request form data: %s", form_data)

        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                response = await client.post(
                    self._settings.token_url, content=content, headers=headers
                )
        except httpx.HTTPError as exc:
            raise TransportFailure(
                str(exc) or exc.__class__.__name__, request_echo=request_echo
            ) from exc

        body = _parse_body(response)
        response_headers = dict(response.headers)
        logger.info(
            "Token exchange response: %s",
            {
                "status": response.status_code,
                "statusText": response.reason_phrase,
                "data": body,
                "headers": response_headers,
            },
        )

        if not status.HTTP_200_OK <= response.status_code < status.HTTP_300_MULTIPLE_CHOICES:
            provider_error = ProviderErrorBody.from_payload(body)
            message = provider_error.describe() if provider_error else None
            raise ProviderRejection(
                message or f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                headers=response_headers,
                body=body,
                request_echo=request_echo,
            )

        access_token = body.get("access_token") if isinstance(body, dict) else None
        if not access_token:
            raise MissingToken(
                MISSING_TOKEN_MESSAGE,
                status_code=response.status_code,
                headers=response_headers,
                body=body,
                request_echo=request_echo,
            )

        return TokenGrant(access_token=str(access_token), user_id=body.get("user_id"))


__all__ = [
    "MISSING_TOKEN_MESSAGE",
    "MissingToken",
    "ProviderRejection",
    "ThreadsOAuthClient",
    "TokenExchangeError",
    "TransportFailure",
]
