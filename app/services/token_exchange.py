"""Turn an authorization code into a redirect back to the mobile app."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from app.clients.threads_auth import ThreadsOAuthClient, TokenExchangeError
from app.core.config import CallbackSettings, ThreadsCredentials
from app.models.oauth import TokenExchangeFailure, TokenExchangeResult, TokenGrant

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Threads client credentials are not configured"
INVALID_SETTINGS_MESSAGE = "Token exchange settings are invalid"

# Characters encodeURIComponent leaves alone; the app decodes with the same rules.
_URI_COMPONENT_SAFE = "!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_error_url(base: str, message: str) -> str:
    return f"{base}?error={encode_uri_component(message)}"


class TokenExchangeHandler:
    """Exchange a code for a token and describe the outcome as a callback URL.

    Every failure is reduced to a ``TokenExchangeFailure``; nothing raised by
    the exchange escapes ``handle``.
    """

    def __init__(
        self,
        oauth_client: ThreadsOAuthClient,
        callback_settings: CallbackSettings,
    ) -> None:
        self._oauth_client = oauth_client
        self._callback = callback_settings

    async def handle(
        self, code: Optional[str], credentials: Optional[ThreadsCredentials]
    ) -> TokenExchangeResult:
        logger.info("Received code: %s", code)

        if credentials is None:
            details = {"message": MISSING_CREDENTIALS_MESSAGE}
            logger.error(
                "Token exchange error details: %s", details, extra={"error_details": details}
            )
            return TokenExchangeFailure(error_message=MISSING_CREDENTIALS_MESSAGE)

        logger.info("Using client ID: %s", credentials.client_id)
        logger.info("Client ID type: %s", type(credentials.client_id).__name__)
        logger.info("Client ID length: %d", len(credentials.client_id))

        try:
            return await self._oauth_client.exchange_authorization_code(code, credentials)
        except TokenExchangeError as exc:
            details = exc.details()
            logger.error(
                "Token exchange error details: %s",
                details,
                extra={"error_kind": type(exc).__name__, "error_details": details},
                exc_info=exc,
            )
            return TokenExchangeFailure(error_message=exc.message)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Unexpected token exchange failure")
            return TokenExchangeFailure(error_message=str(exc) or exc.__class__.__name__)

    def build_redirect_url(self, result: TokenExchangeResult) -> str:
        """Render the result as ``<callback>?access_token=..&user_id=..`` or ``?error=..``."""
        base = self._callback.url
        if isinstance(result, TokenGrant):
            access_token = result.access_token
            # A missing id renders as the literal "undefined".
            user_id = result.user_id if result.user_id is not None else "undefined"
            if self._callback.encode_success_params:
                access_token = encode_uri_component(access_token)
                user_id = encode_uri_component(user_id)
            url = f"{base}?access_token={access_token}&user_id={user_id}"
            logger.info("Redirecting to: %s", url)
            return url

        url = build_error_url(base, result.error_message)
        logger.info("Redirecting to error URL: %s", url)
        return url


__all__ = [
    "INVALID_SETTINGS_MESSAGE",
    "MISSING_CREDENTIALS_MESSAGE",
    "TokenExchangeHandler",
    "build_error_url",
    "encode_uri_component",
]
