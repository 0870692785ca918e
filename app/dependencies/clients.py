"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends
from pydantic import ValidationError

from app.clients import ThreadsOAuthClient
from app.core.config import get_settings
from app.services import TokenExchangeHandler

logger = logging.getLogger(__name__)


@lru_cache()
def get_threads_oauth_client() -> ThreadsOAuthClient:
    """Create a singleton Threads OAuth client."""
    return ThreadsOAuthClient(get_settings().threads)


def get_token_exchange_handler() -> Optional[TokenExchangeHandler]:
    """Build the handler that turns a code into a callback redirect.

    Returns ``None`` when the settings do not validate; the route then
    redirects with a configuration error.
    """
    try:
        settings = get_settings()
        oauth_client = get_threads_oauth_client()
    except ValidationError as exc:
        logger.error("Function settings are invalid: %s", exc.errors(include_input=False))
        return None
    return TokenExchangeHandler(
        oauth_client=oauth_client,
        callback_settings=settings.callback,
    )


HandlerDependency = Depends(get_token_exchange_handler)

__all__ = [
    "HandlerDependency",
    "get_threads_oauth_client",
    "get_token_exchange_handler",
]
