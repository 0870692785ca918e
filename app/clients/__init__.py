"""Expose constructed client wrappers."""

from .threads_auth import (
    MissingToken,
    ProviderRejection,
    ThreadsOAuthClient,
    TokenExchangeError,
    TransportFailure,
)

__all__ = [
    "MissingToken",
    "ProviderRejection",
    "ThreadsOAuthClient",
    "TokenExchangeError",
    "TransportFailure",
]
