"""Expose dependency helpers for FastAPI routers."""

from .clients import HandlerDependency, get_threads_oauth_client, get_token_exchange_handler
from .config import CredentialsDependency, get_threads_credentials

__all__ = [
    "CredentialsDependency",
    "HandlerDependency",
    "get_threads_credentials",
    "get_threads_oauth_client",
    "get_token_exchange_handler",
]
