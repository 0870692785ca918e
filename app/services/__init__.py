"""Service layer exports."""

from .token_exchange import TokenExchangeHandler

__all__ = ["TokenExchangeHandler"]
