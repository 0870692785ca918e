"""Public schema exports."""

from .auth import IncomingRequest

__all__ = ["IncomingRequest"]
