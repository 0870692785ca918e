"""Schemas related to OAuth flows."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class IncomingRequest(BaseModel):
    """Query parameters Threads appends when redirecting back to the function."""

    code: Optional[str] = Field(
        default=None,
        description="Authorization code returned by Threads OAuth. Forwarded unchecked.",
    )


__all__ = ["IncomingRequest"]
