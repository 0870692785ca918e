"""
Domain models for the Threads authorization-code exchange.

A ``TokenExchangeResult`` is exactly one of ``TokenGrant`` or
``TokenExchangeFailure``; the ``kind`` field tags the variant.
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNKNOWN_ERROR_MESSAGE = "Unknown error"


def _is_present(value: Any) -> bool:
    """JSON truthiness: empty objects and arrays count, empty strings, 0 and false do not."""
    if value is None or isinstance(value, (bool, str)):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0
    return True


class TokenGrant(BaseModel):
    """Successful exchange: the token and the Threads user it belongs to."""

    kind: Literal["granted"] = "granted"
    access_token: str
    user_id: Optional[str] = None

    @field_validator("user_id", mode="before")
    @classmethod
    def _stringify_user_id(cls, value: Any) -> Optional[str]:
        # Threads returns numeric ids.
        if value is None:
            return None
        return str(value)


class TokenExchangeFailure(BaseModel):
    """Failed exchange, reduced to a single human-readable message."""

    kind: Literal["failed"] = "failed"
    error_message: str


TokenExchangeResult = Union[TokenGrant, TokenExchangeFailure]


class ProviderErrorObject(BaseModel):
    """Structured Graph API error, e.g. ``{"message": ..., "type": "OAuthException"}``."""

    model_config = ConfigDict(extra="allow")

    message: Optional[str] = None
    type: Optional[str] = None
    code: Any = None
    error_subcode: Any = None
    fbtrace_id: Optional[str] = None

    @field_validator("message", "type", "fbtrace_id", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        if not _is_present(value):
            return None
        return str(value)

    def describe(self) -> str:
        return self.message or self.type or UNKNOWN_ERROR_MESSAGE


class ProviderErrorBody(BaseModel):
    """Error envelope returned by the token endpoint.

    The ``error`` member is either an object or a bare string depending on
    which layer of the provider rejected the call.
    """

    model_config = ConfigDict(extra="allow")

    error: Union[ProviderErrorObject, str, None] = Field(default=None)

    @field_validator("error", mode="before")
    @classmethod
    def _coerce_error(cls, value: Any) -> Any:
        if value is None or isinstance(value, (str, dict)):
            return value
        # Lists and numbers carry no usable text.
        return {} if _is_present(value) else None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["ProviderErrorBody"]:
        """Decode a parsed JSON body, returning ``None`` when it is not an error envelope."""
        if not isinstance(payload, dict) or not _is_present(payload.get("error")):
            return None
        return cls.model_validate(payload)

    def describe(self) -> Optional[str]:
        """Return the preferred message, or ``None`` when the body names no error."""
        if isinstance(self.error, ProviderErrorObject):
            return self.error.describe()
        if isinstance(self.error, str) and self.error:
            return self.error
        return None


__all__ = [
    "ProviderErrorBody",
    "ProviderErrorObject",
    "TokenExchangeFailure",
    "TokenExchangeResult",
    "TokenGrant",
    "UNKNOWN_ERROR_MESSAGE",
]
