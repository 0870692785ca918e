"""
Application configuration models and helpers.

Centralizes settings management so the HTTP function and the maintenance
scripts share a consistent configuration surface.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_env_file(path: str = ".env") -> None:
    """Best-effort load key=value pairs from a .env file without extra deps."""
    env_path = Path(path)
    if not env_path.exists():
        return
    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key or key in os.environ:
            continue
        cleaned = value.strip().strip('"').strip("'")
        os.environ[key] = cleaned


_load_env_file()


DEFAULT_TOKEN_URL = "https://graph.threads.net/oauth/access_token"
# Must match the redirect URI registered with Threads and the deployed function URL.
DEFAULT_REDIRECT_URI = "https://exchangecodefortokenv2-c6v7kntvaa-uc.a.run.app"
DEFAULT_CALLBACK_URL = "thuft://callback"


class ThreadsCredentials(BaseSettings):
    """Client credentials injected by the hosting platform's secret manager."""

    client_id: str = Field(..., validation_alias="THREADS_APP_ID")
    client_secret: str = Field(..., validation_alias="THREADS_APP_SECRET")

    def trimmed(self) -> "ThreadsCredentials":
        """Return a copy with surrounding whitespace removed from both values."""
        return self.model_copy(
            update={
                "client_id": self.client_id.strip(),
                "client_secret": self.client_secret.strip(),
            }
        )


class ThreadsSettings(BaseSettings):
    """Configuration for the Threads token endpoint."""

    token_url: str = Field(DEFAULT_TOKEN_URL, validation_alias="THREADS_TOKEN_URL")
    redirect_uri: str = Field(
        DEFAULT_REDIRECT_URI,
        validation_alias="THREADS_REDIRECT_URI",
        description="Redirect URI sent with the exchange; must match the one used at authorization.",
    )
    http_timeout: Optional[float] = Field(
        None,
        validation_alias="THREADS_HTTP_TIMEOUT",
        description="Optional request timeout in seconds. Unset keeps the httpx default.",
    )


class CallbackSettings(BaseSettings):
    """Where the mobile app expects to be sent back."""

    url: str = Field(DEFAULT_CALLBACK_URL, validation_alias="APP_CALLBACK_URL")
    encode_success_params: bool = Field(
        False,
        validation_alias="APP_CALLBACK_ENCODE_SUCCESS",
        description="Percent-encode access_token and user_id on the success redirect.",
    )

    @field_validator("url")
    @classmethod
    def _strip_query(cls, value: str) -> str:
        """Query parameters are appended by the handler."""
        return value.split("?", 1)[0]


class AppSettings(BaseSettings):
    """Root settings object for the function."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    threads: ThreadsSettings = Field(default_factory=ThreadsSettings)
    callback: CallbackSettings = Field(default_factory=CallbackSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


def load_credentials() -> ThreadsCredentials:
    """Read the client credentials from the environment on every call."""
    return ThreadsCredentials()  # type: ignore[call-arg]


__all__ = [
    "AppSettings",
    "CallbackSettings",
    "DEFAULT_CALLBACK_URL",
    "DEFAULT_REDIRECT_URI",
    "DEFAULT_TOKEN_URL",
    "ThreadsCredentials",
    "ThreadsSettings",
    "get_settings",
    "load_credentials",
]
