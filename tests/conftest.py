"""Pytest configuration shared across the suite."""

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

import pytest

from app.core.config import CallbackSettings, ThreadsCredentials, ThreadsSettings

TOKEN_URL = "https://graph.threads.net/oauth/access_token"
REDIRECT_URI = "https://exchangecodefortokenv2-c6v7kntvaa-uc.a.run.app"


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def threads_settings() -> ThreadsSettings:
    return ThreadsSettings(THREADS_TOKEN_URL=TOKEN_URL, THREADS_REDIRECT_URI=REDIRECT_URI)


@pytest.fixture
def callback_settings() -> CallbackSettings:
    return CallbackSettings(APP_CALLBACK_URL="thuft://callback")


@pytest.fixture
def credentials() -> ThreadsCredentials:
    return ThreadsCredentials(THREADS_APP_ID="app-id", THREADS_APP_SECRET="app-secret")
