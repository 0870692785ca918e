"""
FastAPI dependency utilities for injecting per-invocation credentials.
"""

import logging
from typing import Optional

from fastapi import Depends
from pydantic import ValidationError

from app.core.config import ThreadsCredentials, load_credentials

logger = logging.getLogger(__name__)


def get_threads_credentials() -> Optional[ThreadsCredentials]:
    """Resolve client credentials for this invocation.

    Not cached: the platform may rotate secrets between invocations. Returns
    ``None`` when they are missing so the caller still gets a redirect.
    """
    try:
        return load_credentials()
    except ValidationError as exc:
        logger.error("Threads credentials unavailable: %s", exc.errors(include_input=False))
        return None


CredentialsDependency = Depends(get_threads_credentials)

__all__ = ["CredentialsDependency", "get_threads_credentials"]
