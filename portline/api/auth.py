"""Shared-secret authentication for the API."""

import logging
import secrets
from typing import Optional

from fastapi import Depends, Header, HTTPException

from ..context import AppContext, get_context

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def authorize(provided: str, expected: str) -> bool:
    """Check a credential against the configured secret.

    The comparison is exact and case-sensitive. An empty credential is never
    valid.
    """
    if not provided or not expected:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


async def require_api_key(
    authorization: Optional[str] = Header(None),
    context: AppContext = Depends(get_context)
) -> None:
    """Require ``Authorization: Bearer <secret>`` on the request.

    Raises:
        HTTPException: 401 if the header is missing or does not match
    """
    if not authorization:
        raise HTTPException(401, "Missing API key")

    if not authorization.startswith(BEARER_PREFIX):
        logger.warning("Rejected request with non-bearer authorization header")
        raise HTTPException(401, "Invalid API key")

    if not authorize(authorization[len(BEARER_PREFIX):], context.api_key):
        logger.warning("Rejected request with invalid API key")
        raise HTTPException(401, "Invalid API key")
