"""API key validation endpoint used by the login page."""

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError

from ..auth import authorize
from ..models import ValidateKeyRequest, ValidateKeyResponse
from ...context import AppContext, get_context
from ...shared.errors import MalformedRequest

logger = logging.getLogger(__name__)


async def parse_validate_key_request(request: Request) -> ValidateKeyRequest:
    """Parse the request body.

    Raises:
        MalformedRequest: If the body is not a JSON object with a string
            ``apiKey``. A JSON ``null`` body reads
            as an empty object.
    """
    body = await request.body()
    try:
        data = json.loads(body)
        if data is None:
            data = {}
        return ValidateKeyRequest.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise MalformedRequest(str(e)) from e


def create_router() -> APIRouter:
    """Create the key validation router."""
    router = APIRouter(tags=["auth"])

    @router.post("/validate-key", response_model=ValidateKeyResponse)
    async def validate_key(request: Request, context: AppContext = Depends(get_context)):
        """Check whether an API key is valid. Always 200 for a well-formed body."""
        try:
            payload = await parse_validate_key_request(request)
        except MalformedRequest as e:
            logger.info(f"Invalid validate-key request body: {e}")
            raise HTTPException(400, "Invalid request body")

        return ValidateKeyResponse(valid=authorize(payload.api_key, context.api_key))

    return router
