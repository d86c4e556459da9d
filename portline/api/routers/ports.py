"""Port listing API endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..auth import require_api_key
from ...context import AppContext, get_context
from ...ports import PortsResponse, aggregate
from ...shared.errors import InvalidInput, RuntimeUnavailable

logger = logging.getLogger(__name__)


def create_router() -> APIRouter:
    """Create the ports API router."""
    router = APIRouter(tags=["ports"])

    @router.get(
        "/ports",
        response_model=PortsResponse,
        dependencies=[Depends(require_api_key)]
    )
    async def get_ports(context: AppContext = Depends(get_context)):
        """List the ports used by containers on this host."""
        try:
            containers = await context.runtime.list_containers()
            response = aggregate(containers)
        except RuntimeUnavailable as e:
            logger.error(f"Docker API error: {e}")
            raise HTTPException(500, "Failed to get port information")
        except InvalidInput as e:
            logger.error(f"Invalid container data: {e}")
            raise HTTPException(500, "Failed to get port information")

        logger.debug(f"Listing {len(response.ports)} ports, max port {response.max_port}")
        return response

    return router
