"""Port display models."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class PortInfo(BaseModel):
    """A port in use by a container, ready for display."""
    model_config = ConfigDict(populate_by_name=True)

    port: int = Field(..., description="Public port, or private port when unpublished")
    container_name: str = Field(..., alias="containerName", description="Container name without leading '/'")
    image_name: str = Field(..., alias="imageName", description="Image reference")
    container_id: str = Field(..., alias="containerId", description="Short container ID")


class PortsResponse(BaseModel):
    """Response for the ports listing."""
    model_config = ConfigDict(populate_by_name=True)

    ports: List[PortInfo] = Field(default_factory=list, description="Ports in first-seen order")
    max_port: int = Field(..., alias="maxPort", description="Largest port in use, at least 1024")
