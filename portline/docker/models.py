"""Container records as reported by the container runtime."""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class PortMapping(BaseModel):
    """A single port mapping of a container.

    A public port of 0 means the port is not published on the host. A private
    port of 0 means the mapping carries no container port at all.
    """
    public_port: int = Field(0, description="Host port (0 = not published)")
    private_port: int = Field(0, description="Container port (0 = unset)")
    protocol: str = Field("tcp", description="Protocol (tcp, udp, sctp)")

    @field_validator('public_port', 'private_port', mode='before')
    @classmethod
    def default_missing_port(cls, v: Optional[int]) -> int:
        """Treat a missing port as unset."""
        if v is None:
            return 0
        return v


class ContainerRecord(BaseModel):
    """A container as returned by the runtime's list operation."""
    id: str = Field(..., description="Full container identifier")
    names: List[str] = Field(default_factory=list, description="Display names, may start with '/'")
    image: str = Field("", description="Image reference the container was created from")
    ports: List[PortMapping] = Field(default_factory=list, description="Port mappings")
