"""Application context shared by all request handlers."""

from dataclasses import dataclass, field

from fastapi import Request

from . import APP_VERSION
from .docker.runtime import ContainerRuntime


@dataclass
class AppContext:
    """Process-wide state, built once at startup.

    Attributes:
        runtime: Handle to the container runtime
        api_key: Shared secret required by the API
        version: Version string shown in the web interface
    """
    runtime: ContainerRuntime
    api_key: str = field(repr=False)
    version: str = APP_VERSION

    def close(self) -> None:
        """Release the runtime handle. Safe to call more than once."""
        self.runtime.close()


def get_context(request: Request) -> AppContext:
    """Get the application context from app state."""
    return request.app.state.context
