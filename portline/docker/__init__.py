"""Container runtime access for Portline."""

from .models import ContainerRecord, PortMapping
from .runtime import ContainerRuntime, DockerRuntime

__all__ = [
    'ContainerRecord',
    'PortMapping',
    'ContainerRuntime',
    'DockerRuntime',
]
