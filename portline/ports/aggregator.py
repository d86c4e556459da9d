"""Collapse container port mappings into a display-ready listing.

``aggregate`` is a pure function of the records it receives: it does no I/O
and keeps no state between calls.
"""

import logging
from typing import Iterable, List, Optional, Set

from .models import PortInfo, PortsResponse
from ..docker.models import ContainerRecord, PortMapping
from ..shared.errors import InvalidInput
from ..shared.python_logger_config import TRACE

logger = logging.getLogger(__name__)

# Floor for max_port so small port sets still render on a sensible scale
MIN_MAX_PORT = 1024

SHORT_ID_LENGTH = 12

NAME_SEPARATOR = "/"


def normalize_name(name: str) -> str:
    """Strip a single leading '/' from a container name."""
    if name.startswith(NAME_SEPARATOR):
        return name[1:]
    return name


def short_id(container_id: str) -> str:
    """Shorten a container ID for display."""
    return container_id[:SHORT_ID_LENGTH]


def resolve_port(mapping: PortMapping) -> Optional[int]:
    """Pick the port to display for a mapping.

    The public port wins when published. An unpublished mapping falls back to
    its private port. Returns None when neither is usable.
    """
    if mapping.public_port > 0:
        return mapping.public_port
    if mapping.public_port == 0 and mapping.private_port > 0:
        return mapping.private_port
    return None


def container_name(container: ContainerRecord) -> str:
    """Display name of a container.

    Raises:
        InvalidInput: If the runtime reported no names for the container.
    """
    if not container.names:
        raise InvalidInput(f"container {container.id} has no names")
    return normalize_name(container.names[0])


def aggregate(containers: Iterable[ContainerRecord]) -> PortsResponse:
    """Build the deduplicated port listing for a set of containers.

    Each (container ID, port) pair appears once, in the order it is first
    seen. ``max_port`` is the largest port listed, but never below
    ``MIN_MAX_PORT``.

    Raises:
        InvalidInput: If a container has no names.
    """
    ports: List[PortInfo] = []
    seen: Set[str] = set()
    max_port = 0

    for container in containers:
        name = container_name(container)

        for mapping in container.ports:
            port = resolve_port(mapping)
            if port is None:
                continue

            key = f"{container.id}:{port}"
            if key in seen:
                continue

            ports.append(PortInfo(
                port=port,
                container_name=name,
                image_name=container.image,
                container_id=short_id(container.id)
            ))
            seen.add(key)

            if port > max_port:
                max_port = port

        logger.log(TRACE, f"Aggregated container {name}: {len(container.ports)} mappings")

    return PortsResponse(ports=ports, max_port=max(max_port, MIN_MAX_PORT))
