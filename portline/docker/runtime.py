"""Container runtime adapter.

The rest of Portline only talks to a ``ContainerRuntime``; ``DockerRuntime``
is the production implementation backed by python-on-whales. Tests substitute
their own implementation.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from pydantic import ValidationError
from python_on_whales import DockerClient
from python_on_whales.exceptions import NoSuchContainer

from .models import ContainerRecord, PortMapping
from ..shared.errors import InvalidInput, PortlineError, RuntimeUnavailable

logger = logging.getLogger(__name__)


class ContainerRuntime(ABC):
    """Narrow interface over a container runtime."""

    @abstractmethod
    async def list_containers(self) -> List[ContainerRecord]:
        """Return every container known to the runtime, unfiltered.

        Raises:
            RuntimeUnavailable: If the runtime cannot be reached or rejects
                the request. The call is never retried.
        """

    def close(self) -> None:
        """Release the runtime handle."""


def parse_port(value: Optional[str]) -> int:
    """Parse a port string from the Docker API, 0 when absent or invalid."""
    if not value:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class DockerRuntime(ContainerRuntime):
    """Docker implementation of ``ContainerRuntime``."""

    def __init__(self, docker_host: Optional[str] = None, timeout: float = 10.0, max_workers: int = 5):
        """Create the Docker client.

        Args:
            docker_host: Docker host URL (None uses the local socket)
            timeout: Seconds allowed for a single listing
            max_workers: Threads available for blocking client calls
        """
        self.docker_host = docker_host
        self.timeout = timeout
        self.client = DockerClient(host=self.docker_host)
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="docker")
        self._closed = False

    @property
    def location(self) -> str:
        return self.docker_host or "unix:///var/run/docker.sock"

    def probe(self) -> bool:
        """Check that the daemon answers. Failures are logged, not raised."""
        try:
            self.client.version()
            logger.info(f"Connected to Docker at {self.location}")
            return True
        except Exception as e:
            logger.warning(f"Docker at {self.location} is not reachable yet: {e}")
            return False

    async def list_containers(self) -> List[ContainerRecord]:
        if self._closed:
            raise RuntimeUnavailable("Docker client is closed")

        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(self.executor, self._sync_list_containers),
                timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise RuntimeUnavailable(f"Docker did not answer within {self.timeout}s") from e
        except PortlineError:
            raise
        except Exception as e:
            raise RuntimeUnavailable(f"failed to list containers: {e}") from e

    def _sync_list_containers(self) -> List[ContainerRecord]:
        """Synchronously list all containers, running and stopped."""
        containers = self.client.container.list(all=True)
        logger.debug(f"Docker reported {len(containers)} containers")
        records = []
        for container in containers:
            try:
                records.append(self.to_record(container))
            except NoSuchContainer:
                # Removed between the listing and its inspect
                logger.debug(f"Container {container.id} disappeared while listing, skipping")
            except ValidationError as e:
                raise InvalidInput(f"malformed container data from Docker: {e}") from e
        return records

    @staticmethod
    def to_record(container) -> ContainerRecord:
        """Convert a python-on-whales container into a ``ContainerRecord``.

        Bindings are raw inspect dicts such as
        ``{"HostIp": "0.0.0.0", "HostPort": "8080"}``. Every host binding of
        a container port becomes one mapping. A container port without host
        bindings becomes a mapping with no public port.
        """
        mappings = []
        network_settings = getattr(container, "network_settings", None)
        ports = getattr(network_settings, "ports", None) or {}

        for port_spec, bindings in ports.items():
            private, _, protocol = str(port_spec).partition("/")
            private_port = parse_port(private)
            protocol = protocol or "tcp"

            if not bindings:
                mappings.append(PortMapping(public_port=0, private_port=private_port, protocol=protocol))
                continue

            for binding in bindings:
                mappings.append(PortMapping(
                    public_port=parse_port(binding.get("HostPort")),
                    private_port=private_port,
                    protocol=protocol
                ))

        config = getattr(container, "config", None)
        return ContainerRecord(
            id=container.id,
            names=[container.name] if container.name else [],
            image=getattr(config, "image", None) or "",
            ports=mappings
        )

    def close(self) -> None:
        """Shut down the worker threads. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.executor.shutdown(wait=False, cancel_futures=True)
        logger.info(f"Released Docker client for {self.location}")
