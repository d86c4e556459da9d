"""Pytest configuration for Portline tests.

No test talks to a real Docker daemon: the HTTP layer is exercised with a
fake ``ContainerRuntime`` and the Docker adapter with a stubbed client.
"""

from typing import Callable, List, Optional

import pytest
from fastapi.testclient import TestClient

from portline.api.server import create_api_app
from portline.context import AppContext
from portline.docker.models import ContainerRecord, PortMapping
from portline.docker.runtime import ContainerRuntime

TEST_API_KEY = "secret123"


class FakeRuntime(ContainerRuntime):
    """In-memory runtime returning a fixed snapshot or raising an error."""

    def __init__(self, containers: Optional[List[ContainerRecord]] = None, error: Optional[Exception] = None):
        self.containers = containers or []
        self.error = error
        self.calls = 0
        self.closed = False

    async def list_containers(self) -> List[ContainerRecord]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.containers)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_container() -> Callable[..., ContainerRecord]:
    """Factory for container records with (public, private) port pairs."""
    def _make(container_id: str = "abcdef0123456789", name: str = "/web",
              image: str = "nginx", ports=()) -> ContainerRecord:
        return ContainerRecord(
            id=container_id,
            names=[name],
            image=image,
            ports=[PortMapping(public_port=public, private_port=private) for public, private in ports]
        )
    return _make


@pytest.fixture
def fake_runtime() -> FakeRuntime:
    """Provide an empty fake runtime."""
    return FakeRuntime()


@pytest.fixture
def context(fake_runtime) -> AppContext:
    """Provide an application context around the fake runtime."""
    return AppContext(runtime=fake_runtime, api_key=TEST_API_KEY, version="v9.9.9")


@pytest.fixture
def client(context):
    """Provide an HTTP client for the API with lifespan events enabled."""
    app = create_api_app(context)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict:
    """Authorization header carrying the configured secret."""
    return {"Authorization": f"Bearer {TEST_API_KEY}"}
