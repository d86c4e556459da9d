"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from portline.api.server import create_api_app
from portline.docker.models import ContainerRecord, PortMapping
from portline.shared.errors import RuntimeUnavailable


class TestIndexPage:
    """Test the web interface."""

    def test_index_renders_version(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "v9.9.9" in response.text
        assert 'id="login-form"' in response.text

    def test_static_assets_served(self, client):
        response = client.get("/static/app.js")

        assert response.status_code == 200
        assert "renderPorts" in response.text

    def test_missing_static_asset(self, client):
        assert client.get("/static/missing.js").status_code == 404


class TestPortsEndpoint:
    """Test GET /api/ports."""

    def test_missing_header(self, client, fake_runtime):
        response = client.get("/api/ports")

        assert response.status_code == 401
        assert response.json()["detail"] == "Missing API key"
        assert fake_runtime.calls == 0

    def test_wrong_secret(self, client, fake_runtime):
        response = client.get("/api/ports", headers={"Authorization": "Bearer Secret123"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid API key"
        assert fake_runtime.calls == 0

    def test_wrong_scheme(self, client):
        for value in ("secret123", "Basic secret123", "bearer secret123", "Bearer  secret123"):
            response = client.get("/api/ports", headers={"Authorization": value})
            assert response.status_code == 401, value

    def test_lists_ports(self, client, fake_runtime, auth_headers):
        fake_runtime.containers = [
            ContainerRecord(id="abcdef0123456789", names=["/web"], image="nginx",
                            ports=[PortMapping(public_port=8080, private_port=80),
                                   PortMapping(public_port=8080, private_port=80)]),
            ContainerRecord(id="1122334455667788", names=["worker"], image="busybox",
                            ports=[PortMapping(public_port=0, private_port=0)]),
        ]

        response = client.get("/api/ports", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "ports": [{
                "port": 8080,
                "containerName": "web",
                "imageName": "nginx",
                "containerId": "abcdef012345",
            }],
            "maxPort": 8080,
        }

    def test_empty_listing(self, client, auth_headers):
        response = client.get("/api/ports", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"ports": [], "maxPort": 1024}

    def test_snapshot_per_request(self, client, fake_runtime, auth_headers):
        client.get("/api/ports", headers=auth_headers)
        fake_runtime.containers = [
            ContainerRecord(id="abcdef0123456789", names=["/web"], ports=[PortMapping(public_port=2000)])
        ]

        response = client.get("/api/ports", headers=auth_headers)

        assert fake_runtime.calls == 2
        assert response.json()["maxPort"] == 2000

    def test_runtime_failure_is_generic(self, client, fake_runtime, auth_headers):
        fake_runtime.error = RuntimeUnavailable("dial unix /var/run/docker.sock: connection refused")

        response = client.get("/api/ports", headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to get port information"
        assert "docker.sock" not in response.text

    def test_invalid_container_data(self, client, fake_runtime, auth_headers):
        fake_runtime.containers = [ContainerRecord(id="abcdef0123456789", names=[])]

        response = client.get("/api/ports", headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to get port information"


class TestValidateKeyEndpoint:
    """Test POST /api/validate-key."""

    def test_valid_key(self, client):
        response = client.post("/api/validate-key", json={"apiKey": "secret123"})

        assert response.status_code == 200
        assert response.json() == {"valid": True}

    def test_invalid_key(self, client):
        response = client.post("/api/validate-key", json={"apiKey": "Secret123"})

        assert response.status_code == 200
        assert response.json() == {"valid": False}

    def test_missing_key_field(self, client):
        response = client.post("/api/validate-key", json={})

        assert response.status_code == 200
        assert response.json() == {"valid": False}

    def test_null_key(self, client):
        response = client.post("/api/validate-key", json={"apiKey": None})

        assert response.status_code == 200
        assert response.json() == {"valid": False}

    def test_null_body(self, client):
        response = client.post(
            "/api/validate-key",
            content=b"null",
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 200
        assert response.json() == {"valid": False}

    def test_snake_case_key_is_ignored(self, client):
        response = client.post("/api/validate-key", json={"api_key": "secret123"})

        assert response.status_code == 200
        assert response.json() == {"valid": False}

    def test_unparsable_body(self, client):
        response = client.post(
            "/api/validate-key",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request body"

    def test_non_object_body(self, client):
        assert client.post("/api/validate-key", json=["secret123"]).status_code == 400

    def test_non_string_key(self, client):
        assert client.post("/api/validate-key", json={"apiKey": 123}).status_code == 400

    def test_empty_body(self, client):
        assert client.post("/api/validate-key").status_code == 400

    def test_get_not_allowed(self, client):
        response = client.get("/api/validate-key")

        assert response.status_code == 405

    def test_put_not_allowed(self, client):
        assert client.put("/api/validate-key", json={"apiKey": "secret123"}).status_code == 405


class TestLifecycle:
    """Test resource handling across the app lifespan."""

    def test_runtime_released_on_shutdown(self, context, fake_runtime):
        with TestClient(create_api_app(context)) as client:
            client.get("/")
            assert fake_runtime.closed is False

        assert fake_runtime.closed is True
