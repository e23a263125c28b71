"""Tests for health check endpoint."""

import pytest
from starlette.testclient import TestClient

from terminal_mcp.config import Settings
from terminal_mcp.dependencies import Dependencies
from terminal_mcp.server import create_server


class TestHealthCheck:
    """Tests for health check endpoint."""

    @pytest.fixture
    def client(self) -> TestClient:
        """Create test client for HTTP server."""
        server = create_server(Dependencies.from_settings(Settings()))
        return TestClient(server.http_app())

    def test_health_returns_ok(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.text == "OK"

    def test_health_returns_plain_text(self, client: TestClient) -> None:
        response = client.get("/health")
        assert "text/plain" in response.headers["content-type"]
