"""
Integration tests for health check and root endpoints.
"""

from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import OperationalError


class TestHealthEndpoints:
    """Tests for /health endpoints."""

    def test_health_check_basic(self, client):
        """Test basic health check endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    def test_health_check_live(self, client):
        """Test liveness probe endpoint."""
        response = client.get("/health/live")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    def test_health_check_ready(self, client):
        """Test readiness probe when the database answers."""
        with patch("api.routers.health.ping_database", new=AsyncMock(return_value=True)):
            response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_check_not_ready_without_database(self, client):
        """The test app never initializes the database engine."""
        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"

    def test_health_check_not_ready_on_database_error(self, client):
        error = OperationalError("SELECT 1", {}, ConnectionRefusedError("refused"))
        with patch("api.routers.health.ping_database", new=AsyncMock(side_effect=error)):
            response = client.get("/health/ready")

        assert response.status_code == 503

    def test_health_check_detailed(self, client):
        with patch("api.routers.health.ping_database", new=AsyncMock(return_value=True)):
            response = client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert set(data["components"]["database"]) == {"status", "latency_ms", "error"}
        assert data["components"]["database"]["status"] == "healthy"
        assert data["environment"] == "testing"

    def test_root_endpoint(self, client):
        """Test root endpoint greeting."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Hello from user-info.\n"
