"""
Health check endpoint tests.

Validates basic test infrastructure.
"""

from httpx import AsyncClient


class TestHealthCheck:
    """Tests for GET /api/health."""

    async def test_health_returns_200(self, async_client: AsyncClient):
        """Health check endpoint returns 200 OK."""
        response = await async_client.get("/api/health")
        assert response.status_code == 200

    async def test_health_returns_healthy_status(self, async_client: AsyncClient):
        """Health check returns status: healthy."""
        response = await async_client.get("/api/health")
        assert response.json()["status"] == "healthy"

    async def test_responses_carry_request_id(self, async_client: AsyncClient):
        """Every response has an X-Request-ID header."""
        response = await async_client.get("/api/health")
        assert response.headers.get("X-Request-ID")
