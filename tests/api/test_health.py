"""API smoke tests for health endpoints and middleware."""

import structlog
from httpx import AsyncClient

from snackbooks import __version__


class TestHealthAPI:
    async def test_api_health(self, client: AsyncClient):
        response = await client.get("/api/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["uptime_seconds"] >= 0

    async def test_root_health(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.json() == {"status": "healthy", "version": __version__}

    async def test_root(self, client: AsyncClient):
        data = (await client.get("/")).json()
        assert data["name"] == "SnackBooks"

    async def test_request_id_header(self, client: AsyncClient):
        response = await client.get("/api/health")
        assert len(response.headers["X-Request-ID"]) == 8

    async def test_supplied_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get("/api/health", headers={"X-Request-ID": "till-42"})
        assert response.headers["X-Request-ID"] == "till-42"

    async def test_oversized_request_id_is_replaced(self, client: AsyncClient):
        response = await client.get("/api/health", headers={"X-Request-ID": "x" * 200})
        assert len(response.headers["X-Request-ID"]) == 8

    async def test_request_context_is_unbound_afterwards(self, client: AsyncClient):
        await client.get("/api/health", headers={"X-Request-ID": "till-43"})
        assert "request_id" not in structlog.contextvars.get_contextvars()

    async def test_unknown_route_uses_error_shape(self, client: AsyncClient):
        response = await client.get("/api/nope")
        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "NOT_FOUND"
        assert data["path"] == "/api/nope"
