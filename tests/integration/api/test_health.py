"""Integration tests for health endpoint."""
from __future__ import annotations

import pytest


class TestHealthEndpoint:
    """Tests for /api/health endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_ok(self, async_client):
        response = await async_client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"
        assert data["generator_backend"] == "placeholder"

    @pytest.mark.asyncio
    async def test_api_responses_not_cached(self, async_client):
        response = await async_client.get("/api/health")
        assert response.headers["cache-control"] == "no-store, no-cache, must-revalidate"
