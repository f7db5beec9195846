"""Tests for the global error handlers in apartments_api.main."""

import pytest
from httpx import AsyncClient

from apartments_api.config import settings
from apartments_api.routers import apartments as apartments_router
from tests.utils import assert_error_message


@pytest.fixture
def failing_listing(monkeypatch):
    """Make the listing query fail as if the database went away."""

    async def _boom(*args, **kwargs):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(apartments_router.service, "list_apartments", _boom)


class TestInternalErrors:
    async def test_unexpected_error_returns_500_with_detail(
        self, raw_client: AsyncClient, failing_listing, monkeypatch
    ):
        monkeypatch.setattr(settings, "ENV", "development")

        response = await raw_client.get("/api/apartments")

        assert_error_message(response, 500, "Internal Server Error")
        body = response.json()
        assert body["detail"] == "database exploded"
        assert "RuntimeError" in body["stack"]

    async def test_production_hides_internal_detail(
        self, raw_client: AsyncClient, failing_listing, monkeypatch
    ):
        monkeypatch.setattr(settings, "ENV", "production")

        response = await raw_client.get("/api/apartments")

        assert_error_message(response, 500, "Internal Server Error")
        body = response.json()
        assert "detail" not in body
        assert "stack" not in body


class TestClientErrors:
    async def test_unknown_route_uses_error_shape(self, client: AsyncClient):
        response = await client.get("/api/unknown")

        assert_error_message(response, 404, "Not Found")

    async def test_invalid_parameter_response_is_stable(self, client: AsyncClient):
        first = await client.get("/api/apartments?page=abc")
        second = await client.get("/api/apartments?page=abc")

        assert first.status_code == second.status_code == 400
        assert first.json() == second.json()
