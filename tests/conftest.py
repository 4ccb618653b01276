"""
Shared test fixtures for the destination service.

Provides a mock country-information transport, an in-memory SQLite
database, and an HTTP client bound to the FastAPI app.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from destination_service.destinations.infrastructure import RestCountriesClient
from destination_service.infrastructure.database import (
    close_database,
    create_tables,
    init_database,
)
from destination_service.main import app

COUNTRIES_BASE_URL = "https://countries.test/v3.1"


# -----------------------------------------------------------------------------
# Mock HTTP Transport
# -----------------------------------------------------------------------------


class MockTransport(httpx.AsyncBaseTransport):
    """
    Mock transport that returns predefined responses.

    Unknown paths get the 404 the real service returns for unknown names.
    """

    def __init__(self, responses: dict[str, tuple[int, Any]]):
        """
        Args:
            responses: Dict mapping URL paths to (status_code, response_data) tuples
        """
        self.responses = responses
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        path = request.url.path
        if path in self.responses:
            status, data = self.responses[path]
            if isinstance(data, str):
                return httpx.Response(status, text=data)
            return httpx.Response(status, json=data)

        return httpx.Response(404, json={"status": 404, "message": "Not Found"})


class FailingTransport(httpx.AsyncBaseTransport):
    """Transport whose every request fails before reaching a server."""

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


def country_payload(name: str, capital: list[str], population: int, region: str) -> list[dict]:
    """Minimal REST Countries response body for one country."""
    return [
        {
            "name": {"common": name, "official": name},
            "capital": capital,
            "population": population,
            "region": region,
        }
    ]


FRANCE = country_payload("France", ["Paris"], 67000000, "Europe")
JAPAN = country_payload("Japan", ["Tokyo"], 125800000, "Asia")
PERU = country_payload("Peru", ["Lima"], 32970000, "Americas")
SOUTH_AFRICA = country_payload(
    "South Africa", ["Pretoria", "Bloemfontein", "Cape Town"], 59308690, "Africa"
)


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport({
        "/v3.1/name/France": (200, FRANCE),
        "/v3.1/name/Japan": (200, JAPAN),
        "/v3.1/name/Peru": (200, PERU),
        "/v3.1/name/South Africa": (200, SOUTH_AFRICA),
    })


@pytest.fixture
def lookup_client(mock_transport: MockTransport) -> RestCountriesClient:
    return RestCountriesClient(
        base_url=COUNTRIES_BASE_URL,
        http_client=httpx.AsyncClient(transport=mock_transport),
    )


@pytest_asyncio.fixture
async def database():
    """In-memory SQLite database with the destinations table created."""
    engine = init_database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables()
    yield engine
    await close_database()


@pytest_asyncio.fixture
async def client(database, lookup_client: RestCountriesClient):
    """HTTP client for the app, wired to the test database and mock lookups."""
    app.state.lookup_client = lookup_client
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
    await lookup_client.close()
    app.state.lookup_client = None
