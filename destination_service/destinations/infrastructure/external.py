"""
Destination External Service Adapters
======================================

HTTP client for the country-information service (REST Countries API).

One GET per lookup, no retries, no caching. Every failure is raised as a
CountryLookupException so the create use case fails as a whole.
"""

import math
from typing import Any, Optional
from urllib.parse import quote

import httpx

from destination_service.config import settings
from destination_service.core import (
    ConfigurationException,
    CountryLookupException,
    CountryNotFoundException,
)
from destination_service.destinations.application import ICountryLookupClient
from destination_service.destinations.domain import CountryInfo
from destination_service.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _is_number(value: Any) -> bool:
    # JSON numbers only; bool is an int subclass and NaN cannot be stored.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


class RestCountriesClient(ICountryLookupClient):
    """
    Looks countries up by name at `{base_url}/name/{country}`.

    Uses the first entry of the returned array and the first name of its
    `capital` list.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.base_url = (base_url or settings.countries_api_base_url).rstrip("/")
        if not self.base_url:
            raise ConfigurationException("Country lookup base URL is not configured")
        self._timeout = timeout if timeout is not None else settings.countries_api_timeout_seconds
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    async def lookup(self, country: str) -> CountryInfo:
        url = f"{self.base_url}/name/{quote(country or '', safe='')}"

        logger.info("Fetching country data", extra={"country": country, "url": url})

        client = await self._get_client()
        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            raise CountryLookupException(
                f"request failed: {e}", details={"country": country}
            ) from e

        if response.status_code == 404:
            raise CountryNotFoundException(country)
        if not response.is_success:
            raise CountryLookupException(
                f"unexpected status {response.status_code}",
                details={"country": country, "status_code": response.status_code}
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise CountryLookupException("response is not valid JSON") from e

        return self._parse(country, payload)

    @staticmethod
    def _parse(country: str, payload: Any) -> CountryInfo:
        if not isinstance(payload, list) or not payload:
            raise CountryNotFoundException(country)

        entry = payload[0]
        if not isinstance(entry, dict):
            raise CountryLookupException("malformed country entry")

        capitals = entry.get("capital")
        if not isinstance(capitals, list) or not capitals:
            raise CountryLookupException(f"no capital listed for '{country}'")

        population = entry.get("population")
        region = entry.get("region")
        if not _is_number(population) or region is None:
            raise CountryLookupException(f"incomplete country data for '{country}'")

        return CountryInfo(
            capital=str(capitals[0]),
            population=int(population),
            region=str(region),
        )

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
