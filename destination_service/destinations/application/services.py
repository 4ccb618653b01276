"""
Destination Application Services
=================================

Application services orchestrate the create/list/delete use cases and
coordinate between the lookup client and the repository.

Following SOLID principles:
- Single Responsibility: Each service has one clear purpose
- Dependency Inversion: Depend on abstractions, not concrete implementations
"""

from abc import ABC, abstractmethod
from typing import List

from destination_service.destinations.domain import CountryInfo, Destination


# ========== Interfaces (Dependency Inversion) ==========

class IDestinationRepository(ABC):
    """Interface for destination data access."""

    @abstractmethod
    async def list_all(self) -> List[Destination]:
        """Return every destination, most recently created first."""

    @abstractmethod
    async def create(self, country: str, info: CountryInfo) -> Destination:
        """Insert a destination and return it with its assigned id."""

    @abstractmethod
    async def delete(self, destination_id: str) -> None:
        """Delete by id; a missing id is not an error."""


class ICountryLookupClient(ABC):
    """Interface for the external country-information service."""

    @abstractmethod
    async def lookup(self, country: str) -> CountryInfo:
        """Return facts about the first country matching `country`."""


# ========== Application Services ==========

class DestinationService:
    """
    Service for destination use cases.

    Creation is all-or-nothing: nothing is inserted unless the lookup
    succeeded, and the insert is the only mutating statement.
    """

    def __init__(
        self,
        repository: IDestinationRepository,
        lookup_client: ICountryLookupClient
    ):
        self._repository = repository
        self._lookup_client = lookup_client

    async def list_destinations(self) -> List[Destination]:
        return await self._repository.list_all()

    async def add_destination(self, country: str) -> Destination:
        """
        Look up `country` and store it with its capital, population and region.

        Raises:
            CountryLookupException: lookup failed or found nothing
            RepositoryException: insert failed
        """
        info = await self._lookup_client.lookup(country)
        return await self._repository.create(country, info)

    async def remove_destination(self, destination_id: str) -> None:
        await self._repository.delete(destination_id)
