"""
Destinations Infrastructure Layer
=================================

Infrastructure implementations for destinations:
- Models: SQLAlchemy ORM model
- Repositories: Data access layer
- External: Country-information API client
"""

from destination_service.destinations.infrastructure.models import DestinationModel
from destination_service.destinations.infrastructure.repositories import (
    SQLAlchemyDestinationRepository,
)
from destination_service.destinations.infrastructure.external import RestCountriesClient

__all__ = [
    "DestinationModel",
    "SQLAlchemyDestinationRepository",
    "RestCountriesClient",
]
