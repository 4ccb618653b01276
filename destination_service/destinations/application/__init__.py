"""
Destinations Application Layer
==============================

Contains:
- Services: Orchestrate lookup and persistence for each use case
- DTOs: Data transfer objects for API serialization

This layer depends on the domain layer and on the repository and lookup
interfaces, but not on concrete infrastructure implementations.
"""

from destination_service.destinations.application.dto import (
    DestinationCreateRequest,
    DestinationResponse,
    ErrorResponse,
)
from destination_service.destinations.application.services import (
    DestinationService,
    IDestinationRepository,
    ICountryLookupClient,
)

__all__ = [
    # DTOs
    "DestinationCreateRequest",
    "DestinationResponse",
    "ErrorResponse",
    # Services
    "DestinationService",
    # Interfaces
    "IDestinationRepository",
    "ICountryLookupClient",
]
