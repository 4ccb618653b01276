"""
Destinations Domain Layer
=========================

Contains:
- Entities: Destination
- Value Objects: CountryInfo

This layer has no dependencies on infrastructure - pure Python.
"""

from destination_service.destinations.domain.entities import CountryInfo, Destination

__all__ = [
    "CountryInfo",
    "Destination",
]
