"""
Destination Domain Entities
============================

Pure Python domain objects for the destinations module, free of
infrastructure concerns.
"""

from dataclasses import dataclass, asdict
from typing import Any, Optional


@dataclass(frozen=True)
class CountryInfo:
    """
    Facts about a country as reported by the lookup service.

    Only the fields a destination is enriched with are kept.
    """

    capital: str
    population: int
    region: str


@dataclass
class Destination:
    """
    A persisted country together with its derived geographic facts.

    `id` is assigned by the database on insert and never changes afterwards.
    """

    id: int
    country: str
    capital: Optional[str]
    population: Optional[int]
    region: Optional[str]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
