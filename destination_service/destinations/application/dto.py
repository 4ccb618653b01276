"""
Destination Application DTOs
=============================

Pydantic models for the destinations HTTP API.

The country name is not validated; it is handed to the lookup service
exactly as received.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


# ========== Request DTOs ==========

class DestinationCreateRequest(BaseModel):
    """Request body for creating a destination."""
    country: Any = Field(None, description="Country name to look up")

    @classmethod
    def from_body(cls, body: Any) -> "DestinationCreateRequest":
        """Accept any body; only a JSON object can carry a country."""
        if isinstance(body, dict):
            return cls(country=body.get("country"))
        return cls()

    @property
    def country_name(self) -> str:
        """The country as forwarded to the lookup service."""
        if self.country is None:
            return ""
        if isinstance(self.country, str):
            return self.country
        return str(self.country)


# ========== Response DTOs ==========

class DestinationResponse(BaseModel):
    """A stored destination."""
    id: int = Field(..., description="Identifier assigned by the database")
    country: str = Field(..., description="Country name as supplied by the caller")
    capital: Optional[str] = Field(None, description="First capital reported by the lookup service")
    population: Optional[int] = Field(None, description="Population reported by the lookup service")
    region: Optional[str] = Field(None, description="Region reported by the lookup service")


class ErrorResponse(BaseModel):
    """Uniform error payload for every failure."""
    error: str = Field(..., description="Human-readable message")
    details: str = Field(..., description="Underlying error detail")
