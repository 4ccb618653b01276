"""
Core Exceptions
================

Custom exceptions for the destination service.

Every failure reaching the HTTP boundary is reported to clients as the same
generic 500 payload; the types below only exist so logs and tests can tell
the causes apart.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RepositoryException(ApplicationException):
    """Base exception for repository/data access errors."""


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""


class ExternalServiceException(ApplicationException):
    """Base exception for external service failures."""

    def __init__(
        self,
        service_name: str,
        message: str,
        details: Optional[dict] = None
    ):
        self.service_name = service_name
        super().__init__(f"{service_name}: {message}", details)


class CountryLookupException(ExternalServiceException):
    """Exception for country-information API failures."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__("Country Lookup", message, details)


class CountryNotFoundException(CountryLookupException):
    """The lookup service returned no country matching the requested name."""

    def __init__(self, country: str, details: Optional[dict] = None):
        self.country = country
        super().__init__(f"no country matches '{country}'", details)
