"""
Core Module
============

Shared core utilities and abstractions used across the application.

This module contains framework-agnostic code that defines the fundamental
building blocks of the system.
"""

from destination_service.core.exceptions import (
    ApplicationException,
    RepositoryException,
    ConfigurationException,
    ExternalServiceException,
    CountryLookupException,
    CountryNotFoundException,
)

__all__ = [
    "ApplicationException",
    "RepositoryException",
    "ConfigurationException",
    "ExternalServiceException",
    "CountryLookupException",
    "CountryNotFoundException",
]
