"""
Destination Service
===================

CRUD backend for travel destinations enriched with country facts.
"""

__version__ = "1.0.0"
