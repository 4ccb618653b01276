"""
Destinations Interfaces Layer
=============================

FastAPI route handlers. This is the outermost layer - it handles HTTP
requests/responses and delegates to the application service.
"""

from destination_service.destinations.interfaces.controllers import destinations_router

__all__ = ["destinations_router"]
