"""
Shared API Layer
================

Middleware and error responses shared by all routers.
"""

from destination_service.shared.api.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    error_response,
    global_exception_handler,
)

__all__ = [
    "CorrelationIDMiddleware",
    "LoggingMiddleware",
    "error_response",
    "global_exception_handler",
]
