"""
Shared Kernel Module
====================

Generic infrastructure (logging, HTTP middleware) used by the destinations
module and the application entry point.

DO NOT add destination business logic to the shared kernel.
"""
