"""
Infrastructure Layer
=====================

Low-level technical concerns:
- Database engine, connection pool and sessions
"""
