"""
Shared Infrastructure
=====================

Low-level technical concerns shared by every module:
- Logging setup
"""
