"""
Movie Catalog Service Application Package.

This package contains the HTTP API, the in-memory movie store with its CRUD
operations, and shared utilities.
"""

__version__ = "1.0.0"
