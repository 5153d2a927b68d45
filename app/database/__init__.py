"""
Storage module for the movie catalog.

This module provides the in-memory store, the record types it holds, and
CRUD operations over it.
"""

from app.database.models import Movie, RatingSummary
from app.database.store import MovieStore, get_store
from app.database import crud

__all__ = [
    # Models
    'Movie',
    'RatingSummary',
    # Store
    'MovieStore',
    'get_store',
    # CRUD module
    'crud',
]
