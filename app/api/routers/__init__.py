"""
API route handlers.
"""

from app.api.routers import movies, ratings

__all__ = ["movies", "ratings"]
