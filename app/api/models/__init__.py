"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import (
    MovieCreate,
    MovieUpdate,
    MovieResponse,
    TopRatedMovie,
    MovieMessage,
    MessageResponse,
)
from app.api.models.rating import RatingCreate, RatingSummaryResponse

__all__ = [
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "TopRatedMovie",
    "MovieMessage",
    "MessageResponse",
    "RatingCreate",
    "RatingSummaryResponse",
]
