"""
Pydantic schemas for Rating API.
"""

from pydantic import BaseModel, Field, field_validator

from app.api.models.movie import integral_float_to_int


class RatingCreate(BaseModel):
    """Request body for rating a movie."""

    rating: int = Field(..., ge=1, le=5, strict=True)

    @field_validator("rating", mode="before")
    @classmethod
    def rating_integral(cls, v):
        return integral_float_to_int(v)


class RatingSummaryResponse(BaseModel):
    """Response model for a movie's rating summary."""

    movie_id: str = Field(..., alias="movieId")
    average_rating: float = Field(..., alias="averageRating")
    total_ratings: int = Field(..., alias="totalRatings")

    class Config:
        from_attributes = True
        populate_by_name = True
