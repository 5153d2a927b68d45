"""
Pydantic schemas for Movie API.
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

MIN_RELEASE_YEAR = 1888


def max_release_year() -> int:
    """Latest accepted release year, evaluated on each call."""
    return date.today().year + 5


def integral_float_to_int(value):
    """Accept 1999.0 as 1999; JSON clients may not distinguish the two."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _check_release_year(value: int | None) -> int | None:
    if value is not None and value > max_release_year():
        raise ValueError(f"releaseYear must be at most {max_release_year()}")
    return value


class MovieCreate(BaseModel):
    """Request body for creating a movie."""

    id: str = Field(..., min_length=1, strict=True)
    title: str = Field(..., min_length=1, strict=True)
    director: str = Field(..., min_length=1, strict=True)
    release_year: int = Field(..., alias="releaseYear", ge=MIN_RELEASE_YEAR, strict=True)
    genre: str = Field(..., min_length=1, strict=True)

    @field_validator("release_year", mode="before")
    @classmethod
    def release_year_integral(cls, v):
        return integral_float_to_int(v)

    @field_validator("release_year")
    @classmethod
    def release_year_not_too_late(cls, v):
        return _check_release_year(v)

    class Config:
        populate_by_name = True


class MovieUpdate(BaseModel):
    """
    Request body for updating a movie.

    Every field may be omitted, but a field that is sent must satisfy the
    same rules as on create; ``null`` is rejected.
    """

    title: str | None = Field(None, min_length=1, strict=True)
    director: str | None = Field(None, min_length=1, strict=True)
    release_year: int | None = Field(None, alias="releaseYear", ge=MIN_RELEASE_YEAR, strict=True)
    genre: str | None = Field(None, min_length=1, strict=True)

    # Before-validators only run for keys present in the payload.
    @field_validator("title", "director", "genre", mode="before")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

    @field_validator("release_year", mode="before")
    @classmethod
    def release_year_integral(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return integral_float_to_int(v)

    @field_validator("release_year")
    @classmethod
    def release_year_not_too_late(cls, v):
        return _check_release_year(v)

    class Config:
        populate_by_name = True


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: str
    title: str
    director: str
    release_year: int = Field(..., alias="releaseYear")
    genre: str
    ratings: list[int]

    class Config:
        from_attributes = True
        populate_by_name = True


class TopRatedMovie(MovieResponse):
    """Movie annotated with its average rating (0 when unrated)."""

    average_rating: float = Field(..., alias="averageRating")


class MovieMessage(BaseModel):
    """Confirmation message with the affected movie."""

    message: str
    movie: MovieResponse


class MessageResponse(BaseModel):
    """Bare confirmation message."""

    message: str
