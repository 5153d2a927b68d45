"""
In-memory record types for the movie catalog.

This module defines the Movie record held by the store and the derived
rating summary view.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Movie:
    """
    A movie record and the ratings submitted for it.

    Attributes:
        id: Caller-supplied identifier, unique and immutable
        title: Movie title
        director: Director name
        release_year: Year of release
        genre: Genre name
        ratings: Submitted ratings (1-5), append-only
    """

    id: str
    title: str
    director: str
    release_year: int
    genre: str
    ratings: List[int] = field(default_factory=list)

    def copy(self) -> "Movie":
        """Return a detached copy, including its own ratings list."""
        return Movie(
            id=self.id,
            title=self.title,
            director=self.director,
            release_year=self.release_year,
            genre=self.genre,
            ratings=list(self.ratings),
        )

    def __repr__(self):
        return f"<Movie(id={self.id!r}, title='{self.title}', ratings={len(self.ratings)})>"


@dataclass(frozen=True)
class RatingSummary:
    """Average and count of a movie's ratings."""

    movie_id: str
    average_rating: float
    total_ratings: int
