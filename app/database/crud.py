"""
CRUD operations for the movie store.

This module provides Create, Read, Update, Delete operations for movies,
rating submission and aggregation, and the filter/search queries. Every
function takes the store as its first argument and returns detached copies
of the stored records.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence, Tuple

from app.database.models import Movie, RatingSummary
from app.database.store import MovieStore
from app.exceptions import DuplicateMovieError, MovieNotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "director", "release_year", "genre")


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(
    store: MovieStore,
    id: str,
    title: str,
    director: str,
    release_year: int,
    genre: str,
) -> Movie:
    """
    Create a new movie with no ratings.

    Args:
        store: Movie store
        id: Caller-supplied movie ID
        title: Movie title
        director: Director name
        release_year: Year the movie was released
        genre: Genre name

    Returns:
        Created Movie object

    Raises:
        DuplicateMovieError: If a movie with this ID already exists
    """
    with store.transaction() as movies:
        if id in movies:
            raise DuplicateMovieError(id)
        movie = Movie(
            id=id,
            title=title,
            director=director,
            release_year=release_year,
            genre=genre,
        )
        movies[id] = movie
        logger.info("Created movie %r (%s)", id, title)
        return movie.copy()


def get_movie(store: MovieStore, movie_id: str) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        store: Movie store
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return store.get(movie_id)


def update_movie(store: MovieStore, movie_id: str, **kwargs) -> Movie:
    """
    Replace some of a movie's fields.

    Only title, director, release_year and genre can change; any other
    keyword (id, ratings, ...) is ignored.

    Args:
        store: Movie store
        movie_id: Movie ID
        **kwargs: Fields to update

    Returns:
        Updated Movie object

    Raises:
        MovieNotFoundError: If the movie does not exist
    """
    with store.transaction() as movies:
        movie = movies.get(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        changed = []
        for key, value in kwargs.items():
            if key in UPDATABLE_FIELDS:
                setattr(movie, key, value)
                changed.append(key)
        logger.info("Updated movie %r: %s", movie_id, ", ".join(changed) or "no changes")
        return movie.copy()


def delete_movie(store: MovieStore, movie_id: str) -> None:
    """
    Delete a movie and its ratings.

    Args:
        store: Movie store
        movie_id: Movie ID

    Raises:
        MovieNotFoundError: If the movie does not exist
    """
    with store.transaction() as movies:
        if movies.pop(movie_id, None) is None:
            raise MovieNotFoundError(movie_id)
    logger.info("Deleted movie %r", movie_id)


# ==================== RATING OPERATIONS ====================

def add_rating(store: MovieStore, movie_id: str, rating: int) -> Movie:
    """
    Append a rating to a movie.

    Args:
        store: Movie store
        movie_id: Movie ID
        rating: Rating value (1-5)

    Returns:
        Movie object including the new rating

    Raises:
        MovieNotFoundError: If the movie does not exist
    """
    with store.transaction() as movies:
        movie = movies.get(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        movie.ratings.append(rating)
        logger.info("Rated movie %r with %d (%d ratings)", movie_id, rating, len(movie.ratings))
        return movie.copy()


def average_rating(ratings: Sequence[int]) -> float:
    """
    Mean of the ratings rounded to one decimal place, halves away from zero.

    Returns 0.0 for an empty sequence.
    """
    if not ratings:
        return 0.0
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def get_rating_summary(store: MovieStore, movie_id: str) -> Optional[RatingSummary]:
    """
    Get the average and count of a movie's ratings.

    Args:
        store: Movie store
        movie_id: Movie ID

    Returns:
        RatingSummary, or None if the movie has not been rated yet

    Raises:
        MovieNotFoundError: If the movie does not exist
    """
    movie = store.get(movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    if not movie.ratings:
        return None
    return RatingSummary(
        movie_id=movie_id,
        average_rating=average_rating(movie.ratings),
        total_ratings=len(movie.ratings),
    )


def get_top_rated(store: MovieStore) -> List[Tuple[Movie, float]]:
    """
    Get every movie paired with its average rating, best first.

    Unrated movies average 0. The sort is stable, so movies with equal
    averages keep store order.

    Args:
        store: Movie store

    Returns:
        List of (Movie, average rating) tuples sorted by average descending
    """
    scored = [(movie, average_rating(movie.ratings)) for movie in store.snapshot()]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)


# ==================== QUERY OPERATIONS ====================

def get_movies_by_genre(store: MovieStore, genre: str) -> List[Movie]:
    """
    Get movies of a genre (case-insensitive exact match).

    Args:
        store: Movie store
        genre: Genre name

    Returns:
        List of matching Movie objects
    """
    wanted = genre.lower()
    return [movie for movie in store.snapshot() if movie.genre.lower() == wanted]


def get_movies_by_director(store: MovieStore, director: str) -> List[Movie]:
    """
    Get movies by a director (case-insensitive exact match).

    Args:
        store: Movie store
        director: Director name

    Returns:
        List of matching Movie objects
    """
    wanted = director.lower()
    return [movie for movie in store.snapshot() if movie.director.lower() == wanted]


def search_movies(store: MovieStore, keyword: str) -> List[Movie]:
    """
    Search movie titles for a keyword (case-insensitive substring match).

    Args:
        store: Movie store
        keyword: Text to look for in titles

    Returns:
        List of Movie objects whose title contains the keyword
    """
    needle = keyword.lower()
    return [movie for movie in store.snapshot() if needle in movie.title.lower()]
