"""
Movie API endpoints.

Literal routes (top-rated, search, genre, director) are declared before
``/{movie_id}`` so the id route cannot swallow them.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_existing_movie, get_movie_store, json_body
from app.api.models.movie import (
    MessageResponse,
    MovieCreate,
    MovieMessage,
    MovieResponse,
    MovieUpdate,
    TopRatedMovie,
)
from app.database import crud
from app.database.models import Movie
from app.database.store import MovieStore
from app.exceptions import MissingKeywordError, NoMoviesFoundError

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("/top-rated", response_model=list[TopRatedMovie])
def list_top_rated(store: MovieStore = Depends(get_movie_store)):
    """List all movies with their average rating, best first."""
    ranked = crud.get_top_rated(store)
    if not ranked:
        raise NoMoviesFoundError("No movies found")
    return [
        TopRatedMovie.model_validate({**asdict(movie), "average_rating": average})
        for movie, average in ranked
    ]


@router.get("/search", response_model=list[MovieResponse])
def search_movies(
    keyword: str | None = Query(None),
    store: MovieStore = Depends(get_movie_store),
):
    """Search movie titles for a keyword."""
    if not keyword:
        raise MissingKeywordError()
    movies = crud.search_movies(store, keyword)
    if not movies:
        raise NoMoviesFoundError("No movies found matching the keyword")
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/genre/{genre}", response_model=list[MovieResponse])
def list_movies_by_genre(genre: str, store: MovieStore = Depends(get_movie_store)):
    """List movies of a genre."""
    movies = crud.get_movies_by_genre(store, genre)
    if not movies:
        raise NoMoviesFoundError("No movies found for this genre")
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/director/{director}", response_model=list[MovieResponse])
def list_movies_by_director(director: str, store: MovieStore = Depends(get_movie_store)):
    """List movies by a director."""
    movies = crud.get_movies_by_director(store, director)
    if not movies:
        raise NoMoviesFoundError("No movies found for this director")
    return [MovieResponse.model_validate(m) for m in movies]


@router.post("", response_model=MovieMessage, status_code=status.HTTP_201_CREATED)
def create_movie(
    movie_in: MovieCreate = Depends(json_body(MovieCreate, "Invalid movie data")),
    store: MovieStore = Depends(get_movie_store),
):
    """Add a new movie with no ratings."""
    movie = crud.create_movie(
        store,
        id=movie_in.id,
        title=movie_in.title,
        director=movie_in.director,
        release_year=movie_in.release_year,
        genre=movie_in.genre,
    )
    return MovieMessage(message="Movie added successfully", movie=MovieResponse.model_validate(movie))


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie: Movie = Depends(get_existing_movie)):
    """Get movie details, including ratings, by ID."""
    return MovieResponse.model_validate(movie)


@router.patch("/{movie_id}", response_model=MovieMessage)
def update_movie(
    movie: Movie = Depends(get_existing_movie),
    update_in: MovieUpdate = Depends(json_body(MovieUpdate, "Invalid update data")),
    store: MovieStore = Depends(get_movie_store),
):
    """Replace the supplied fields of a movie; id and ratings never change."""
    updated = crud.update_movie(store, movie.id, **update_in.model_dump(exclude_unset=True))
    return MovieMessage(message="Movie updated successfully", movie=MovieResponse.model_validate(updated))


@router.delete("/{movie_id}", response_model=MessageResponse)
def delete_movie(
    movie: Movie = Depends(get_existing_movie),
    store: MovieStore = Depends(get_movie_store),
):
    """Delete a movie."""
    crud.delete_movie(store, movie.id)
    return MessageResponse(message="Movie deleted successfully")
