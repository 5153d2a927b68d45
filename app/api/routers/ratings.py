"""
Rating API endpoints.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_existing_movie, get_movie_store, json_body
from app.api.models.movie import MovieMessage, MovieResponse
from app.api.models.rating import RatingCreate, RatingSummaryResponse
from app.database import crud
from app.database.models import Movie
from app.database.store import MovieStore

router = APIRouter(prefix="/movies", tags=["ratings"])


@router.post("/{movie_id}/rating", response_model=MovieMessage)
def rate_movie(
    movie: Movie = Depends(get_existing_movie),
    rating_in: RatingCreate = Depends(
        json_body(RatingCreate, "Invalid rating data. Rating must be between 1 and 5")
    ),
    store: MovieStore = Depends(get_movie_store),
):
    """Add a rating (1-5) to a movie."""
    rated = crud.add_rating(store, movie.id, rating_in.rating)
    return MovieMessage(message="Movie rated successfully", movie=MovieResponse.model_validate(rated))


@router.get(
    "/{movie_id}/rating",
    response_model=RatingSummaryResponse,
    responses={status.HTTP_204_NO_CONTENT: {"description": "Movie has no ratings yet"}},
)
def get_movie_rating(
    movie: Movie = Depends(get_existing_movie),
    store: MovieStore = Depends(get_movie_store),
):
    """Get the average rating of a movie."""
    summary = crud.get_rating_summary(store, movie.id)
    if summary is None:
        # 204 with a JSON body is part of the public contract.
        return JSONResponse(
            status_code=status.HTTP_204_NO_CONTENT,
            content={"message": "Movie has no ratings yet"},
        )
    return RatingSummaryResponse.model_validate(summary)
