"""
FastAPI dependency injection for the movie store, the existence guard and
JSON request bodies.
"""

import logging
from typing import Awaitable, Callable, Type, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from app.database import crud
from app.database.models import Movie
from app.database.store import MovieStore, get_store
from app.exceptions import InvalidPayloadError, InvalidRequestBodyError, MovieNotFoundError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def get_movie_store() -> MovieStore:
    """Return the process-wide store for FastAPI Depends()."""
    return get_store()


def get_existing_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)) -> Movie:
    """
    Existence guard for every id-scoped route.

    Declare it before any body dependency so an unknown id is rejected
    before the body is read.

    Raises:
        MovieNotFoundError: If no movie has this ID
    """
    movie = crud.get_movie(store, movie_id)
    if movie is None:
        logger.debug("Movie %r not found", movie_id)
        raise MovieNotFoundError(movie_id)
    return movie


def json_body(schema: Type[SchemaT], error_message: str) -> Callable[[Request], Awaitable[SchemaT]]:
    """
    Build a dependency that parses the request body and validates it.

    Args:
        schema: Pydantic model the body must satisfy
        error_message: Error reported when validation fails

    Returns:
        Async dependency yielding a validated ``schema`` instance
    """

    async def parse(request: Request) -> SchemaT:
        try:
            body = await request.json()
        except ValueError:
            raise InvalidRequestBodyError()
        try:
            return schema.model_validate(body)
        except ValidationError as e:
            raise InvalidPayloadError(error_message, details=e.errors(include_url=False))

    return parse
