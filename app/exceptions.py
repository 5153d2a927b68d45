"""
Exception hierarchy for the movie catalog.

Every error the service reports to a client is a ``MovieServiceError``
carrying its HTTP status and, for schema failures, the validation issues.
The API layer renders them as ``{"error": ..., "details": ...}``.
"""

from typing import Any, List, Optional


class MovieServiceError(Exception):
    """Base exception for catalog operation errors."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[List[Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class InvalidPayloadError(MovieServiceError):
    """Raised when a request body fails schema validation."""

    def __init__(self, message: str, details: List[Any]):
        super().__init__(message, status_code=400, details=details)


class InvalidRequestBodyError(MovieServiceError):
    """Raised when a request body cannot be parsed as JSON."""

    def __init__(self):
        super().__init__("Invalid request body", status_code=400)


class DuplicateMovieError(MovieServiceError):
    """Raised when creating a movie whose id is already taken."""

    # Reported as 400 rather than 409; clients rely on it.
    def __init__(self, movie_id: str):
        super().__init__("Movie with this ID already exists", status_code=400)
        self.movie_id = movie_id


class MovieNotFoundError(MovieServiceError):
    """Raised when an id-scoped operation targets an unknown movie."""

    def __init__(self, movie_id: str):
        super().__init__("Movie not found", status_code=404)
        self.movie_id = movie_id


class NoMoviesFoundError(MovieServiceError):
    """Raised when a listing or filter produces no movies."""

    def __init__(self, message: str = "No movies found"):
        super().__init__(message, status_code=404)


class MissingKeywordError(MovieServiceError):
    """Raised when the search keyword is missing or empty."""

    def __init__(self):
        super().__init__("Keyword parameter is required", status_code=400)
