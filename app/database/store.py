"""
In-memory movie store.

This module holds the process-wide movie collection and the lock that
serializes access to it. Nothing is persisted; a restart starts empty.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Generator, List, Optional

from app.database.models import Movie


class MovieStore:
    """
    Mapping of movie id to Movie, guarded by a single re-entrant lock.

    Request handlers run in a thread pool, so every read-modify-write must
    happen inside ``transaction()``.
    """

    def __init__(self):
        self._movies: Dict[str, Movie] = {}
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Generator[Dict[str, Movie], None, None]:
        """
        Context manager granting exclusive access to the underlying mapping.

        Usage:
            with store.transaction() as movies:
                movies[movie.id] = movie

        Yields:
            The live id -> Movie mapping
        """
        with self._lock:
            yield self._movies

    def get(self, movie_id: str) -> Optional[Movie]:
        """Return a copy of the movie, or None if absent."""
        with self._lock:
            movie = self._movies.get(movie_id)
            return movie.copy() if movie else None

    def __contains__(self, movie_id: object) -> bool:
        with self._lock:
            return movie_id in self._movies

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def snapshot(self) -> List[Movie]:
        """Return copies of all stored movies."""
        with self._lock:
            return [movie.copy() for movie in self._movies.values()]

    def reset(self):
        """
        Remove every movie.

        WARNING: This will delete all data in the store!
        """
        with self._lock:
            self._movies.clear()


# Global store instance (singleton pattern)
_store: Optional[MovieStore] = None
_store_lock = threading.Lock()


def get_store() -> MovieStore:
    """
    Get or create the global store instance.

    Returns:
        MovieStore instance
    """
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = MovieStore()
    return _store
