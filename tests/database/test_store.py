"""
Unit tests for the in-memory MovieStore.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from app.database import crud
from app.database.models import Movie
from app.database.store import MovieStore, get_store
from app.exceptions import DuplicateMovieError


@pytest.fixture
def store():
    """Create a store holding one movie."""
    store = MovieStore()
    crud.create_movie(store, id='m1', title='Alien', director='Ridley Scott',
                      release_year=1979, genre='Horror')
    return store


def test_get_returns_copy(store):
    """Mutating a returned record does not touch the stored one."""
    movie = store.get('m1')
    movie.title = 'Aliens'
    movie.ratings.append(5)

    stored = store.get('m1')
    assert stored.title == 'Alien'
    assert stored.ratings == []


def test_snapshot_returns_copies(store):
    """Snapshots are detached from the store."""
    snapshot = store.snapshot()
    snapshot[0].ratings.append(1)
    assert store.get('m1').ratings == []


def test_contains_and_len(store):
    assert 'm1' in store
    assert 'm2' not in store
    assert len(store) == 1


def test_transaction_exposes_mapping(store):
    """Writes inside a transaction are visible afterwards."""
    with store.transaction() as movies:
        movies['m2'] = Movie(id='m2', title='Heat', director='Michael Mann',
                             release_year=1995, genre='Crime')
    assert store.get('m2').title == 'Heat'


def test_reset(store):
    store.reset()
    assert len(store) == 0


def test_get_store_singleton():
    assert get_store() is get_store()


def test_concurrent_ratings_are_not_lost(store):
    """Ratings submitted from many threads all land."""
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: crud.add_rating(store, 'm1', i % 5 + 1), range(200)))

    assert len(store.get('m1').ratings) == 200


def test_concurrent_duplicate_creates(store):
    """Only one of several racing creates for the same id succeeds."""
    def create(_):
        try:
            crud.create_movie(store, id='race', title='Race', director='D',
                              release_year=2000, genre='Drama')
            return True
        except DuplicateMovieError:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(create, range(20)))

    assert results.count(True) == 1
    assert len(store) == 2
