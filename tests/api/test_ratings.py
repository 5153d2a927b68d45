"""
API tests for rating endpoints.

Uses FastAPI TestClient against the real app.
POST /movies/{movie_id}/rating appends a rating; GET returns the summary,
or 204 with a message when the movie has not been rated.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.main import app
from app.database.store import get_store

client = TestClient(app)


@pytest.fixture(autouse=True)
def movie():
    """Start every test with a single unrated movie."""
    get_store().reset()
    r = client.post(
        "/movies",
        json={
            "id": "inception",
            "title": "Inception",
            "director": "Christopher Nolan",
            "releaseYear": 2010,
            "genre": "Sci-Fi",
        },
    )
    assert r.status_code == 201
    yield "inception"
    get_store().reset()


class TestRateMovie:
    """Tests for POST /movies/{movie_id}/rating."""

    def test_rate_movie(self, movie):
        r = client.post(f"/movies/{movie}/rating", json={"rating": 5})
        assert r.status_code == 200
        data = r.json()
        assert data["message"] == "Movie rated successfully"
        assert data["movie"]["id"] == movie
        assert data["movie"]["ratings"] == [5]

    def test_ratings_accumulate(self, movie):
        """Repeated values are kept, not collapsed."""
        for value in (3, 3, 4):
            client.post(f"/movies/{movie}/rating", json={"rating": value})
        assert client.get(f"/movies/{movie}").json()["ratings"] == [3, 3, 4]

    @pytest.mark.parametrize("body", [
        {"rating": 0},
        {"rating": 6},
        {"rating": 3.5},
        {"rating": "4"},
        {"rating": True},
        {},
        [5],
    ])
    def test_rate_movie_invalid(self, movie, body):
        r = client.post(f"/movies/{movie}/rating", json=body)
        assert r.status_code == 400
        data = r.json()
        assert data["error"] == "Invalid rating data. Rating must be between 1 and 5"
        assert data["details"]
        assert client.get(f"/movies/{movie}").json()["ratings"] == []

    def test_rate_movie_integral_float(self, movie):
        """5.0 is accepted as the rating 5."""
        r = client.post(f"/movies/{movie}/rating", json={"rating": 5.0})
        assert r.status_code == 200
        assert r.json()["movie"]["ratings"] == [5]

    def test_rate_movie_unparseable_body(self, movie):
        r = client.post(f"/movies/{movie}/rating", content=b"rating=5",
                        headers={"Content-Type": "application/json"})
        assert r.status_code == 400
        assert r.json() == {"error": "Invalid request body"}

    def test_rate_movie_not_found(self):
        r = client.post("/movies/missing/rating", json={"rating": 5})
        assert r.status_code == 404
        assert r.json() == {"error": "Movie not found"}


class TestRatingSummary:
    """Tests for GET /movies/{movie_id}/rating."""

    def test_rating_summary(self, movie):
        for value in (5, 3, 4):
            client.post(f"/movies/{movie}/rating", json={"rating": value})

        r = client.get(f"/movies/{movie}/rating")
        assert r.status_code == 200
        assert r.json() == {"movieId": movie, "averageRating": 4.0, "totalRatings": 3}

    def test_rating_summary_rounds_to_one_decimal(self, movie):
        for value in (1, 1, 2):
            client.post(f"/movies/{movie}/rating", json={"rating": value})

        r = client.get(f"/movies/{movie}/rating")
        assert r.json()["averageRating"] == 1.3

    def test_rating_summary_no_ratings(self, movie):
        """An unrated movie answers 204 with a message, not an error."""
        r = client.get(f"/movies/{movie}/rating")
        assert r.status_code == 204
        assert r.json() == {"message": "Movie has no ratings yet"}

    def test_rating_summary_not_found(self):
        r = client.get("/movies/missing/rating")
        assert r.status_code == 404
        assert r.json() == {"error": "Movie not found"}

    def test_rating_summary_after_delete(self, movie):
        client.post(f"/movies/{movie}/rating", json={"rating": 2})
        client.delete(f"/movies/{movie}")
        assert client.get(f"/movies/{movie}/rating").status_code == 404
