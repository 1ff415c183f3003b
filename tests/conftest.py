"""
Shared fixtures: a fresh movie store per test and a client wired to it.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_movie_store
from app.api.main import app
from app.api.models.movie import Movie
from app.database import MovieStore


@pytest.fixture
def seed_movies():
    """Three movies with known ids and genres."""
    return [
        Movie(
            id="a1",
            title="Up",
            year=2009,
            director="Pete Docter",
            duration=96,
            poster="https://example.com/up.jpg",
            genre=["Animation"],
            rate=7.7,
        ),
        Movie(
            id="b2",
            title="The Godfather",
            year=1972,
            director="Francis Ford Coppola",
            duration=175,
            poster="https://example.com/godfather.jpg",
            genre=["Crime", "Drama"],
            rate=9.2,
        ),
        Movie(
            id="c3",
            title="Forrest Gump",
            year=1994,
            director="Robert Zemeckis",
            duration=142,
            poster="https://example.com/gump.jpg",
            genre=["Drama", "Romance"],
            rate=8.8,
        ),
    ]


@pytest.fixture
def store(seed_movies):
    return MovieStore(seed_movies)


@pytest.fixture
def client(store):
    """TestClient whose requests read and mutate `store`."""
    app.dependency_overrides[get_movie_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def new_movie_payload():
    return {
        "title": "Inception",
        "year": 2010,
        "director": "Christopher Nolan",
        "duration": 148,
        "poster": "https://example.com/inception.jpg",
        "genre": ["Action", "Sci-Fi"],
        "rate": 8.8,
    }
