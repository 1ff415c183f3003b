"""
Unit tests for seeding the store from a JSON file.
"""

import json

import pytest

from app.api.config import get_movies_path
from app.core.exceptions import SeedDataError
from app.database import init_store, load_movies


@pytest.fixture
def movie_record():
    return {
        "id": "a1",
        "title": "Up",
        "year": 2009,
        "director": "Pete Docter",
        "duration": 96,
        "poster": "https://example.com/up.jpg",
        "genre": ["Animation"],
        "rate": 7.7,
    }


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadMovies:
    """Tests for load_movies and init_store."""

    def test_load_valid_file(self, tmp_path, movie_record):
        path = write_json(tmp_path / "movies.json", [movie_record])
        movies = load_movies(path)
        assert len(movies) == 1
        assert movies[0].id == "a1"
        assert movies[0].genre == ["Animation"]

    def test_rate_optional_in_seed(self, tmp_path, movie_record):
        del movie_record["rate"]
        movies = load_movies(write_json(tmp_path / "movies.json", [movie_record]))
        assert movies[0].rate == 0

    def test_init_store(self, tmp_path, movie_record):
        store = init_store(write_json(tmp_path / "movies.json", [movie_record]))
        assert len(store) == 1
        assert store.find_by_id("a1").title == "Up"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedDataError):
            load_movies(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "movies.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(SeedDataError):
            load_movies(path)

    def test_not_a_list(self, tmp_path, movie_record):
        with pytest.raises(SeedDataError):
            load_movies(write_json(tmp_path / "movies.json", movie_record))

    def test_invalid_record(self, tmp_path, movie_record):
        movie_record["genre"] = ["Documentary"]
        with pytest.raises(SeedDataError):
            load_movies(write_json(tmp_path / "movies.json", [movie_record]))

    def test_duplicate_ids(self, tmp_path, movie_record):
        with pytest.raises(SeedDataError, match="a1"):
            load_movies(write_json(tmp_path / "movies.json", [movie_record, movie_record]))

    def test_bundled_data_file(self):
        """The shipped data/movies.json is valid and has unique ids."""
        movies = load_movies(get_movies_path())
        assert len(movies) > 0
        assert len({m.id for m in movies}) == len(movies)
