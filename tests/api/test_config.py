"""
Tests for environment configuration and the store dependency.
"""

from pathlib import Path

from app.api import config
from app.api.dependencies import get_movie_store


class TestConfig:
    """Tests for app.api.config getters."""

    def test_port_default(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert config.get_api_port() == 1234

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert config.get_api_port() == 8080

    def test_movies_path_default(self, monkeypatch):
        monkeypatch.delenv("MOVIES_PATH", raising=False)
        path = Path(config.get_movies_path())
        assert path.name == "movies.json"
        assert path.parent.name == "data"

    def test_movies_path_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MOVIES_PATH", str(tmp_path / "seed.json"))
        assert config.get_movies_path() == str(tmp_path / "seed.json")

    def test_allowed_origins_default(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        assert config.get_allowed_origins() == list(config.DEFAULT_ALLOWED_ORIGINS)

    def test_allowed_origins_from_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://movies.example, http://localhost:5173 ,")
        assert config.get_allowed_origins() == ["https://movies.example", "http://localhost:5173"]

    def test_log_settings(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.delenv("LOG_FILE", raising=False)
        assert config.get_log_level() == "DEBUG"
        assert config.get_log_file() is None


class TestMovieStoreDependency:
    """get_movie_store seeds once from the bundled file."""

    def test_singleton(self):
        first = get_movie_store()
        assert get_movie_store() is first
        assert len(first) > 0
