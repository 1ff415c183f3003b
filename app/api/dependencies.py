"""
FastAPI dependency injection for the movie store.
"""

import logging
import threading

from app.api.config import get_movies_path
from app.database import MovieStore, init_store

logger = logging.getLogger(__name__)

# Singleton movie store, seeded on first use
_movie_store: MovieStore | None = None
_movie_store_lock = threading.Lock()


def get_movie_store() -> MovieStore:
    """Get or create the process-wide MovieStore."""
    global _movie_store
    with _movie_store_lock:
        if _movie_store is None:
            path = get_movies_path()
            _movie_store = init_store(path)
            logger.info("Movie store seeded from %s (%d movies)", path, len(_movie_store))
    return _movie_store
