"""
Storage module for the movies service.

This module provides the in-memory movie store and the loader that seeds it
from the bundled JSON data file.
"""

from app.database.store import MovieStore
from app.database.init_db import init_store, load_movies

__all__ = [
    'MovieStore',
    'init_store',
    'load_movies',
]
