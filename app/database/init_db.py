"""
Seed the movie store from the bundled JSON data file.

The file is read once at start-up and never written back.
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from app.api.models.movie import Movie
from app.core.exceptions import SeedDataError
from app.database.store import MovieStore

logger = logging.getLogger(__name__)

_movie_list_adapter = TypeAdapter(List[Movie])


def load_movies(path: Union[str, Path]) -> List[Movie]:
    """
    Read and validate the movie seed file.

    Args:
        path: Path to a JSON array of movies

    Returns:
        List of Movie objects in file order

    Raises:
        SeedDataError: If the file is unreadable, not valid JSON, contains an
            invalid movie, or repeats an id
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SeedDataError(f"Cannot read movie seed file {path}: {e}") from e

    try:
        movies = _movie_list_adapter.validate_python(raw)
    except ValidationError as e:
        raise SeedDataError(f"Invalid movie seed file {path}: {e}") from e

    duplicates = [movie_id for movie_id, n in Counter(m.id for m in movies).items() if n > 1]
    if duplicates:
        raise SeedDataError(f"Duplicate movie ids in {path}: {', '.join(duplicates)}")

    logger.info("Loaded %d movies from %s", len(movies), path)
    return movies


def init_store(path: Union[str, Path]) -> MovieStore:
    """Create a MovieStore seeded from `path`."""
    return MovieStore(load_movies(path))
