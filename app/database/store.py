"""
In-memory movie store.

Holds the movie list for the lifetime of the process. Lookups are linear
scans over the list; every access takes the store lock because FastAPI runs
synchronous handlers on a thread pool.
"""

import threading
from typing import Iterable, List, Optional

from app.api.models.movie import Movie


class MovieStore:
    """
    Ordered, mutable collection of movies.

    `lock` is re-entrant so a handler can hold it across a lookup and a
    replace without deadlocking on the store's own locking.
    """

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = list(movies or [])
        self.lock = threading.RLock()

    def __len__(self) -> int:
        with self.lock:
            return len(self._movies)

    def all(self) -> List[Movie]:
        """Return a snapshot of every movie in insertion order."""
        with self.lock:
            return list(self._movies)

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        """
        Get a movie by ID.

        Args:
            movie_id: Movie ID

        Returns:
            Movie object or None if not found
        """
        with self.lock:
            return next((m for m in self._movies if m.id == movie_id), None)

    def filter_by_genre(self, genre: Optional[str] = None) -> List[Movie]:
        """
        Get movies tagged with a genre.

        Matching is case-insensitive and exact against each element of a
        movie's genre list. An empty or missing genre returns every movie.
        """
        if not genre:
            return self.all()
        wanted = genre.lower()
        with self.lock:
            return [m for m in self._movies if any(g.lower() == wanted for g in m.genre)]

    def append(self, movie: Movie) -> None:
        """Add a movie at the end. The caller guarantees a fresh id."""
        with self.lock:
            self._movies.append(movie)

    def remove_by_id(self, movie_id: str) -> bool:
        """
        Delete a movie by ID.

        Returns:
            True if a movie was removed, False if none matched
        """
        with self.lock:
            index = self._index_of(movie_id)
            if index is None:
                return False
            del self._movies[index]
            return True

    def replace_at(self, movie_id: str, movie: Movie) -> bool:
        """
        Overwrite the movie matching `movie_id`, keeping its position.

        Returns:
            True if a movie was replaced, False if none matched
        """
        with self.lock:
            index = self._index_of(movie_id)
            if index is None:
                return False
            self._movies[index] = movie
            return True

    def _index_of(self, movie_id: str) -> Optional[int]:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None
