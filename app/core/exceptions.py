"""
Domain exceptions for the movies service.
"""


class MovieError(Exception):
    pass


class MovieNotFoundError(MovieError):
    """Raised when no movie in the store has the requested id."""

    def __init__(self, movie_id: str):
        super().__init__(f"Movie {movie_id} not found")
        self.movie_id = movie_id


class InvalidMovieError(MovieError):
    """Raised when a request body fails schema validation."""

    def __init__(self, issues: list[dict]):
        super().__init__(f"{len(issues)} validation issue(s)")
        self.issues = issues


class SeedDataError(MovieError):
    pass
