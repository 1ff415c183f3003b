"""
Core movie logic: domain errors and schema validation.

This package contains the pieces that do not depend on the HTTP layer:
- Domain exceptions raised by handlers and the seed loader
- Full and partial movie validation returning structured results
"""

from app.core.exceptions import MovieError, MovieNotFoundError, InvalidMovieError, SeedDataError
from app.core.validation import ValidationResult, validate_movie, validate_partial_movie

__all__ = [
    'MovieError',
    'MovieNotFoundError',
    'InvalidMovieError',
    'SeedDataError',
    'ValidationResult',
    'validate_movie',
    'validate_partial_movie',
]
