"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import GENRES, Message, Movie, MovieCreate, MovieUpdate

__all__ = [
    "GENRES",
    "Message",
    "Movie",
    "MovieCreate",
    "MovieUpdate",
]
