"""
Movie API endpoints.
"""

import logging
import uuid
from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from app.api.dependencies import get_movie_store
from app.api.models.movie import Message, Movie
from app.core.exceptions import InvalidMovieError, MovieNotFoundError
from app.core.validation import validate_movie, validate_partial_movie
from app.database import MovieStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=list[Movie])
def list_movies(
    genre: str | None = Query(None),
    store: MovieStore = Depends(get_movie_store),
):
    """List all movies, or those tagged with `genre` (case-insensitive)."""
    return store.filter_by_genre(genre)


@router.get("/{movie_id}", response_model=Movie)
def get_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)):
    """Get movie details by ID."""
    movie = store.find_by_id(movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


@router.post("", response_model=Movie, status_code=201)
def create_movie(
    payload: Any = Body(None),
    store: MovieStore = Depends(get_movie_store),
):
    """Create a movie with a server-assigned id."""
    result = validate_movie({} if payload is None else payload)
    if not result.success:
        raise InvalidMovieError(result.error["issues"])

    movie = Movie(id=str(uuid.uuid4()), **result.data)
    store.append(movie)
    logger.info("Created movie %s (%s)", movie.id, movie.title)
    return movie


@router.delete("/{movie_id}", response_model=Message)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)):
    """Delete a movie by ID."""
    if not store.remove_by_id(movie_id):
        raise MovieNotFoundError(movie_id)
    logger.info("Deleted movie %s", movie_id)
    return Message(message="Movie Deleted")


@router.patch("/{movie_id}", response_model=Movie)
def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    store: MovieStore = Depends(get_movie_store),
):
    """
    Apply a partial update to a movie.

    The body is checked before the id is looked up, so a bad body answers
    400 even for an unknown id. The merged record is revalidated as a whole
    before it replaces the stored one.
    """
    patch = validate_partial_movie({} if payload is None else payload)
    if not patch.success:
        raise InvalidMovieError(patch.error["issues"])

    with store.lock:
        existing = store.find_by_id(movie_id)
        if existing is None:
            raise MovieNotFoundError(movie_id)

        merged = validate_movie({**existing.model_dump(), **patch.data})
        if not merged.success:
            raise InvalidMovieError(merged.error["issues"])

        movie = Movie(id=existing.id, **merged.data)
        store.replace_at(movie_id, movie)

    if patch.data:
        logger.info("Updated movie %s: %s", movie_id, ", ".join(sorted(patch.data)))
    return movie
