"""
FastAPI application entry point for the Movies API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.config import get_allowed_origins
from app.api.cors import install_cors
from app.api.dependencies import get_movie_store
from app.api.models.movie import Message
from app.api.routers import movies
from app.core.exceptions import InvalidMovieError, MovieNotFoundError
from app.core.validation import format_issues

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Seed eagerly so a broken data file fails start-up, not the first request.
    store = get_movie_store()
    logger.info("Serving %d movies", len(store))
    yield


app = FastAPI(
    title="Movies API",
    description="CRUD over an in-memory movie list",
    version="1.0.0",
    lifespan=lifespan,
)

install_cors(app, get_allowed_origins())

app.include_router(movies.router)


@app.exception_handler(MovieNotFoundError)
async def movie_not_found_handler(request: Request, exc: MovieNotFoundError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=404, content={"message": "Movie Not Found"})


@app.exception_handler(InvalidMovieError)
async def invalid_movie_handler(request: Request, exc: InvalidMovieError):
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"issues": exc.issues})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors like any other bad payload."""
    return JSONResponse(status_code=400, content={"issues": format_issues(exc.errors())})


@app.get("/", response_model=Message)
def root():
    """Root endpoint."""
    return {"message": "Hello World"}
