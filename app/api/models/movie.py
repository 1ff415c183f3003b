"""
Pydantic schemas for Movie API.

Each field's rules are declared once as an annotated type and shared by the
create, update and stored shapes.
"""

from datetime import date
from typing import Annotated, Literal, get_args

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

Genre = Literal[
    "Action",
    "Adventure",
    "Animation",
    "Biography",
    "Comedy",
    "Crime",
    "Drama",
    "Fantasy",
    "Horror",
    "Romance",
    "Sci-Fi",
    "Thriller",
]
GENRES: tuple[str, ...] = get_args(Genre)

MIN_YEAR = 1900

_url_adapter = TypeAdapter(AnyUrl)


def _check_year(year: int) -> int:
    latest = date.today().year + 1
    if year > latest:
        raise ValueError(f"Year must be at most {latest}")
    return year


def _check_poster(poster: str) -> str:
    try:
        _url_adapter.validate_python(poster)
    except ValidationError:
        raise ValueError("Poster must be a valid URL")
    return poster


Title = Annotated[str, Field(min_length=1, strict=True)]
Year = Annotated[int, Field(ge=MIN_YEAR, strict=True), AfterValidator(_check_year)]
Director = Annotated[str, Field(min_length=1, strict=True)]
Duration = Annotated[int, Field(gt=0, strict=True)]
Rate = Annotated[float, Field(ge=0, le=10, strict=True)]
Poster = Annotated[str, Field(strict=True), AfterValidator(_check_poster)]
Genres = Annotated[list[Genre], Field(min_length=1, strict=True)]


class MovieCreate(BaseModel):
    """Request body for creating a movie. Unknown keys, `id` included, are dropped."""

    model_config = ConfigDict(extra="ignore")

    title: Title
    year: Year
    director: Director
    duration: Duration
    rate: Rate = 0
    poster: Poster
    genre: Genres


class MovieUpdate(BaseModel):
    """Request body for patching a movie (all fields optional, no unknown keys)."""

    model_config = ConfigDict(extra="forbid")

    title: Title | None = None
    year: Year | None = None
    director: Director | None = None
    duration: Duration | None = None
    rate: Rate | None = None
    poster: Poster | None = None
    genre: Genres | None = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Omitting a field leaves it unchanged; sending null is an error.
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value


class Movie(BaseModel):
    """A stored movie, as returned by the API."""

    id: str
    title: Title
    year: Year
    director: Director
    duration: Duration
    rate: Rate = 0
    poster: Poster
    genre: Genres


class Message(BaseModel):
    message: str
