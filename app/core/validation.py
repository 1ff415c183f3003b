"""
Movie payload validation.

Wraps the pydantic schemas in `app.api.models.movie` so callers get a
result object instead of an exception. Every violation in a payload is
reported at once, each as a machine-readable code, the path of the
offending field and a human-readable message.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ValidationError

from app.api.models.movie import MovieCreate, MovieUpdate


@dataclass
class ValidationResult:
    """Outcome of validating a candidate movie."""

    success: bool
    data: Optional[dict] = None
    error: Optional[dict] = None


def format_issues(errors: Iterable[dict]) -> list[dict]:
    """
    Convert pydantic error dicts into API issues.

    Args:
        errors: Output of `ValidationError.errors()` or
            `RequestValidationError.errors()`

    Returns:
        List of {"code", "path", "message"} dicts
    """
    return [
        {
            "code": err["type"],
            "path": list(err["loc"]),
            "message": err["msg"],
        }
        for err in errors
    ]


def _validate(model: type[BaseModel], candidate: Any, **dump_kwargs) -> ValidationResult:
    try:
        parsed = model.model_validate(candidate)
    except ValidationError as e:
        issues = format_issues(e.errors(include_url=False))
        return ValidationResult(success=False, error={"issues": issues})
    return ValidationResult(success=True, data=parsed.model_dump(**dump_kwargs))


def validate_movie(candidate: Any) -> ValidationResult:
    """
    Validate a complete movie (without id).

    Args:
        candidate: Decoded JSON body

    Returns:
        ValidationResult with every field in `data`, `rate` defaulted to 0
    """
    return _validate(MovieCreate, candidate)


def validate_partial_movie(candidate: Any) -> ValidationResult:
    """
    Validate a partial movie used to patch an existing record.

    Only the fields present in `candidate` end up in `data`; an empty
    object is valid and yields an empty update.
    """
    return _validate(MovieUpdate, candidate, exclude_unset=True)
