"""Shared helpers for route handlers."""

from fastapi import HTTPException, status

from curriculum.config.app_config import load_app_config
from curriculum.core.errors import (
    CurriculumError,
    DuplicateNameError,
    ProfileNotFoundError,
    ProfileUpdateError,
    StorageError,
    ValidationError,
)
from curriculum.core.roster import Roster


def get_roster() -> Roster:
    """Load a fresh roster from disk for each request."""
    try:
        return Roster.from_config(load_app_config())
    except StorageError as e:
        raise to_http_error(e) from e


def to_http_error(error: CurriculumError) -> HTTPException:
    """Map a domain error to an HTTP error response."""
    if isinstance(error, StorageError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{error}. Please try again.",
        )
    if isinstance(error, (DuplicateNameError, ProfileUpdateError)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, ProfileNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
