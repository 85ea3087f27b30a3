"""Student profile endpoints."""

from fastapi import APIRouter, Query, status

from curriculum.core.errors import CurriculumError
from curriculum.core.roster import ProfileDraft
from curriculum.core.search import ProfileFilter
from curriculum.web.dependencies import get_roster, to_http_error
from curriculum.web.schemas import (
    CommentCreate,
    ProfileCreate,
    ProfileListResponse,
    ProfileResponse,
)

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


def _draft(profile_data: ProfileCreate) -> ProfileDraft:
    return ProfileDraft(**profile_data.model_dump())


def _list_response(profiles) -> ProfileListResponse:
    items = [ProfileResponse.from_profile(p) for p in profiles]
    return ProfileListResponse(profiles=items, count=len(items))


@router.get("", response_model=ProfileListResponse)
async def list_profiles() -> ProfileListResponse:
    """List all profiles, sorted by name."""
    return _list_response(get_roster().profiles)


# Registered before "/{name:path}": GET /search is always the filter endpoint.
@router.get("/search", response_model=ProfileListResponse)
async def search_profiles(
    name: str | None = None,
    academic_status: str | None = Query(None, alias="status"),
    language: str | None = None,
    database: str | None = None,
    role: str | None = None,
) -> ProfileListResponse:
    """Filter profiles; all given criteria must match."""
    profile_filter = ProfileFilter(
        name=name, status=academic_status, language=language, database=database, role=role
    )
    return _list_response(get_roster().search(profile_filter))


@router.get("/{name:path}", response_model=ProfileResponse)
async def get_profile(name: str) -> ProfileResponse:
    """Get a profile by name (case-insensitive)."""
    try:
        profile = get_roster().get_profile(name)
    except CurriculumError as e:
        raise to_http_error(e) from e
    return ProfileResponse.from_profile(profile)


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_profile(profile_data: ProfileCreate) -> ProfileResponse:
    """Create a new profile."""
    roster = get_roster()
    try:
        profile = roster.add_profile(_draft(profile_data))
    except CurriculumError as e:
        raise to_http_error(e) from e
    return ProfileResponse.from_profile(profile)


@router.put("/{name:path}", response_model=ProfileResponse)
async def update_profile(name: str, profile_data: ProfileCreate) -> ProfileResponse:
    """Replace the profile stored under name (rename allowed)."""
    roster = get_roster()
    try:
        profile = roster.update_profile(name, _draft(profile_data))
    except CurriculumError as e:
        raise to_http_error(e) from e
    return ProfileResponse.from_profile(profile)


@router.delete("/{name:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile(name: str) -> None:
    """Delete a profile by name."""
    roster = get_roster()
    try:
        roster.delete_profile(name)
    except CurriculumError as e:
        raise to_http_error(e) from e


@router.post(
    "/{name:path}/comments",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(name: str, comment: CommentCreate) -> ProfileResponse:
    """Append a comment stamped with today's date."""
    roster = get_roster()
    try:
        profile = roster.add_comment(name, comment.text)
    except CurriculumError as e:
        raise to_http_error(e) from e
    return ProfileResponse.from_profile(profile)
