"""Programming language endpoints."""

from fastapi import APIRouter, status

from curriculum.core.errors import CurriculumError
from curriculum.web.dependencies import get_roster, to_http_error
from curriculum.web.schemas import (
    LanguageCreate,
    LanguageListResponse,
    LanguageResponse,
)

router = APIRouter(prefix="/api/languages", tags=["languages"])


@router.get("", response_model=LanguageListResponse)
async def list_languages() -> LanguageListResponse:
    """List defined languages, sorted case-insensitively."""
    roster = get_roster()
    languages = [LanguageResponse(name=lang.name) for lang in roster.languages]
    return LanguageListResponse(languages=languages, count=len(languages))


@router.post("", response_model=LanguageResponse, status_code=status.HTTP_201_CREATED)
async def create_language(language_data: LanguageCreate) -> LanguageResponse:
    """Define a new language."""
    roster = get_roster()
    try:
        language = roster.add_language(language_data.name)
    except CurriculumError as e:
        raise to_http_error(e) from e
    return LanguageResponse(name=language.name)
