"""Whitelist/blacklist report endpoints."""

from fastapi import APIRouter, HTTPException, status

from curriculum.core.errors import CurriculumError
from curriculum.core.reports import ReportKind
from curriculum.web.dependencies import get_roster, to_http_error
from curriculum.web.schemas import (
    ProfileDetailResponse,
    ProfileResponse,
    ReportResponse,
)

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/{kind}", response_model=ReportResponse)
async def get_report(kind: ReportKind) -> ReportResponse:
    """Students flagged for the whitelist or blacklist."""
    flagged = get_roster().report(kind)
    return ReportResponse(
        kind=kind.value,
        profiles=[ProfileResponse.from_profile(p) for p in flagged],
        count=len(flagged),
    )


@router.get("/{kind}/{name:path}", response_model=ProfileDetailResponse)
async def get_report_detail(kind: ReportKind, name: str) -> ProfileDetailResponse:
    """Detail of a flagged student with parsed comment entries."""
    roster = get_roster()
    try:
        profile = roster.get_profile(name)
    except CurriculumError as e:
        raise to_http_error(e) from e

    if not kind.includes(profile):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{profile.full_name} is not on the {kind.value}",
        )
    return ProfileDetailResponse.from_detail(roster.detail(profile.full_name))
