"""Pydantic schemas for the Web API.

Serialization models for languages, profiles, comments and reports.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from curriculum.core.models import StudentProfile
from curriculum.core.reports import CommentEntry, ProfileDetail


# =============================================================================
# LANGUAGE SCHEMAS
# =============================================================================


class LanguageCreate(BaseModel):
    """Request body for defining a language."""

    name: str = Field(..., max_length=100)


class LanguageResponse(BaseModel):
    name: str


class LanguageListResponse(BaseModel):
    languages: list[LanguageResponse]
    count: int


# =============================================================================
# PROFILE SCHEMAS
# =============================================================================


class ProfileCreate(BaseModel):
    """Request body for creating or replacing a profile.

    Field rules (required fields, job details, flags) are checked by the
    roster so that the messages match the CLI.
    """

    full_name: str = Field(default="", max_length=200)
    academic_status: str = ""
    employed: bool = False
    job_details: str = ""
    programming_languages: list[str] = Field(default_factory=list)
    databases: list[str] = Field(default_factory=list)
    preferred_role: str = ""
    comments: list[str] | None = None
    whitelist: bool = False
    blacklist: bool = False


class ProfileResponse(BaseModel):
    """Response for a student profile."""

    full_name: str
    academic_status: str
    employed: bool
    job_details: str
    programming_languages: list[str]
    databases: list[str]
    preferred_role: str
    comments: list[str]
    whitelist: bool
    blacklist: bool

    model_config = {"from_attributes": True}

    @classmethod
    def from_profile(cls, profile: StudentProfile) -> "ProfileResponse":
        return cls.model_validate(profile)


class ProfileListResponse(BaseModel):
    profiles: list[ProfileResponse]
    count: int


class CommentCreate(BaseModel):
    """Request body for appending a comment."""

    text: str = Field(..., max_length=2000)


# =============================================================================
# REPORT SCHEMAS
# =============================================================================


class CommentEntryResponse(BaseModel):
    date: str
    preview: str
    full_text: str

    model_config = {"from_attributes": True}


class ProfileDetailResponse(BaseModel):
    """Detail of a student as shown from a report."""

    full_name: str
    academic_status: str
    job_status: str
    job_details: str
    languages: str
    databases: str
    preferred_role: str
    flag: str
    comments: list[CommentEntryResponse]

    @classmethod
    def from_detail(cls, detail: ProfileDetail) -> "ProfileDetailResponse":
        return cls(
            full_name=detail.full_name,
            academic_status=detail.academic_status,
            job_status=detail.job_status,
            job_details=detail.job_details,
            languages=detail.languages,
            databases=detail.databases,
            preferred_role=detail.preferred_role,
            flag=detail.flag,
            comments=[_comment_entry(c) for c in detail.comments],
        )


def _comment_entry(entry: CommentEntry) -> CommentEntryResponse:
    return CommentEntryResponse(
        date=entry.date, preview=entry.preview, full_text=entry.full_text
    )


class ReportResponse(BaseModel):
    kind: str
    profiles: list[ProfileResponse]
    count: int


# =============================================================================
# HEALTH
# =============================================================================


class HealthResponse(BaseModel):
    """Response for health check."""

    status: str
    version: str
    timestamp: str
