"""Whitelist/blacklist reports and per-student detail views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from curriculum.core.models import COMMENT_DATE_PATTERN, StudentProfile
from curriculum.core.profile_repository import sort_profiles

PREVIEW_LENGTH = 90


class ReportKind(str, Enum):
    """Which flagged list to show."""

    WHITELIST = "whitelist"
    BLACKLIST = "blacklist"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def includes(self, profile: StudentProfile) -> bool:
        if self is ReportKind.WHITELIST:
            return profile.whitelist
        return profile.blacklist


def build_report(profiles: list[StudentProfile], kind: ReportKind) -> list[StudentProfile]:
    """Profiles flagged for the given report, sorted by name."""
    return sort_profiles([p for p in profiles if kind.includes(p)])


def truncate_preview(text: str, max_len: int = PREVIEW_LENGTH) -> str:
    """Shorten text to max_len characters, ending in "..." when cut."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


@dataclass
class CommentEntry:
    """A stored comment split into its date stamp and a short preview."""

    date: str
    preview: str
    full_text: str

    @classmethod
    def from_stored(cls, stored: str | None, preview_length: int = PREVIEW_LENGTH) -> "CommentEntry":
        full_text = stored or ""
        date = ""
        body = full_text

        match = COMMENT_DATE_PATTERN.match(full_text)
        if match:
            date = match.group(1)
            body = match.group(2).strip()

        return cls(date=date, preview=truncate_preview(body, preview_length), full_text=full_text)


@dataclass
class ProfileDetail:
    """Read-only detail of a profile, as shown from a report."""

    full_name: str
    academic_status: str
    job_status: str
    job_details: str
    languages: str
    databases: str
    preferred_role: str
    flag: str
    comments: list[CommentEntry] = field(default_factory=list)

    @classmethod
    def from_profile(
        cls, profile: StudentProfile, preview_length: int = PREVIEW_LENGTH
    ) -> "ProfileDetail":
        entries = [
            CommentEntry.from_stored(c, preview_length)
            for c in profile.comments
            if c and c.strip()
        ]
        return cls(
            full_name=profile.full_name,
            academic_status=profile.academic_status,
            job_status=profile.job_status_label,
            job_details=profile.job_details_display,
            languages=profile.format_languages(),
            databases=profile.format_databases(),
            preferred_role=profile.preferred_role,
            flag=profile.flag_label,
            comments=entries,
        )
