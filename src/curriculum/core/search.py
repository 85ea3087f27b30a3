"""Search filters over loaded student profiles.

All criteria are AND-composed. A blank or missing criterion matches
everything:
- name: case-insensitive substring
- status / role: exact, case-insensitive
- language / database: case-insensitive membership in the profile's list
"""

from __future__ import annotations

from dataclasses import dataclass

from curriculum.core.models import StudentProfile, name_key
from curriculum.core.profile_repository import sort_profiles


def _clean(value: str | None) -> str:
    return value.strip() if value else ""


@dataclass
class ProfileFilter:
    """Search criteria as entered in the search form."""

    name: str | None = None
    status: str | None = None
    language: str | None = None
    database: str | None = None
    role: str | None = None

    def is_empty(self) -> bool:
        return not any(
            _clean(v)
            for v in (self.name, self.status, self.language, self.database, self.role)
        )

    def matches(self, profile: StudentProfile) -> bool:
        return (
            matches_name(profile.full_name, self.name)
            and matches_single_value(profile.academic_status, self.status)
            and matches_collection(profile.programming_languages, self.language)
            and matches_collection(profile.databases, self.database)
            and matches_single_value(profile.preferred_role, self.role)
        )


def matches_name(candidate: str, query: str | None) -> bool:
    query = _clean(query)
    if not query:
        return True
    return name_key(query) in name_key(candidate or "")


def matches_single_value(candidate: str | None, query: str | None) -> bool:
    query = _clean(query)
    if not query:
        return True
    return candidate is not None and name_key(candidate) == name_key(query)


def matches_collection(values: list[str], query: str | None) -> bool:
    query = _clean(query)
    if not query:
        return True
    key = name_key(query)
    return any(name_key(v) == key for v in values)


def filter_profiles(
    profiles: list[StudentProfile], profile_filter: ProfileFilter | None = None
) -> list[StudentProfile]:
    """Return the profiles matching every criterion, sorted by name."""
    if profile_filter is None:
        return sort_profiles(profiles)
    return sort_profiles([p for p in profiles if profile_filter.matches(p)])
