"""Roster: the in-memory state behind every presentation layer.

Holds the loaded languages and profiles, validates form input before any
persistence attempt, and applies the create/edit/comment/delete flows.
A failed save rolls the in-memory lists back to their previous content.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Callable

import structlog

from curriculum.config.app_config import AppConfig, OptionsConfig, load_app_config
from curriculum.core.errors import (
    DuplicateNameError,
    ProfileNotFoundError,
    ProfileUpdateError,
    StorageError,
    ValidationError,
)
from curriculum.core.language_repository import LanguageRepository
from curriculum.core.models import ProgrammingLanguage, StudentProfile, name_key
from curriculum.core.profile_repository import ProfileRepository, sort_profiles
from curriculum.core.reports import ProfileDetail, ReportKind, build_report
from curriculum.core.search import ProfileFilter, filter_profiles

logger = structlog.get_logger(__name__)

COMMENT_DATE_FORMAT = "%Y-%m-%d"


@dataclass
class ProfileDraft:
    """Raw values from a create/edit form, before validation.

    comments=None on an edit keeps the stored comments unchanged.
    """

    full_name: str = ""
    academic_status: str = ""
    employed: bool = False
    job_details: str = ""
    programming_languages: list[str] = field(default_factory=list)
    databases: list[str] = field(default_factory=list)
    preferred_role: str = ""
    comments: list[str] | None = None
    whitelist: bool = False
    blacklist: bool = False


def stamp_comment(text: str, today: date) -> str:
    """Prefix a comment with its date, e.g. "2025-01-01 - Great work"."""
    return f"{today.strftime(COMMENT_DATE_FORMAT)} - {text}"


def sanitize_comment(text: str | None) -> str:
    """Collapse line breaks and runs of whitespace into single spaces."""
    return " ".join((text or "").split())


def _dedupe(values: list[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for value in values:
        value = value.strip()
        if value and name_key(value) not in seen:
            seen.add(name_key(value))
            result.append(value)
    return result


def _canonical(value: str, choices: list[str]) -> str | None:
    """Return the configured spelling of value, or None if not offered."""
    key = name_key(value.strip())
    for choice in choices:
        if name_key(choice) == key:
            return choice
    return None


class Roster:
    """Languages and profiles loaded from disk, plus the form rules."""

    def __init__(
        self,
        language_repository: LanguageRepository,
        profile_repository: ProfileRepository,
        options: OptionsConfig | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.language_repository = language_repository
        self.profile_repository = profile_repository
        self.options = options or OptionsConfig()
        self.today = today
        self.languages: list[ProgrammingLanguage] = []
        self.profiles: list[StudentProfile] = []

    @classmethod
    def from_config(cls, config: AppConfig | None = None) -> "Roster":
        """Build a roster over the configured data files and load them."""
        config = config or load_app_config()
        roster = cls(
            LanguageRepository(config.storage.languages_path),
            ProfileRepository(
                config.storage.profiles_path, strict=config.storage.strict_records
            ),
            options=config.options,
        )
        roster.refresh()
        return roster

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def refresh(self) -> None:
        self.refresh_languages()
        self.refresh_profiles()

    def refresh_languages(self) -> list[ProgrammingLanguage]:
        self.languages = self.language_repository.load_all()
        return self.languages

    def refresh_profiles(self) -> list[StudentProfile]:
        self.profiles = self.profile_repository.load_all()
        return self.profiles

    @property
    def language_names(self) -> list[str]:
        return [lang.name for lang in self.languages]

    # -------------------------------------------------------------------------
    # Languages
    # -------------------------------------------------------------------------

    def add_language(self, name: str | None) -> ProgrammingLanguage:
        """Validate and store a new language.

        Raises:
            ValidationError: Blank name, or a name spanning several lines
            DuplicateNameError: Name already defined (case-insensitive)
            StorageError: Save failed; the in-memory list is unchanged
        """
        entered = (name or "").strip()
        if not entered:
            raise ValidationError("Language name is required.", field="name")
        if entered.splitlines() != [entered]:
            raise ValidationError("Language name must be a single line.", field="name")

        if any(name_key(lang.name) == name_key(entered) for lang in self.languages):
            raise DuplicateNameError("Language already exists.", field="name")

        language = ProgrammingLanguage(entered)
        previous = list(self.languages)
        self.languages = sorted([*self.languages, language], key=lambda lang: name_key(lang.name))

        try:
            self.language_repository.save_all(self.languages)
        except StorageError:
            self.languages = previous
            raise

        logger.info("language_added", name=entered)
        return language

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    def find_profile(self, name: str | None) -> StudentProfile | None:
        if not name or not name.strip():
            return None
        for profile in self.profiles:
            if profile.matches_name(name):
                return profile
        return None

    def get_profile(self, name: str | None) -> StudentProfile:
        profile = self.find_profile(name)
        if profile is None:
            raise ProfileNotFoundError(name or "")
        return profile

    def build_profile(
        self,
        draft: ProfileDraft,
        existing: StudentProfile | None = None,
    ) -> StudentProfile:
        """Validate form input and build the profile to store.

        Checks run in form order and the first failure is raised as a
        ValidationError. When editing, languages already on the existing
        profile stay selectable even if they are no longer defined.
        """
        full_name = (draft.full_name or "").strip()
        if not full_name:
            raise ValidationError("Full Name is required.", field="full_name")

        status = (draft.academic_status or "").strip()
        if not status:
            raise ValidationError("Select the academic status.", field="academic_status")
        academic_status = _canonical(status, self.options.academic_statuses)
        if academic_status is None:
            raise ValidationError(
                f"Unknown academic status: {status}.", field="academic_status"
            )

        job_details = (draft.job_details or "").strip() if draft.employed else ""
        if draft.employed and not job_details:
            raise ValidationError(
                "Provide job details for employed students.", field="job_details"
            )

        offered_languages = list(self.language_names)
        if existing is not None:
            offered_languages.extend(existing.programming_languages)
        languages = _dedupe(draft.programming_languages or [])
        if not languages:
            raise ValidationError(
                "Select at least one programming language.",
                field="programming_languages",
            )
        canonical_languages = []
        for lang in languages:
            match = _canonical(lang, offered_languages)
            if match is None:
                raise ValidationError(
                    f"Unknown programming language: {lang}. Define it first.",
                    field="programming_languages",
                )
            canonical_languages.append(match)

        databases = _dedupe(draft.databases or [])
        if not databases:
            raise ValidationError("Select at least one database.", field="databases")
        canonical_databases = []
        for db in databases:
            match = _canonical(db, self.options.database_options)
            if match is None:
                raise ValidationError(f"Unknown database: {db}.", field="databases")
            canonical_databases.append(match)

        role = (draft.preferred_role or "").strip()
        if not role:
            raise ValidationError(
                "Select the preferred professional role.", field="preferred_role"
            )
        preferred_role = _canonical(role, self.options.preferred_roles)
        if preferred_role is None:
            raise ValidationError(f"Unknown role: {role}.", field="preferred_role")

        if draft.whitelist and draft.blacklist:
            raise ValidationError(
                "Choose either whitelist or blacklist, not both.", field="whitelist"
            )

        if draft.comments is not None:
            comments = [c.strip() for c in draft.comments if c and c.strip()]
        elif existing is not None:
            comments = list(existing.comments)
        else:
            comments = []

        return StudentProfile(
            full_name=full_name,
            academic_status=academic_status,
            employed=draft.employed,
            job_details=job_details,
            programming_languages=canonical_languages,
            databases=canonical_databases,
            preferred_role=preferred_role,
            comments=comments,
            whitelist=draft.whitelist,
            blacklist=draft.blacklist,
        )

    def add_profile(self, draft: ProfileDraft) -> StudentProfile:
        """Validate and store a new profile.

        Raises:
            ValidationError / DuplicateNameError: Rejected input
            StorageError: Save failed; the in-memory list is unchanged
        """
        profile = self.build_profile(draft)
        if self.find_profile(profile.full_name) is not None:
            raise DuplicateNameError(
                "A profile with this name already exists.", field="full_name"
            )

        previous = list(self.profiles)
        self.profiles = sort_profiles([*self.profiles, profile])

        try:
            self.profile_repository.save_all(self.profiles)
        except StorageError:
            self.profiles = previous
            raise

        logger.info("profile_added", name=profile.full_name)
        return profile

    def update_profile(self, original_name: str, draft: ProfileDraft) -> StudentProfile:
        """Replace the profile stored under original_name.

        Raises:
            ProfileNotFoundError: original_name is not loaded
            ValidationError: Rejected input
            ProfileUpdateError: The record vanished from storage or the new
                name belongs to another profile
        """
        existing = self.get_profile(original_name)
        updated = self.build_profile(draft, existing=existing)
        return self._replace(existing.full_name, updated)

    def stamped_comment(self, text: str | None) -> str:
        """Sanitize a comment and prefix it with today's date."""
        comment = sanitize_comment(text)
        if not comment:
            raise ValidationError("Enter a comment before saving.", field="comment")
        return stamp_comment(comment, self.today())

    def add_comment(self, name: str, text: str | None) -> StudentProfile:
        """Append a date-stamped comment to a profile and persist it."""
        profile = self.get_profile(name)
        stamped = self.stamped_comment(text)
        updated = replace(profile, comments=[*profile.comments, stamped])
        return self._replace(profile.full_name, updated)

    def delete_profile(self, name: str) -> None:
        """Delete a stored profile by name.

        Raises:
            ProfileNotFoundError: No stored profile has that name
        """
        if not self.profile_repository.delete_by_name(name):
            raise ProfileNotFoundError(name)
        self.refresh_profiles()

    def _replace(self, original_name: str, updated: StudentProfile) -> StudentProfile:
        if not self.profile_repository.update_profile(original_name, updated):
            raise ProfileUpdateError(
                "Unable to update profile. Ensure the name is unique and the "
                "original record still exists."
            )
        self.refresh_profiles()
        return updated

    # -------------------------------------------------------------------------
    # Search and reports
    # -------------------------------------------------------------------------

    def search(self, profile_filter: ProfileFilter | None = None) -> list[StudentProfile]:
        return filter_profiles(self.profiles, profile_filter)

    def report(self, kind: ReportKind) -> list[StudentProfile]:
        return build_report(self.profiles, kind)

    def detail(self, name: str) -> ProfileDetail:
        return ProfileDetail.from_profile(
            self.get_profile(name), self.options.comment_preview_length
        )
