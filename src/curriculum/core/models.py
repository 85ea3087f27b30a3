"""Domain records: programming languages and student profiles."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Stamped comments look like "2025-10-24 - note"
COMMENT_DATE_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2}) - (.*)$", re.DOTALL)


def name_key(name: str) -> str:
    """Sort/identity key for names (case-insensitive)."""
    return name.casefold()


@dataclass(frozen=True)
class ProgrammingLanguage:
    """A language entry from the define-languages form."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class StudentProfile:
    """A student profile as captured by the profile forms."""

    full_name: str
    academic_status: str
    employed: bool = False
    job_details: str = ""
    programming_languages: list[str] = field(default_factory=list)
    databases: list[str] = field(default_factory=list)
    preferred_role: str = ""
    comments: list[str] = field(default_factory=list)
    whitelist: bool = False
    blacklist: bool = False

    def matches_name(self, name: str) -> bool:
        """Case-insensitive identity check against a (trimmed) name."""
        return name_key(self.full_name) == name_key(name.strip())

    @property
    def job_status_label(self) -> str:
        return "Employed" if self.employed else "Not Employed"

    @property
    def job_details_display(self) -> str:
        """Job details for tables; "N/A" for students without a job."""
        if not self.job_details or not self.job_details.strip():
            return "" if self.employed else "N/A"
        return self.job_details

    @property
    def flag_label(self) -> str:
        if self.whitelist:
            return "Whitelist"
        if self.blacklist:
            return "Blacklist"
        return ""

    @property
    def whitelist_label(self) -> str:
        return "Yes" if self.whitelist else "No"

    @property
    def blacklist_label(self) -> str:
        return "Yes" if self.blacklist else "No"

    def format_languages(self) -> str:
        return ", ".join(self.programming_languages)

    def format_databases(self) -> str:
        return ", ".join(self.databases)

    def format_comments(self) -> str:
        """Join comments one per line, with a blank line between different days."""
        lines: list[str] = []
        previous_date = None
        for comment in self.comments:
            if not comment or not comment.strip():
                continue

            match = COMMENT_DATE_PATTERN.match(comment)
            date_prefix = match.group(1) if match else None

            if previous_date and date_prefix and date_prefix != previous_date:
                lines.append("")
            lines.append(comment)

            if date_prefix:
                previous_date = date_prefix

        return "\n".join(lines)
