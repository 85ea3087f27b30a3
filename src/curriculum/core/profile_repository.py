"""Flat-file persistence for student profiles.

Responsibilities:
- Load/save every profile from data/student-profiles.csv (see profile_codec
  for the record format)
- Keep records sorted by name (case-insensitive) on every load and save
- Delete and replace single records by name

Every operation reads or rewrites the whole file; there is no locking, so the
last writer wins.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from curriculum.core.errors import MalformedRecordError, StorageError
from curriculum.core.models import StudentProfile, name_key
from curriculum.core.profile_codec import (
    RecordDecodeError,
    decode_profile,
    encode_profile,
)

logger = structlog.get_logger(__name__)

DEFAULT_PROFILES_PATH = Path("data/student-profiles.csv")


def sort_profiles(profiles: list[StudentProfile]) -> list[StudentProfile]:
    """Return profiles sorted by full name, case-insensitive."""
    return sorted(profiles, key=lambda p: name_key(p.full_name))


class ProfileRepository:
    """Load, save, delete and replace stored student profiles.

    Args:
        storage_path: Location of the profile file.
        strict: If True, a malformed line aborts the load with
            MalformedRecordError. Otherwise the line is skipped and a warning
            is logged; the number of skipped lines is kept in last_skipped.
    """

    def __init__(self, storage_path: Path | None = None, strict: bool = False):
        self.storage_path = Path(storage_path or DEFAULT_PROFILES_PATH)
        self.strict = strict
        self.last_skipped = 0

    def load_all(self) -> list[StudentProfile]:
        """Load all stored profiles sorted alphabetically by name.

        Raises:
            StorageError: If the file cannot be read
            MalformedRecordError: In strict mode, on the first bad line
        """
        self.last_skipped = 0

        if not self.storage_path.exists():
            self._ensure_parent_directory()
            logger.debug("profiles_file_not_found", path=str(self.storage_path))
            return []

        try:
            text = self.storage_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("profiles_load_failed", path=str(self.storage_path), error=str(e))
            raise StorageError(
                "Unable to read stored student profiles", path=self.storage_path
            ) from e

        profiles: list[StudentProfile] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                profiles.append(decode_profile(line))
            except RecordDecodeError as e:
                if self.strict:
                    raise MalformedRecordError(self.storage_path, line_number, str(e)) from e
                self.last_skipped += 1
                logger.warning(
                    "profile_record_skipped",
                    path=str(self.storage_path),
                    line=line_number,
                    reason=str(e),
                )

        return sort_profiles(profiles)

    def save_all(self, profiles: list[StudentProfile]) -> Path:
        """Persist the given profiles, replacing any previously stored entries.

        Raises:
            StorageError: If the file cannot be written
        """
        self._ensure_parent_directory()
        content = "".join(f"{encode_profile(p)}\n" for p in sort_profiles(profiles))

        try:
            self.storage_path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error("profiles_save_failed", path=str(self.storage_path), error=str(e))
            raise StorageError(
                "Unable to save student profiles", path=self.storage_path
            ) from e

        logger.info("profiles_saved", path=str(self.storage_path), count=len(profiles))
        return self.storage_path

    def delete_by_name(self, full_name: str | None) -> bool:
        """Delete the profile whose name matches (case-insensitive).

        Returns:
            True if a profile was removed. The file is only rewritten then.
        """
        if not full_name or not full_name.strip():
            return False

        profiles = self.load_all()
        remaining = [p for p in profiles if not p.matches_name(full_name)]
        if len(remaining) == len(profiles):
            logger.info("profile_delete_not_found", name=full_name)
            return False

        self.save_all(remaining)
        logger.info("profile_deleted", name=full_name.strip())
        return True

    def update_profile(self, original_name: str, updated: StudentProfile) -> bool:
        """Replace the profile stored under original_name with updated.

        Returns False, without touching the file, when original_name no longer
        exists or when the new name belongs to a different stored profile.
        """
        if not original_name or not original_name.strip():
            return False

        profiles = self.load_all()
        index = next(
            (i for i, p in enumerate(profiles) if p.matches_name(original_name)),
            None,
        )
        if index is None:
            logger.warning("profile_update_missing_original", original_name=original_name)
            return False

        for i, profile in enumerate(profiles):
            if i != index and profile.matches_name(updated.full_name):
                logger.warning(
                    "profile_update_name_conflict",
                    original_name=original_name,
                    new_name=updated.full_name,
                )
                return False

        profiles[index] = updated
        self.save_all(profiles)
        logger.info(
            "profile_updated", original_name=original_name, name=updated.full_name
        )
        return True

    def _ensure_parent_directory(self) -> None:
        try:
            self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                "Unable to create data directory", path=self.storage_path.parent
            ) from e
