"""File-backed persistence for programming language definitions.

Entries are stored one per line (UTF-8) in data/programming-languages.csv,
sorted case-insensitively on every load and save.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from curriculum.core.errors import StorageError
from curriculum.core.models import ProgrammingLanguage, name_key

logger = structlog.get_logger(__name__)

DEFAULT_LANGUAGES_PATH = Path("data/programming-languages.csv")


class LanguageRepository:
    """Load and save the full list of language names."""

    def __init__(self, storage_path: Path | None = None):
        self.storage_path = Path(storage_path or DEFAULT_LANGUAGES_PATH)

    def load_all(self) -> list[ProgrammingLanguage]:
        """Load all stored languages, sorted case-insensitively.

        Returns:
            List of languages (empty when the file does not exist yet)

        Raises:
            StorageError: If the file cannot be read
        """
        if not self.storage_path.exists():
            self._ensure_parent_directory()
            logger.debug("languages_file_not_found", path=str(self.storage_path))
            return []

        try:
            text = self.storage_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("languages_load_failed", path=str(self.storage_path), error=str(e))
            raise StorageError(
                "Unable to read stored programming languages", path=self.storage_path
            ) from e

        names = [line.strip() for line in text.splitlines()]
        names = sorted((n for n in names if n), key=name_key)
        return [ProgrammingLanguage(name) for name in names]

    def save_all(self, languages: list[ProgrammingLanguage]) -> Path:
        """Overwrite the file with the given languages.

        Duplicates are not removed here; callers are expected to dedupe.

        Raises:
            StorageError: If the file cannot be written
        """
        self._ensure_parent_directory()
        names = [lang.name.strip() for lang in languages]
        names = sorted((n for n in names if n), key=name_key)
        content = "".join(f"{name}\n" for name in names)

        try:
            self.storage_path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error("languages_save_failed", path=str(self.storage_path), error=str(e))
            raise StorageError(
                "Unable to save programming languages", path=self.storage_path
            ) from e

        logger.info("languages_saved", path=str(self.storage_path), count=len(names))
        return self.storage_path

    def _ensure_parent_directory(self) -> None:
        try:
            self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                "Unable to create data directory", path=self.storage_path.parent
            ) from e
