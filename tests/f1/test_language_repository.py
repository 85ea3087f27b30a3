"""Tests for LanguageRepository (F1)."""

import pytest

from curriculum.core.errors import StorageError
from curriculum.core.language_repository import LanguageRepository
from curriculum.core.models import ProgrammingLanguage


class TestLoadAll:
    """Tests for LanguageRepository.load_all."""

    def test_missing_file_returns_empty_and_creates_dir(self, languages_path):
        """Missing file gives an empty list and creates data/."""
        repo = LanguageRepository(languages_path)
        assert repo.load_all() == []
        assert languages_path.parent.is_dir()
        assert not languages_path.exists()

    def test_skips_blank_lines_and_trims(self, languages_path):
        languages_path.parent.mkdir(parents=True)
        languages_path.write_text("  Python  \n\n   \nJava\n", encoding="utf-8")

        names = [lang.name for lang in LanguageRepository(languages_path).load_all()]
        assert names == ["Java", "Python"]

    def test_sorted_case_insensitively(self, languages_path):
        languages_path.parent.mkdir(parents=True)
        languages_path.write_text("rust\nC\ngo\nAda\n", encoding="utf-8")

        names = [lang.name for lang in LanguageRepository(languages_path).load_all()]
        assert names == ["Ada", "C", "go", "rust"]

    def test_unreadable_file_raises_storage_error(self, languages_path):
        """A path that cannot be read as a file is wrapped in StorageError."""
        languages_path.mkdir(parents=True)

        with pytest.raises(StorageError) as exc_info:
            LanguageRepository(languages_path).load_all()
        assert exc_info.value.__cause__ is not None


class TestSaveAll:
    """Tests for LanguageRepository.save_all."""

    def test_writes_sorted_one_per_line(self, languages_path):
        repo = LanguageRepository(languages_path)
        repo.save_all([ProgrammingLanguage("Python"), ProgrammingLanguage("java")])

        assert languages_path.read_text(encoding="utf-8") == "java\nPython\n"

    def test_overwrites_previous_content(self, languages_path):
        repo = LanguageRepository(languages_path)
        repo.save_all([ProgrammingLanguage("Python"), ProgrammingLanguage("Java")])
        repo.save_all([ProgrammingLanguage("Kotlin")])

        assert [lang.name for lang in repo.load_all()] == ["Kotlin"]

    def test_does_not_dedupe(self, languages_path):
        """Deduplication is the caller's job."""
        repo = LanguageRepository(languages_path)
        repo.save_all([ProgrammingLanguage("Go"), ProgrammingLanguage("go")])

        assert len(repo.load_all()) == 2

    def test_save_load_is_idempotent(self, languages_path):
        repo = LanguageRepository(languages_path)
        repo.save_all([ProgrammingLanguage(n) for n in ["b", "A", "c"]])
        before = languages_path.read_bytes()

        repo.save_all(repo.load_all())
        assert languages_path.read_bytes() == before

    def test_write_failure_raises_storage_error(self, languages_path):
        languages_path.mkdir(parents=True)

        with pytest.raises(StorageError):
            LanguageRepository(languages_path).save_all([ProgrammingLanguage("Python")])
