"""Application configuration loader.

Loads centralized configuration from data/config/app_config_v1.yaml
with built-in defaults when the file is missing.

Usage:
    from curriculum.config.app_config import load_app_config

    config = load_app_config()
    config.storage.profiles_path  # Path("data/student-profiles.csv")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to the working directory)
CONFIG_FILE = Path("data/config/app_config_v1.yaml")

DEFAULT_ACADEMIC_STATUSES = ["Freshman", "Sophomore", "Junior", "Senior", "Graduate"]
DEFAULT_DATABASE_OPTIONS = ["MySQL", "Postgres", "MongoDB", "SQLite", "Oracle"]
DEFAULT_PREFERRED_ROLES = ["Front-End", "Back-End", "Full-Stack", "Data", "Other"]


@dataclass
class StorageConfig:
    """Locations of the flat data files."""

    data_dir: str = "data"
    languages_file: str = "programming-languages.csv"
    profiles_file: str = "student-profiles.csv"
    strict_records: bool = False

    @property
    def languages_path(self) -> Path:
        return Path(self.data_dir) / self.languages_file

    @property
    def profiles_path(self) -> Path:
        return Path(self.data_dir) / self.profiles_file


@dataclass
class OptionsConfig:
    """Fixed choice lists offered by the profile forms."""

    academic_statuses: list[str] = field(
        default_factory=lambda: list(DEFAULT_ACADEMIC_STATUSES)
    )
    database_options: list[str] = field(
        default_factory=lambda: list(DEFAULT_DATABASE_OPTIONS)
    )
    preferred_roles: list[str] = field(
        default_factory=lambda: list(DEFAULT_PREFERRED_ROLES)
    )
    comment_preview_length: int = 90


@dataclass
class AppConfig:
    """Application-wide configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    options: OptionsConfig = field(default_factory=OptionsConfig)


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "storage": {
            "data_dir": "data",
            "languages_file": "programming-languages.csv",
            "profiles_file": "student-profiles.csv",
            "strict_records": False,
        },
        "options": {
            "academic_statuses": list(DEFAULT_ACADEMIC_STATUSES),
            "database_options": list(DEFAULT_DATABASE_OPTIONS),
            "preferred_roles": list(DEFAULT_PREFERRED_ROLES),
            "comment_preview_length": 90,
        },
    }


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    defaults = _get_defaults()

    storage_data = {**defaults["storage"], **(data.get("storage") or {})}
    storage = StorageConfig(
        data_dir=str(storage_data["data_dir"]),
        languages_file=str(storage_data["languages_file"]),
        profiles_file=str(storage_data["profiles_file"]),
        strict_records=bool(storage_data["strict_records"]),
    )

    options_data = {**defaults["options"], **(data.get("options") or {})}
    options = OptionsConfig(
        academic_statuses=list(options_data["academic_statuses"]),
        database_options=list(options_data["database_options"]),
        preferred_roles=list(options_data["preferred_roles"]),
        comment_preview_length=int(options_data["comment_preview_length"]),
    )

    return AppConfig(storage=storage, options=options)


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config, falling back to defaults.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    data: dict[str, Any]

    if CONFIG_FILE.exists():
        logger.debug("loading_app_config", source=str(CONFIG_FILE))
        data = yaml.safe_load(CONFIG_FILE.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config")
        data = _get_defaults()

    _cached_config = _parse_config(data)
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
