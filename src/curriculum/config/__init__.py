"""Configuration package for curriculum setup."""

from curriculum.config.app_config import (
    AppConfig,
    OptionsConfig,
    StorageConfig,
    clear_config_cache,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "OptionsConfig",
    "StorageConfig",
    "clear_config_cache",
    "load_app_config",
]
