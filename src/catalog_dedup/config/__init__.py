"""Application configuration helpers."""

from __future__ import annotations

from .dedup import DEFAULT_NATIVE_FUNCTION, DedupConfig, get_dedup_config
from .env import env_flag
from .errors import ConfigurationError
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DEFAULT_NATIVE_FUNCTION",
    "ConfigurationError",
    "DatabaseConfig",
    "DedupConfig",
    "StorageConfig",
    "configure_logging",
    "env_flag",
    "get_database_config",
    "get_dedup_config",
    "get_storage_config",
]
