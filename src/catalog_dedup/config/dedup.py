"""Duplicate-detection settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import env_flag
from .errors import ConfigurationError

DEFAULT_NATIVE_FUNCTION = "soundex"


@dataclass(frozen=True, slots=True)
class DedupConfig:
    native_encoder: bool = False
    native_function: str = DEFAULT_NATIVE_FUNCTION


def get_dedup_config() -> DedupConfig:
    function_name = (os.getenv("CATALOG_DEDUP_NATIVE_FUNCTION") or "").strip()
    if function_name and not function_name.isidentifier():
        raise ConfigurationError(f"Invalid SQL function name: {function_name!r}")
    return DedupConfig(
        native_encoder=env_flag("CATALOG_DEDUP_NATIVE_ENCODER"),
        native_function=function_name or DEFAULT_NATIVE_FUNCTION,
    )
