"""Logging setup for the catalog-dedup CLI."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError

LOG_LEVEL_ENV = "CATALOG_DEDUP_LOG_LEVEL"


def _level_from_env(default: int) -> int:
    raw = (os.getenv(LOG_LEVEL_ENV) or "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelNamesMapping().get(raw)
    if level is None:
        raise ConfigurationError(f"Invalid log level for {LOG_LEVEL_ENV}: {raw!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger for CLI runs.

    Without an explicit ``level`` the ``CATALOG_DEDUP_LOG_LEVEL`` variable decides,
    falling back to INFO.
    """

    logging.basicConfig(
        level=level if level is not None else _level_from_env(logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
