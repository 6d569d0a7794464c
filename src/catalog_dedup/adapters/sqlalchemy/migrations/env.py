"""Alembic environment for the catalog schema.

Runs against the connection passed in ``config.attributes["connection"]`` when
the adapter migrates its own engine, otherwise against ``sqlalchemy.url`` or the
configured catalog database.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from alembic import context
from sqlalchemy import create_engine, pool

from catalog_dedup.adapters.sqlalchemy.mappings import mapper_registry, start_mappers
from catalog_dedup.config import get_database_config

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

log = logging.getLogger("catalog_dedup.migrations")

start_mappers()

# batch mode lets SQLite alter tables by copy-and-move
_CONFIGURE_OPTIONS = {
    "target_metadata": mapper_registry.metadata,
    "render_as_batch": True,
    "compare_type": True,
    "compare_server_default": True,
}


def _database_url() -> str:
    return context.config.get_main_option("sqlalchemy.url") or get_database_config().uri


def _migrate(connection: Connection) -> None:
    context.configure(connection=connection, **_CONFIGURE_OPTIONS)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    context.configure(url=_database_url(), literal_binds=True, **_CONFIGURE_OPTIONS)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    handed_over: Connection | None = context.config.attributes.get("connection")
    if handed_over is not None:
        _migrate(handed_over)
        return

    engine = create_engine(_database_url(), poolclass=pool.NullPool, future=True)
    try:
        with engine.begin() as connection:
            _migrate(connection)
    finally:
        engine.dispose()


if context.is_offline_mode():
    log.debug("Rendering catalog migrations as SQL")
    run_migrations_offline()
else:
    log.debug("Applying catalog migrations")
    run_migrations_online()
