"""Alembic migrations for the catalog schema, shipped inside the package."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from catalog_dedup.config import get_database_config

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

MIGRATIONS_PATH: Final[Path] = Path(__file__).resolve().parent


def migration_config(*, database_uri: str | None = None) -> Config:
    """Return an Alembic config bound to the packaged revisions.

    ``database_uri`` is only consulted when no engine connection is handed over
    through ``config.attributes["connection"]``.
    """

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_PATH))
    if database_uri is not None:
        config.set_main_option("sqlalchemy.url", database_uri)
    return config


def head_revision() -> str | None:
    return ScriptDirectory.from_config(migration_config()).get_current_head()


def current_revision(engine: Engine) -> str | None:
    """Return the revision stamped in the database behind ``engine``."""

    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()


def _run(action: str, revision: str, *, engine: Engine | None, database_uri: str | None) -> None:
    if engine is None:
        config = migration_config(database_uri=database_uri or get_database_config().uri)
        getattr(command, action)(config, revision)
        return
    config = migration_config()
    with engine.begin() as connection:
        config.attributes["connection"] = connection
        getattr(command, action)(config, revision)


def upgrade_head(*, engine: Engine | None = None, database_uri: str | None = None) -> None:
    """Bring the catalog schema up to the newest revision."""

    _run("upgrade", "head", engine=engine, database_uri=database_uri)


def downgrade_base(*, engine: Engine | None = None, database_uri: str | None = None) -> None:
    """Drop every migrated object, leaving an unversioned database."""

    _run("downgrade", "base", engine=engine, database_uri=database_uri)


__all__ = [
    "MIGRATIONS_PATH",
    "current_revision",
    "downgrade_base",
    "head_revision",
    "migration_config",
    "upgrade_head",
]
