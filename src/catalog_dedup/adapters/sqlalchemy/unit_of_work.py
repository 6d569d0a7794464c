"""Engine lifecycle and units of work for the SQLAlchemy catalog store."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Self

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from catalog_dedup.adapters.sqlalchemy.mappings import start_mappers
from catalog_dedup.adapters.sqlalchemy.migrations import upgrade_head
from catalog_dedup.adapters.sqlalchemy.repositories import SqlAlchemyCatalogRepository
from catalog_dedup.config import get_database_config
from catalog_dedup.domain.ports import CatalogRepositories, CatalogStoreError, RepositoryCollection

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the catalog store is used before ``startup()`` or twice configured."""


@dataclass(slots=True)
class _CatalogStoreState:
    engine: Engine | None = None
    sessions: sessionmaker[Session] | None = field(default=None, repr=False)

    def bind(self, engine: Engine) -> None:
        self.engine = engine
        self.sessions = sessionmaker(bind=engine, expire_on_commit=False)

    def reset(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.sessions = None

    def open_session(self) -> Session:
        if self.sessions is None:
            raise StartupError(
                "Catalog store not started. Call "
                "catalog_dedup.adapters.sqlalchemy.startup() before opening a unit of work."
            )
        return self.sessions()


_STATE = _CatalogStoreState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the catalog store to an engine and migrate its schema to head.

    Without ``engine`` one is created from ``database_uri`` or, failing that, from
    :func:`catalog_dedup.config.get_database_config`.
    """

    if _STATE.engine is not None and not force:
        raise StartupError("Catalog store already started. Pass force=True to rebind it.")

    target = engine
    try:
        if target is None:
            database = get_database_config()
            target = create_engine(database_uri or database.uri, echo=database.echo, future=True)
        start_mappers()
        upgrade_head(engine=target)
    except SQLAlchemyError as exc:
        log.exception("Could not open the catalog store")
        if engine is None and target is not None:
            target.dispose()
        raise CatalogStoreError("Catalog store unavailable") from exc
    if force and _STATE.engine is not None and _STATE.engine is not target:
        _STATE.reset()
    _STATE.bind(target)
    log.debug("Catalog store bound to %s", target.url.render_as_string(hide_password=True))


def configured_engine() -> Engine | None:
    return _STATE.engine


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the engine and forget it; a later ``startup()`` may bind another."""

    _STATE.reset()


class BaseSqlAlchemyUnitOfWork[TRepositories: RepositoryCollection](ABC):
    """One session per ``with`` block; leaving the block without ``commit()`` discards work."""

    def __init__(self) -> None:
        if not is_started():
            raise StartupError("Catalog store not started")
        self._session: Session | None = None
        self._repositories: TRepositories | None = None

    @abstractmethod
    def _build_repositories(self, session: Session) -> TRepositories: ...

    def __enter__(self) -> Self:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        self._session = _STATE.open_session()
        self._repositories = self._build_repositories(self._session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None or session.in_transaction():
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            log.exception("Failed to commit catalog changes")
            self.session.rollback()
            raise CatalogStoreError("Could not commit catalog changes") from exc

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work has no open session")
        return self._session

    @property
    def repositories(self) -> TRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work has no open session")
        return self._repositories


class SqlAlchemyCatalogUnitOfWork(BaseSqlAlchemyUnitOfWork[CatalogRepositories]):
    def _build_repositories(self, session: Session) -> CatalogRepositories:
        return CatalogRepositories(products=SqlAlchemyCatalogRepository(session))


if TYPE_CHECKING:
    from catalog_dedup.domain.ports import CatalogUnitOfWork

    _uow_check: CatalogUnitOfWork = SqlAlchemyCatalogUnitOfWork()
