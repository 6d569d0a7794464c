"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from catalog_dedup.adapters.sqlalchemy.mappings import product_table
from catalog_dedup.domain.model import CatalogRecord
from catalog_dedup.domain.ports import CatalogStoreError

if TYPE_CHECKING:
    from sqlalchemy import Delete, Update
    from sqlalchemy.engine import CursorResult
    from sqlalchemy.orm import Session

log = logging.getLogger(__name__)


class SqlAlchemyCatalogRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: CatalogRecord) -> None:
        self.session.add(entity)

    def fetch_unverified(self) -> list[CatalogRecord]:
        stmt = (
            select(CatalogRecord)
            .where(product_table.c.verified.is_(False))
            .order_by(product_table.c.name.asc(), product_table.c.id.asc())
        )
        try:
            return list(self.session.execute(stmt).scalars())
        except SQLAlchemyError as exc:
            log.exception("Failed to read unverified catalog records")
            raise CatalogStoreError("Could not read unverified catalog records") from exc

    def set_verified(self, record_id: int) -> bool:
        stmt = (
            product_table.update()
            .where(product_table.c.id == record_id)
            .where(product_table.c.verified.is_(False))
            .values(verified=True)
        )
        return self._execute_write(stmt, action="verify", record_id=record_id)

    def delete_record(self, record_id: int) -> bool:
        stmt = product_table.delete().where(product_table.c.id == record_id)
        return self._execute_write(stmt, action="delete", record_id=record_id)

    def _execute_write(self, stmt: Update | Delete, *, action: str, record_id: int) -> bool:
        try:
            result = cast("CursorResult[object]", self.session.execute(stmt))
        except SQLAlchemyError as exc:
            log.exception("Failed to %s catalog record %s", action, record_id)
            raise CatalogStoreError(f"Could not {action} catalog record {record_id}") from exc
        return result.rowcount > 0


if TYPE_CHECKING:
    from catalog_dedup.domain.ports.persistence import CatalogRepository

    _session_stub = cast("Session", object())
    _repo_check: CatalogRepository = SqlAlchemyCatalogRepository(_session_stub)
