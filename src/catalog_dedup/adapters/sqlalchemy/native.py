"""Phonetic encoding delegated to a SQL function such as MySQL's ``SOUNDEX``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import String, func, literal, select
from sqlalchemy.exc import SQLAlchemyError

from catalog_dedup.config import DEFAULT_NATIVE_FUNCTION
from catalog_dedup.domain.phonetics import EMPTY_CODE
from catalog_dedup.domain.ports import CatalogStoreError

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class SqlFunctionEncoder:
    """Encoder that asks the database for each code.

    Only trust it after :func:`catalog_dedup.domain.parity.accept_encoder` let it
    through; database phonetic functions rarely agree with each other.
    """

    def __init__(self, engine: Engine, function_name: str = DEFAULT_NATIVE_FUNCTION) -> None:
        self.engine = engine
        self.function_name = function_name

    def __repr__(self) -> str:
        return f"SqlFunctionEncoder({self.engine.dialect.name}.{self.function_name})"

    def __call__(self, name: object) -> str:
        if not isinstance(name, str) or not name:
            return EMPTY_CODE
        sql_function = getattr(func, self.function_name)
        stmt = select(sql_function(literal(name, String)))
        try:
            with self.engine.connect() as connection:
                value = connection.execute(stmt).scalar_one()
        except SQLAlchemyError as exc:
            log.exception("SQL function %s failed for %r", self.function_name, name)
            raise CatalogStoreError(f"SQL function {self.function_name} failed") from exc
        return EMPTY_CODE if value is None else str(value)
