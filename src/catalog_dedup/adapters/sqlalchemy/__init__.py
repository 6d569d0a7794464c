"""SQLAlchemy adapter package for catalog-dedup."""

from __future__ import annotations

from .mappings import mapper_registry, product_table, start_mappers
from .native import SqlFunctionEncoder
from .repositories import SqlAlchemyCatalogRepository
from .unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyCatalogRepository",
    "SqlAlchemyCatalogUnitOfWork",
    "SqlFunctionEncoder",
    "StartupError",
    "configured_engine",
    "is_started",
    "mapper_registry",
    "product_table",
    "shutdown",
    "start_mappers",
    "startup",
]
