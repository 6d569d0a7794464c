"""SQLAlchemy mapping metadata for catalog records."""

from __future__ import annotations

import logging
from functools import cache

from sqlalchemy import Boolean, Column, Index, Integer, String, Table, false, orm
from sqlalchemy.orm import configure_mappers

from catalog_dedup.domain.model import CatalogRecord

log = logging.getLogger(__name__)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

product_table = Table(
    "product",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=True),
    Column("verified", Boolean, nullable=False, default=False, server_default=false()),
    Index("ix_product_verified_name", "verified", "name"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(CatalogRecord, product_table)

    configure_mappers()
    return mapper_registry
