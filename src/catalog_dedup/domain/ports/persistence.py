"""Ports for persisting catalog records."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from catalog_dedup.domain.model import CatalogRecord


class CatalogStoreError(RuntimeError):
    """Raised by store adapters when a read or write against the catalog fails."""


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class CatalogRepository(Repository[CatalogRecord], Protocol):
    """Persistence contract the duplicate review relies on."""

    def fetch_unverified(self) -> list[CatalogRecord]:
        """Return every unverified record, sorted by name."""
        ...

    def set_verified(self, record_id: int) -> bool:
        """Mark a record as reviewed; return whether a row changed."""
        ...

    def delete_record(self, record_id: int) -> bool:
        """Remove a record; return whether a row was removed."""
        ...
