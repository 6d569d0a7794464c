"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import CatalogRepository, CatalogStoreError, Repository
from .unit_of_work import (
    CatalogRepositories,
    CatalogUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "CatalogRepositories",
    "CatalogRepository",
    "CatalogStoreError",
    "CatalogUnitOfWork",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
]
