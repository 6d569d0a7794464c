"""Transaction boundary used by the review services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from catalog_dedup.domain.ports.persistence import CatalogRepository


@runtime_checkable
class RepositoryCollection(Protocol):
    """Repositories opened and committed together."""


@runtime_checkable
class UnitOfWork[TRepositories: RepositoryCollection](Protocol):
    """Context manager exposing repositories; nothing persists without ``commit()``."""

    @property
    def repositories(self) -> TRepositories: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class CatalogRepositories(RepositoryCollection):
    products: CatalogRepository


type CatalogUnitOfWork = UnitOfWork[CatalogRepositories]
