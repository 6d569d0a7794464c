"""Reusable fakes and helpers for catalog review tests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Literal, Self

from catalog_dedup.domain.model import CatalogRecord
from catalog_dedup.domain.ports import CatalogRepositories, CatalogStoreError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType


def make_records(*names: str | None, start_id: int = 1) -> list[CatalogRecord]:
    """Create unverified records with consecutive ids."""

    return [
        CatalogRecord(id=record_id, name=name)
        for record_id, name in enumerate(names, start=start_id)
    ]


class InMemoryCatalogRepository:
    """Dictionary-backed implementation of the catalog repository port."""

    def __init__(self, records: dict[int, CatalogRecord]) -> None:
        self._records = records

    def add(self, entity: CatalogRecord) -> None:
        if entity.id is None:
            entity.id = max(self._records, default=0) + 1
        self._records[entity.id] = entity

    def fetch_unverified(self) -> list[CatalogRecord]:
        pending = [replace(record) for record in self._records.values() if not record.verified]
        return sorted(pending, key=lambda record: (record.name or "", record.id or 0))

    def set_verified(self, record_id: int) -> bool:
        record = self._records.get(record_id)
        if record is None or record.verified:
            return False
        record.verified = True
        return True

    def delete_record(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None


class FailingCatalogRepository:
    """Repository whose every call fails like an unreachable database."""

    def add(self, entity: CatalogRecord) -> None:
        raise CatalogStoreError(f"cannot add {entity.name!r}")

    def fetch_unverified(self) -> list[CatalogRecord]:
        raise CatalogStoreError("catalog unavailable")

    def set_verified(self, record_id: int) -> bool:
        raise CatalogStoreError(f"cannot verify {record_id}")

    def delete_record(self, record_id: int) -> bool:
        raise CatalogStoreError(f"cannot delete {record_id}")


@dataclass
class FakeUnitOfWork:
    repositories: CatalogRepositories
    commits: int = 0
    rollbacks: int = 0

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


@dataclass
class InMemoryCatalogStore:
    """Shared record table handing out fake units of work over it."""

    records: dict[int, CatalogRecord] = field(default_factory=dict[int, CatalogRecord])
    units: list[FakeUnitOfWork] = field(default_factory=list[FakeUnitOfWork])

    def seed(self, records: Iterable[CatalogRecord]) -> None:
        repository = InMemoryCatalogRepository(self.records)
        for record in records:
            repository.add(record)

    def unit_of_work(self) -> FakeUnitOfWork:
        uow = FakeUnitOfWork(
            repositories=CatalogRepositories(products=InMemoryCatalogRepository(self.records))
        )
        self.units.append(uow)
        return uow

    @property
    def commits(self) -> int:
        return sum(uow.commits for uow in self.units)


def failing_unit_of_work() -> FakeUnitOfWork:
    return FakeUnitOfWork(repositories=CatalogRepositories(products=FailingCatalogRepository()))
