"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from logging import getLogger

from catalog_dedup.adapters.sqlalchemy import (
    SqlAlchemyCatalogUnitOfWork,
    SqlFunctionEncoder,
    configured_engine,
    is_started,
    startup,
)
from catalog_dedup.config import DedupConfig, get_dedup_config
from catalog_dedup.domain.model import CatalogRecord, DuplicateReport, ReviewResult
from catalog_dedup.domain.parity import ParityReport, accept_encoder, check_parity
from catalog_dedup.domain.phonetics import Encoder, encode
from catalog_dedup.domain.ports import CatalogStoreError, CatalogUnitOfWork
from catalog_dedup.domain.review import delete_record, find_duplicates, mark_verified

UnitOfWorkFactory = Callable[[], CatalogUnitOfWork]


log = getLogger(__name__)


def _ensure_started() -> None:
    if not is_started():
        startup()


def _native_encoder(config: DedupConfig) -> SqlFunctionEncoder:
    _ensure_started()
    engine = configured_engine()
    if engine is None:
        raise RuntimeError("Catalog database engine is not configured")
    return SqlFunctionEncoder(engine, config.native_function)


def resolve_encoder(config: DedupConfig | None = None) -> Encoder:
    """Pick the encoder for a run: the native function if enabled and on par."""

    effective_config = config or get_dedup_config()
    if not effective_config.native_encoder:
        return encode
    return accept_encoder(_native_encoder(effective_config))


def review_duplicates(
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    encoder: Encoder | None = None,
) -> DuplicateReport:
    """Group the unverified catalog records for manual review."""

    if unit_of_work_factory is None:
        try:
            _ensure_started()
        except CatalogStoreError:
            log.warning("Catalog store unavailable; reporting no duplicates")
            return DuplicateReport(degraded=True)
    effective_uow = unit_of_work_factory or SqlAlchemyCatalogUnitOfWork
    effective_encoder = encoder or resolve_encoder()
    report = find_duplicates(unit_of_work_factory=effective_uow, encoder=effective_encoder)
    if report.degraded:
        log.warning("Duplicate review ran without a catalog snapshot")
    return report


def verify_product(
    record_id: int,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ReviewResult:
    if unit_of_work_factory is None:
        _ensure_started()
    return mark_verified(
        record_id, unit_of_work_factory=unit_of_work_factory or SqlAlchemyCatalogUnitOfWork
    )


def delete_product(
    record_id: int,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ReviewResult:
    if unit_of_work_factory is None:
        _ensure_started()
    return delete_record(
        record_id, unit_of_work_factory=unit_of_work_factory or SqlAlchemyCatalogUnitOfWork
    )


def add_products(
    names: Sequence[str],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[CatalogRecord]:
    """Insert unverified records, e.g. to seed a catalog for review."""

    if unit_of_work_factory is None:
        _ensure_started()
    effective_uow = unit_of_work_factory or SqlAlchemyCatalogUnitOfWork
    records = [CatalogRecord(name=name) for name in names]
    with effective_uow() as uow:
        for record in records:
            uow.repositories.products.add(record)
        uow.commit()
    log.info("Added %s catalog records", len(records))
    return records


def native_parity(config: DedupConfig | None = None) -> ParityReport:
    """Check the configured SQL phonetic function against the canonical encoder."""

    effective_config = config or get_dedup_config()
    return check_parity(_native_encoder(effective_config))
