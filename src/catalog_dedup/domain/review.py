"""Duplicate review: read unverified records, group them, apply reviewer decisions.

Every call opens its own unit of work. Nothing is cached between calls, so a
verify or delete is visible to the next :func:`find_duplicates` and never to a
report that was already handed out.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from catalog_dedup.domain.grouping import duplicate_groups
from catalog_dedup.domain.model import DuplicateReport, ReviewAction, ReviewResult
from catalog_dedup.domain.phonetics import encode
from catalog_dedup.domain.ports import CatalogStoreError

if TYPE_CHECKING:
    from collections.abc import Callable

    from catalog_dedup.domain.phonetics import Encoder
    from catalog_dedup.domain.ports import CatalogUnitOfWork

log = getLogger(__name__)


def find_duplicates(
    *,
    unit_of_work_factory: Callable[[], CatalogUnitOfWork],
    encoder: Encoder = encode,
) -> DuplicateReport:
    """Group the current unverified snapshot by phonetic code.

    A failed snapshot read, or an encoder that cannot reach its store, yields an
    empty report flagged as ``degraded``.
    """

    try:
        with unit_of_work_factory() as uow:
            snapshot = uow.repositories.products.fetch_unverified()
    except CatalogStoreError:
        log.warning("Catalog snapshot unavailable; reporting no duplicates")
        return DuplicateReport(degraded=True)

    pending = [record for record in snapshot if not record.verified]
    if len(pending) != len(snapshot):
        log.debug("Ignoring %s verified records in snapshot", len(snapshot) - len(pending))

    try:
        groups = duplicate_groups(pending, encoder=encoder)
    except CatalogStoreError:
        log.warning("Phonetic encoder failed; reporting no duplicates")
        return DuplicateReport(scanned=len(pending), degraded=True)
    log.info("Scanned %s unverified records, found %s duplicate groups", len(pending), len(groups))
    return DuplicateReport(groups=groups, scanned=len(pending))


def mark_verified(
    record_id: int,
    *,
    unit_of_work_factory: Callable[[], CatalogUnitOfWork],
) -> ReviewResult:
    """Exclude a record from future runs. Repeating the call is a no-op."""

    with unit_of_work_factory() as uow:
        changed = uow.repositories.products.set_verified(record_id)
        uow.commit()
    log.info("Verified record %s (changed=%s)", record_id, changed)
    return ReviewResult(record_id=record_id, action=ReviewAction.VERIFY, changed=changed)


def delete_record(
    record_id: int,
    *,
    unit_of_work_factory: Callable[[], CatalogUnitOfWork],
) -> ReviewResult:
    """Remove a record permanently. Deleting a missing record is a no-op."""

    with unit_of_work_factory() as uow:
        changed = uow.repositories.products.delete_record(record_id)
        uow.commit()
    log.info("Deleted record %s (changed=%s)", record_id, changed)
    return ReviewResult(record_id=record_id, action=ReviewAction.DELETE, changed=changed)


__all__ = ["delete_record", "find_duplicates", "mark_verified"]
