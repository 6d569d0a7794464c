"""Group catalog records whose names share a phonetic code."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog_dedup.domain.model import CatalogRecord, DuplicateGroup
from catalog_dedup.domain.phonetics import encode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalog_dedup.domain.phonetics import Encoder


def group_duplicates(
    records: Iterable[CatalogRecord],
    *,
    encoder: Encoder = encode,
) -> dict[str, list[CatalogRecord]]:
    """Bucket ``records`` by phonetic code and keep buckets with two or more members.

    Members keep their input order and codes appear in first-seen order. Records
    are not filtered on ``verified``; pass a snapshot of unverified records.
    """

    buckets: dict[str, list[CatalogRecord]] = {}
    for record in records:
        buckets.setdefault(encoder(record.name), []).append(record)
    return {code: members for code, members in buckets.items() if len(members) > 1}


def duplicate_groups(
    records: Iterable[CatalogRecord],
    *,
    encoder: Encoder = encode,
) -> tuple[DuplicateGroup, ...]:
    return tuple(
        DuplicateGroup(code=code, members=tuple(members))
        for code, members in group_duplicates(records, encoder=encoder).items()
    )


__all__ = ["duplicate_groups", "group_duplicates"]
