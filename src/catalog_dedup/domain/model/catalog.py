"""Catalog records and the derived duplicate views built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from catalog_dedup.domain.model.enums import ReviewAction


@dataclass(eq=False, kw_only=True)
class CatalogRecord:
    """A product as the catalog store knows it.

    ``id`` stays ``None`` until the store assigns one. ``verified`` marks the record
    as reviewed; verified records never take part in duplicate detection.
    """

    name: str | None
    verified: bool = False
    id: int | None = None


class PresentedRecord(TypedDict):
    id: int | None
    name: str | None


@dataclass(frozen=True, slots=True)
class DuplicateGroup:
    """Two or more unverified records sharing a phonetic code."""

    code: str
    members: tuple[CatalogRecord, ...]

    def __post_init__(self) -> None:
        if len(self.members) < 2:
            raise ValueError(f"Duplicate group {self.code!r} needs at least two members")
        if any(member.verified for member in self.members):
            raise ValueError(f"Duplicate group {self.code!r} contains a verified record")

    @property
    def record_ids(self) -> tuple[int | None, ...]:
        return tuple(member.id for member in self.members)


@dataclass(frozen=True, slots=True)
class DuplicateReport:
    """Outcome of one duplicate-detection run over a single snapshot.

    ``degraded`` is set when the snapshot could not be read and the empty result is
    a fallback rather than a finding.
    """

    groups: tuple[DuplicateGroup, ...] = ()
    scanned: int = 0
    degraded: bool = False

    def __len__(self) -> int:
        return len(self.groups)

    def as_mapping(self) -> dict[str, list[CatalogRecord]]:
        return {group.code: list(group.members) for group in self.groups}

    def to_presentation(self) -> dict[str, list[PresentedRecord]]:
        """Reduce the report to what a reviewer needs: code to ``{id, name}`` lists."""

        return {
            group.code: [
                PresentedRecord(id=member.id, name=member.name) for member in group.members
            ]
            for group in self.groups
        }


@dataclass(frozen=True, slots=True)
class ReviewResult:
    """Outcome of a reviewer action; ``changed`` is false for no-op writes."""

    record_id: int
    action: ReviewAction
    changed: bool = field(default=False)
