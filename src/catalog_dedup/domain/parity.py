"""Gate alternative phonetic encoders behind agreement with :func:`encode`.

Databases sometimes ship their own phonetic function. Such an encoder may only
replace the in-process one when it produces identical codes for every name in
:data:`PARITY_CORPUS`; otherwise the canonical encoder stays in charge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from catalog_dedup.domain.phonetics import encode
from catalog_dedup.domain.ports import CatalogStoreError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalog_dedup.domain.phonetics import Encoder

log = getLogger(__name__)

PARITY_CORPUS: Final[tuple[str, ...]] = (
    # reference vectors
    "Smith",
    "Smyth",
    "Robert",
    "Rupert",
    # first digit shares the anchor's class
    "Pfister",
    "Schmidt",
    "Lloyd",
    "Jackson",
    # h, w and y do not separate a run, vowels do
    "Ashcraft",
    "Ashcroft",
    "Tymczak",
    "Honeyman",
    "Sykes",
    "Washington",
    "Coca",
    "Cocacola",
    "Kokakola",
    # padding and truncation
    "A",
    "Lee",
    "Tea",
    "Pepsi",
    "Gutierrez",
    "Ketchup",
    "Catsup",
    "Yogurt",
    "Whisky",
    "Knight",
    "Night",
)


@dataclass(frozen=True, slots=True)
class ParityMismatch:
    name: str
    expected: str
    actual: str


@dataclass(frozen=True, slots=True)
class ParityReport:
    checked: int
    mismatches: tuple[ParityMismatch, ...] = field(default=())

    @property
    def passed(self) -> bool:
        return not self.mismatches


def check_parity(candidate: Encoder, *, names: Iterable[str] = PARITY_CORPUS) -> ParityReport:
    """Compare ``candidate`` with :func:`encode` on every name."""

    checked = 0
    mismatches: list[ParityMismatch] = []
    for name in names:
        checked += 1
        expected = encode(name)
        actual = candidate(name)
        if actual != expected:
            mismatches.append(ParityMismatch(name=name, expected=expected, actual=actual))
    return ParityReport(checked=checked, mismatches=tuple(mismatches))


def accept_encoder(candidate: Encoder, *, names: Iterable[str] = PARITY_CORPUS) -> Encoder:
    """Return ``candidate`` when it agrees with :func:`encode`, else :func:`encode`."""

    try:
        report = check_parity(candidate, names=names)
    except CatalogStoreError:
        log.warning("Rejected phonetic encoder %r: it failed during the parity check", candidate)
        return encode

    if not report.passed:
        first = report.mismatches[0]
        log.warning(
            "Rejected phonetic encoder %r: %s of %s names disagree (e.g. %r -> %r, expected %r)",
            candidate,
            len(report.mismatches),
            report.checked,
            first.name,
            first.actual,
            first.expected,
        )
        return encode

    log.info("Accepted phonetic encoder %r after %s parity checks", candidate, report.checked)
    return candidate


__all__ = [
    "PARITY_CORPUS",
    "ParityMismatch",
    "ParityReport",
    "accept_encoder",
    "check_parity",
]
