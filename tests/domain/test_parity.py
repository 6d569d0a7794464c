from __future__ import annotations

import logging

import pytest

from catalog_dedup.domain.parity import (
    PARITY_CORPUS,
    ParityMismatch,
    accept_encoder,
    check_parity,
)
from catalog_dedup.domain.phonetics import encode
from catalog_dedup.domain.ports import CatalogStoreError


def textbook_soundex(name: object) -> str:
    """Classic Soundex where y separates runs like a vowel does."""

    text = str(name).lower()
    digits = {
        **dict.fromkeys("bfpv", "1"),
        **dict.fromkeys("cgjkqsxz", "2"),
        **dict.fromkeys("dt", "3"),
        "l": "4",
        **dict.fromkeys("mn", "5"),
        "r": "6",
    }
    code = text[0].upper()
    previous = digits.get(text[0], "")
    for char in text[1:]:
        if char in "hw":
            continue
        current = digits.get(char, "")
        if current and current != previous:
            code += current
        previous = current
    return (code + "000")[:4]


def test_corpus_is_ascii_alphabetic() -> None:
    assert PARITY_CORPUS
    assert all(name.isascii() and name.isalpha() for name in PARITY_CORPUS)


def test_canonical_encoder_passes_its_own_parity_check() -> None:
    report = check_parity(encode)

    assert report.passed
    assert report.checked == len(PARITY_CORPUS)


def test_mismatches_are_reported_per_name() -> None:
    report = check_parity(lambda name: str(name)[:4].upper(), names=["Smith", "Tea", "Pepsi"])

    assert not report.passed
    assert report.checked == 3
    assert report.mismatches == (
        ParityMismatch(name="Smith", expected="S530", actual="SMIT"),
        ParityMismatch(name="Tea", expected="T000", actual="TEA"),
        ParityMismatch(name="Pepsi", expected="P120", actual="PEPS"),
    )


def test_corpus_catches_y_separation_drift() -> None:
    # agrees on the reference vectors but treats y like a vowel
    assert textbook_soundex("Smith") == encode("Smith")
    assert textbook_soundex("Robert") == encode("Robert")

    report = check_parity(textbook_soundex)

    assert not report.passed
    assert {mismatch.name for mismatch in report.mismatches} == {"Sykes"}


def test_accept_encoder_keeps_candidate_on_parity() -> None:
    def candidate(name: object) -> str:
        return encode(name)

    assert accept_encoder(candidate) is candidate


def test_accept_encoder_falls_back_on_mismatch(caplog: pytest.LogCaptureFixture) -> None:
    def candidate(name: object) -> str:
        return str(name)[:4].upper()

    with caplog.at_level(logging.WARNING):
        chosen = accept_encoder(candidate)

    assert chosen is encode
    assert "Rejected phonetic encoder" in caplog.text


def test_accept_encoder_falls_back_when_candidate_fails() -> None:
    def candidate(name: object) -> str:
        raise CatalogStoreError(f"no phonetic function for {name!r}")

    assert accept_encoder(candidate) is encode
