"""Soundex-style phonetic codes for product names.

The code is the first letter of the name followed by up to three digits, one per
run of similar-sounding consonants, padded with ``0``. Names are folded to plain
ASCII letters first: accents are stripped, and digits, punctuation, whitespace
and anything without an ASCII base letter are dropped. Names left with no
letters (and empty or non-text input) share the empty code ``""``.

After the anchor letter, every character falls into exactly one class:

* vowels (``a e i o u``) carry no digit but end a run, so ``"Coca"`` keeps both
  ``c`` sounds;
* consonants from the table below carry a digit;
* everything else, ``h``, ``w`` and ``y`` included, is unmapped and skipped, so
  it neither adds a digit nor separates a run (``"Ashcraft"`` is ``A261``).
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable
from typing import Final

CODE_LENGTH: Final[int] = 4
EMPTY_CODE: Final[str] = ""

VOWEL: Final[str] = ""
"""Class of vowels: no digit of their own, but they break runs."""

_VOWELS: Final[frozenset[str]] = frozenset("aeiou")
_DIGITS: Final[dict[str, str]] = {
    **dict.fromkeys("bfpv", "1"),
    **dict.fromkeys("cgjkqsxz", "2"),
    **dict.fromkeys("dt", "3"),
    "l": "4",
    **dict.fromkeys("mn", "5"),
    "r": "6",
}

type Encoder = Callable[[object], str]


def sound_class(char: str) -> str | None:
    """Classify one lowercase character.

    Returns the consonant digit, :data:`VOWEL` for vowels, or ``None`` when the
    character has no class and must be skipped.
    """

    if char in _VOWELS:
        return VOWEL
    return _DIGITS.get(char)


def normalize_name(name: object) -> str:
    """Fold ``name`` to the lowercase ASCII letters the encoder works on."""

    if not isinstance(name, str) or not name:
        return ""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return "".join(ch for ch in stripped.lower() if "a" <= ch <= "z")


def encode(name: object) -> str:
    """Return the phonetic code for ``name``. Never raises."""

    letters = normalize_name(name)
    if not letters:
        return EMPTY_CODE

    anchor, rest = letters[0], letters[1:]
    digits: list[str] = []
    # the first class is compared against the anchor's own class
    previous = sound_class(anchor)
    for char in rest:
        current = sound_class(char)
        if current is None:
            continue
        if current != previous:
            digits.append(current)
        previous = current

    code = anchor.upper() + "".join(digits)
    return code.ljust(CODE_LENGTH, "0")[:CODE_LENGTH]


__all__ = [
    "CODE_LENGTH",
    "EMPTY_CODE",
    "VOWEL",
    "Encoder",
    "encode",
    "normalize_name",
    "sound_class",
]
