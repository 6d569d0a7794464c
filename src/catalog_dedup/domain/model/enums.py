"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ReviewAction(StrEnum):
    VERIFY = "verify"
    DELETE = "delete"
