"""Domain model for catalog duplicate detection."""

from __future__ import annotations

from .catalog import (
    CatalogRecord,
    DuplicateGroup,
    DuplicateReport,
    PresentedRecord,
    ReviewResult,
)
from .enums import ReviewAction

__all__ = [
    "CatalogRecord",
    "DuplicateGroup",
    "DuplicateReport",
    "PresentedRecord",
    "ReviewAction",
    "ReviewResult",
]
