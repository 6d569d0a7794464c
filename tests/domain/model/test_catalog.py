from __future__ import annotations

import pytest

from catalog_dedup.domain.model import (
    CatalogRecord,
    DuplicateGroup,
    DuplicateReport,
    ReviewAction,
    ReviewResult,
)
from tests.helpers.catalog import make_records


def test_catalog_record_defaults_to_unverified_without_id() -> None:
    record = CatalogRecord(name="Pepsi")

    assert record.verified is False
    assert record.id is None


def test_duplicate_group_requires_two_members() -> None:
    (single,) = make_records("Pepsi")

    with pytest.raises(ValueError, match="at least two members"):
        DuplicateGroup(code="P120", members=(single,))


def test_duplicate_group_rejects_verified_members() -> None:
    first, second = make_records("Smith", "Smyth")
    second.verified = True

    with pytest.raises(ValueError, match="verified"):
        DuplicateGroup(code="S530", members=(first, second))


def test_report_views() -> None:
    first, second = make_records("Robert", "Rupert")
    report = DuplicateReport(
        groups=(DuplicateGroup(code="R163", members=(first, second)),),
        scanned=3,
    )

    assert len(report) == 1
    assert report.as_mapping() == {"R163": [first, second]}
    assert report.to_presentation() == {
        "R163": [{"id": 1, "name": "Robert"}, {"id": 2, "name": "Rupert"}]
    }
    assert report.degraded is False


def test_empty_report_is_falsy() -> None:
    assert not DuplicateReport()
    assert DuplicateReport(degraded=True).as_mapping() == {}


def test_review_result_defaults_to_unchanged() -> None:
    result = ReviewResult(record_id=4, action=ReviewAction.DELETE)

    assert result.changed is False
    assert str(result.action) == "delete"
