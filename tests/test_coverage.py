"""Tests for the coverage classifier."""

from __future__ import annotations

from pathlib import Path

import pytest

from locale_overlay.core.coverage import bucket_for, classify
from locale_overlay.model import CoverageBucket

REFERENCE = {"greeting": "Hello", "farewell": "Bye"}


@pytest.mark.parametrize(
    "covered,total,expected",
    [
        (0, 0, None),
        (0, 3, CoverageBucket.NON_COVERED),
        (3, 3, CoverageBucket.FULLY_COVERED),
        (1, 3, CoverageBucket.PARTIALLY_COVERED),
        (2, 3, CoverageBucket.PARTIALLY_COVERED),
    ],
)
def test_bucket_rules(covered, total, expected):
    assert bucket_for(covered, total) is expected


def test_partial_scenario():
    result = classify({"greeting": "你好", "extra": "x"}, REFERENCE, path=Path("ch/file1.json"))
    assert result is not None
    assert (result.covered_count, result.total_count) == (1, 2)
    assert result.bucket is CoverageBucket.PARTIALLY_COVERED
    assert result.file_name == "file1.json"
    assert result.path == "ch/file1.json"


def test_fully_covered():
    result = classify({"greeting": "a", "farewell": "b"}, REFERENCE)
    assert result.bucket is CoverageBucket.FULLY_COVERED
    assert result.file_name == ""


def test_non_covered():
    result = classify({"nope": "a"}, REFERENCE)
    assert result.bucket is CoverageBucket.NON_COVERED
    assert result.covered_count == 0


def test_empty_record_excluded():
    assert classify({}, REFERENCE) is None


def test_classify_is_pure():
    record = {"greeting": "a", "extra": "b"}
    ref = dict(REFERENCE)
    classify(record, ref)
    assert record == {"greeting": "a", "extra": "b"}
    assert ref == REFERENCE


def test_empty_reference_makes_everything_non_covered():
    assert classify({"greeting": "a"}, {}).bucket is CoverageBucket.NON_COVERED
