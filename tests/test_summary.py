"""Tests for the run summary: log emission and the JSON contract."""

from __future__ import annotations

import jsonschema
import pytest

from locale_overlay.contracts.load import validate_instance
from locale_overlay.model import CoverageBucket
from locale_overlay.model.run_result import (
    CoverageResult,
    DialogueStats,
    FileFailure,
    OverlayReport,
)
from locale_overlay.reports.summary import emit_dialogue_summary, emit_main_summary


def _cov(name: str, covered: int, total: int, bucket: CoverageBucket) -> CoverageResult:
    return CoverageResult(name, f"ch/{name}", covered, total, bucket)


@pytest.fixture
def report() -> OverlayReport:
    r = OverlayReport(target_locales=("ch",))
    r.files_discovered = 4
    r.files_loaded = 3
    r.coverage = [
        _cov("full.json", 2, 2, CoverageBucket.FULLY_COVERED),
        _cov("half.jsonc", 1, 2, CoverageBucket.PARTIALLY_COVERED),
        _cov("none.json5", 0, 3, CoverageBucket.NON_COVERED),
    ]
    r.covered_keys_by_locale["ch"] = {"a", "b", "c"}
    r.failures.append(FileFailure(path="ch/bad.json", message="invalid json"))
    r.dialogue["ch"] = DialogueStats(locale="ch", files_loaded=1, elements_updated=2, texts_updated=5)
    return r


def test_main_summary_lines(report, sink):
    emit_main_summary(report, sink)
    info = sink.text("info")
    assert "loaded 3 translation file(s)" in info
    assert "ch: 3 field(s)" in info
    assert "  - half.jsonc (1/2 fields)" in info
    assert "  - full.json" in info
    assert "  - none.json5" in info
    assert "1 file(s) could not be parsed" in sink.text("warning")


def test_section_headers_are_coloured(report, sink):
    emit_main_summary(report, sink)
    colours = [lvl for lvl, _ in sink.lines if lvl.startswith("color:")]
    assert colours == ["color:green", "color:yellow", "color:red"]


def test_empty_sections_are_omitted(sink):
    emit_main_summary(OverlayReport(target_locales=("ch",)), sink)
    assert not [lvl for lvl, _ in sink.lines if lvl.startswith("color:")]
    assert "loaded 0 translation file(s)" in sink.text("info")


def test_skipped_locale_is_reported(sink):
    r = OverlayReport(target_locales=("ch",))
    r.skipped_locales["ch"] = "locale directory not found"
    emit_main_summary(r, sink)
    assert "ch: skipped (locale directory not found)" in sink.text("info")


def test_dialogue_summary(report, sink):
    emit_dialogue_summary(report, sink)
    assert "dialogue ch: updated 2 element(s), 5 text(s) in total" in sink.text("info")


def test_to_dict_matches_schema(report):
    d = report.to_dict()
    validate_instance(d, "overlay_report.schema.json")
    assert d["files"] == {"discovered": 4, "loaded": 3, "empty": 0, "failed": 1}
    assert d["covered_fields"] == {"ch": 3}
    assert [e["file_name"] for e in d["coverage"]["partially_covered"]] == ["half.jsonc"]
    assert d["dialogue"]["locales"]["ch"]["texts_updated"] == 5


def test_schema_rejects_unknown_bucket(report):
    d = report.to_dict()
    d["coverage"]["non_covered"][0]["bucket"] = "mostly"
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(d, "overlay_report.schema.json")


def test_report_ok_flag(report):
    assert not report.ok
    assert OverlayReport().ok
