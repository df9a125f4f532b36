"""OverlayReport: the per-run summary assembled by ``core.runner``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from locale_overlay import __version__
from locale_overlay.model import CoverageBucket


@dataclass(frozen=True, slots=True)
class CoverageResult:
    """Classification of one non-empty file against the reference locale."""

    file_name: str
    path: str
    covered_count: int
    total_count: int
    bucket: CoverageBucket

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_name": self.file_name,
            "path": self.path,
            "covered": self.covered_count,
            "total": self.total_count,
            "bucket": self.bucket.value,
        }


@dataclass(frozen=True, slots=True)
class FileFailure:
    """A file skipped because it could not be parsed."""

    path: str
    message: str


@dataclass(slots=True)
class DialogueStats:
    """Counts from the dialogue pass for one target locale."""

    locale: str
    files_loaded: int = 0
    text_ids_available: int = 0
    elements_updated: int = 0
    texts_updated: int = 0


@dataclass(slots=True)
class OverlayReport:
    """Everything the run observed; log-only, no behavioural contract.

    Built incrementally by the runner, then rendered by
    ``reports.summary.emit_main_summary`` and, for the CLI, ``to_dict()``.
    """

    target_locales: tuple[str, ...] = ()
    reference_locale: str = "en"
    tool_version: str = __version__

    # ── main pass ───────────────────────────────────────────────────
    files_discovered: int = 0
    files_loaded: int = 0
    files_empty: int = 0
    failures: list[FileFailure] = field(default_factory=list)
    coverage: list[CoverageResult] = field(default_factory=list)
    covered_keys_by_locale: dict[str, set[str]] = field(default_factory=dict)
    skipped_locales: dict[str, str] = field(default_factory=dict)

    # ── dialogue pass ───────────────────────────────────────────────
    dialogue: dict[str, DialogueStats] = field(default_factory=dict)
    dialogue_error: str | None = None

    # ── bucket views ────────────────────────────────────────────────

    def _bucket(self, bucket: CoverageBucket) -> list[CoverageResult]:
        return [c for c in self.coverage if c.bucket is bucket]

    @property
    def fully_covered(self) -> list[CoverageResult]:
        return self._bucket(CoverageBucket.FULLY_COVERED)

    @property
    def partially_covered(self) -> list[CoverageResult]:
        return self._bucket(CoverageBucket.PARTIALLY_COVERED)

    @property
    def non_covered(self) -> list[CoverageResult]:
        return self._bucket(CoverageBucket.NON_COVERED)

    @property
    def ok(self) -> bool:
        """False when any file failed to parse or the dialogue pass aborted."""
        return not self.failures and self.dialogue_error is None

    def covered_field_count(self, code: str) -> int:
        return len(self.covered_keys_by_locale.get(code, ()))

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Produce the JSON shape described by ``overlay_report.schema.json``."""
        return {
            "schema_version": "overlay_report_v1",
            "tool_version": self.tool_version,
            "reference_locale": self.reference_locale,
            "target_locales": list(self.target_locales),
            "files": {
                "discovered": self.files_discovered,
                "loaded": self.files_loaded,
                "empty": self.files_empty,
                "failed": len(self.failures),
            },
            "failures": [{"path": f.path, "message": f.message} for f in self.failures],
            "covered_fields": {
                code: self.covered_field_count(code) for code in self.target_locales
            },
            "coverage": {
                "fully_covered": [c.to_dict() for c in self.fully_covered],
                "partially_covered": [c.to_dict() for c in self.partially_covered],
                "non_covered": [c.to_dict() for c in self.non_covered],
            },
            "skipped_locales": dict(self.skipped_locales),
            "dialogue": {
                "error": self.dialogue_error,
                "locales": {
                    code: {
                        "files_loaded": s.files_loaded,
                        "text_ids_available": s.text_ids_available,
                        "elements_updated": s.elements_updated,
                        "texts_updated": s.texts_updated,
                    }
                    for code, s in self.dialogue.items()
                },
            },
        }
