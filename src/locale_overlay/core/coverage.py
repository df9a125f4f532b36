"""Coverage classifier: buckets a parsed file against the reference locale."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from locale_overlay.model import CoverageBucket
from locale_overlay.model.run_result import CoverageResult


def bucket_for(covered: int, total: int) -> CoverageBucket | None:
    """Bucket rule; ``None`` means the file is excluded (no keys at all)."""
    if total == 0:
        return None
    if covered == 0:
        return CoverageBucket.NON_COVERED
    if covered == total:
        return CoverageBucket.FULLY_COVERED
    return CoverageBucket.PARTIALLY_COVERED


def classify(
    record: Mapping[str, str],
    reference: Mapping[str, str],
    *,
    path: Path | str = "",
) -> CoverageResult | None:
    """Count how many of *record*'s keys exist in *reference*.

    Pure: neither mapping is modified.  Returns ``None`` for an empty
    record, which is excluded from classification and merge.
    """
    total = len(record)
    covered = sum(1 for key in record if key in reference)
    bucket = bucket_for(covered, total)
    if bucket is None:
        return None
    p = Path(path) if path else None
    return CoverageResult(
        file_name=p.name if p else "",
        path=p.as_posix() if p else "",
        covered_count=covered,
        total_count=total,
        bucket=bucket,
    )
