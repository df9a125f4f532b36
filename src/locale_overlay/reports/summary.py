"""Human-readable run summary, emitted through the host log sink.

Layout of the main summary:

    [locale-overlay] loaded N translation file(s)
    [locale-overlay]   - ch: K field(s)
    <green>  fully covered: ...
    <yellow> partially covered: name (covered/total fields)
    <red>    not covered: ...
"""

from __future__ import annotations

from locale_overlay.core.host import LogColor, LogSink
from locale_overlay.model.run_result import CoverageResult, OverlayReport

TAG = "[locale-overlay]"


def _emit_section(
    log: LogSink,
    title: str,
    color: LogColor,
    entries: list[CoverageResult],
    *,
    with_counts: bool = False,
) -> None:
    if not entries:
        return
    log.log_with_color(f"{TAG} {title}:", color)
    for c in entries:
        if with_counts:
            log.info(f"  - {c.file_name} ({c.covered_count}/{c.total_count} fields)")
        else:
            log.info(f"  - {c.file_name}")
    log.info("")


def emit_main_summary(report: OverlayReport, log: LogSink) -> None:
    """Emit file totals, per-locale field counts and the three coverage lists.

    Always emits at least the totals line, even for a run over zero files.
    """
    log.info(f"{TAG} loaded {report.files_loaded} translation file(s)")
    if report.failures:
        log.warning(f"{TAG} {len(report.failures)} file(s) could not be parsed")
    for code in report.target_locales:
        if code in report.skipped_locales:
            log.info(f"{TAG}   - {code}: skipped ({report.skipped_locales[code]})")
            continue
        log.info(f"{TAG}   - {code}: {report.covered_field_count(code)} field(s)")
    log.info("")

    _emit_section(log, "fully covered files", LogColor.GREEN, report.fully_covered)
    _emit_section(
        log,
        "partially covered files",
        LogColor.YELLOW,
        report.partially_covered,
        with_counts=True,
    )
    _emit_section(log, "files not covered", LogColor.RED, report.non_covered)


def emit_dialogue_summary(report: OverlayReport, log: LogSink) -> None:
    """Emit per-locale dialogue update counts."""
    for code, stats in report.dialogue.items():
        log.info(
            f"{TAG} dialogue {code}: updated {stats.elements_updated} element(s), "
            f"{stats.texts_updated} text(s) in total"
        )
