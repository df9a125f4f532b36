"""Runner: orchestrates discovery, parsing, coverage and merge per locale."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, MutableMapping

from locale_overlay.core.config import OverlayConfig
from locale_overlay.core.coverage import classify
from locale_overlay.core.dialogue import run_dialogue_pass
from locale_overlay.core.discover import DiscoverConfig, iter_locale_files
from locale_overlay.core.host import OverlayHost
from locale_overlay.core.merge import MergeApplicator
from locale_overlay.errors import (
    MissingLocaleRoot,
    MissingReferenceLocale,
    MissingTargetLocale,
    OverlayError,
    ParseFailure,
)
from locale_overlay.model.run_result import FileFailure, OverlayReport
from locale_overlay.parsers import parse_file
from locale_overlay.reports.summary import TAG, emit_dialogue_summary, emit_main_summary

_logger = logging.getLogger(__name__)


def _resolve_reference(cfg: OverlayConfig, host: OverlayHost) -> Mapping[str, str]:
    try:
        reference = host.reference_locale(cfg.reference_locale)
    except KeyError:
        reference = None
    if reference is None:
        raise MissingReferenceLocale(cfg.reference_locale)
    return reference


def _resolve_target(code: str, host: OverlayHost) -> MutableMapping[str, str]:
    try:
        target = host.target_locale(code)
    except KeyError as exc:
        raise MissingTargetLocale(code) from exc
    if target is None:
        raise MissingTargetLocale(code)
    return target


def _overlay_locale(
    code: str,
    cfg: OverlayConfig,
    host: OverlayHost,
    report: OverlayReport,
) -> None:
    """Walk, parse, classify and merge every file for one target code."""
    root = cfg.locale_root(code)
    if not root.is_dir():
        raise MissingLocaleRoot(code, root)

    reference = _resolve_reference(cfg, host)
    target = _resolve_target(code, host)
    applicator = MergeApplicator(target, reference, cfg.merge_strategy, code=code)
    covered_keys = report.covered_keys_by_locale.setdefault(code, set())

    exclude: frozenset[Path] = frozenset()
    if cfg.exclude_dialogue_from_main:
        exclude = frozenset({cfg.dialogue_root(code)})
    walk = DiscoverConfig(
        root=root,
        extensions=cfg.extensions,
        exclude_dirs=exclude,
        follow_symlinks=cfg.follow_symlinks,
    )
    for source in iter_locale_files(walk):
        report.files_discovered += 1
        try:
            record = parse_file(source)
        except ParseFailure as exc:
            host.log.error(f"{TAG} failed to parse {source.path}: {exc.message}")
            report.failures.append(FileFailure(path=str(source.path), message=exc.message))
            continue
        report.files_loaded += 1

        result = classify(record, reference, path=source.path)
        if result is None:
            report.files_empty += 1
            continue
        covered_keys.update(applicator.apply(record))
        report.coverage.append(result)

    _logger.debug(
        "%s: %d covered key(s) via %s merge",
        code,
        len(covered_keys),
        applicator.strategy.value,
    )


def run_overlay(cfg: OverlayConfig, host: OverlayHost) -> OverlayReport:
    """Execute the main overlay pass, then the dialogue pass.

    Target codes are processed strictly in configured order.  Nothing in
    here is fatal: missing directories or containers skip a locale, bad
    files are skipped, and the summary is always emitted.
    """
    report = OverlayReport(
        target_locales=tuple(cfg.target_locales),
        reference_locale=cfg.reference_locale,
    )

    for code in cfg.target_locales:
        try:
            _overlay_locale(code, cfg, host, report)
        except MissingLocaleRoot as exc:
            host.log.info(
                f"{TAG} no translation directory for {code!r}; "
                f"expected it at {exc.root}"
            )
            report.skipped_locales[code] = "locale directory not found"
        except (MissingReferenceLocale, MissingTargetLocale) as exc:
            host.log.warning(f"{TAG} {exc}; skipping {code!r}")
            report.skipped_locales[code] = str(exc)
        except OverlayError as exc:
            host.log.error(f"{TAG} {exc}; skipping {code!r}")
            report.skipped_locales[code] = str(exc)

    emit_main_summary(report, host.log)

    run_dialogue_pass(cfg, host, report)
    emit_dialogue_summary(report, host.log)

    return report
