"""Dialogue overlay: patches existing dialogue text entries per locale.

Runs after the main pass, over ``<code>/dialogue/``.  Records from that
subtree are merged last-write-wins into one combined record that is
neither gated by the reference locale nor counted toward coverage.  An
element only receives a text-id it already carries in some locale.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping

from locale_overlay.core.config import OverlayConfig
from locale_overlay.core.discover import DiscoverConfig, iter_locale_files
from locale_overlay.core.host import OverlayHost
from locale_overlay.errors import DialoguePassFailure, ParseFailure
from locale_overlay.model.dialogue import DialogueElement
from locale_overlay.model.run_result import DialogueStats, FileFailure, OverlayReport
from locale_overlay.parsers import parse_file

_logger = logging.getLogger(__name__)

_TAG = "[dialogue]"


def collect_dialogue_record(
    root: Path,
    cfg: OverlayConfig,
    host: OverlayHost,
    report: OverlayReport,
) -> tuple[dict[str, str], int]:
    """Parse every file under *root* into one record; later files win.

    Unparseable files are logged, recorded on *report*, and skipped.
    Returns the combined record and the number of files that contributed.
    """
    combined: dict[str, str] = {}
    loaded = 0
    walk = DiscoverConfig(
        root=root,
        extensions=cfg.extensions,
        follow_symlinks=cfg.follow_symlinks,
    )
    for source in iter_locale_files(walk):
        try:
            record = parse_file(source)
        except ParseFailure as exc:
            host.log.error(f"{_TAG} failed to parse {source.path}: {exc.message}")
            report.failures.append(FileFailure(path=str(source.path), message=exc.message))
            continue
        if not record:
            continue
        loaded += 1
        combined.update(record)
    return combined, loaded


def _text_id_exists(localization: Mapping[str, Mapping[str, str]], text_id: str) -> bool:
    return any(text_id in texts for texts in localization.values() if texts)


def apply_dialogue_record(
    elements: Iterable[DialogueElement],
    record: Mapping[str, str],
    code: str,
) -> DialogueStats:
    """Overlay *record* onto each element's *code* map.

    The *code* sub-map (and the ``localization`` map itself) is created
    when absent; no element or text-id is ever created.
    """
    stats = DialogueStats(locale=code, text_ids_available=len(record))
    for element in elements:
        if element.localization is None:
            element.localization = {}
        localization = element.localization
        target = localization.get(code)
        if target is None:
            target = localization[code] = {}

        updated = 0
        for text_id, text in record.items():
            if _text_id_exists(localization, text_id):
                target[text_id] = text
                updated += 1

        if updated:
            stats.elements_updated += 1
            stats.texts_updated += updated
    return stats


def run_dialogue_pass(cfg: OverlayConfig, host: OverlayHost, report: OverlayReport) -> None:
    """Run the dialogue overlay for every target code, in order.

    Any failure is caught here, logged, and stored on ``report.dialogue_error``;
    it never reaches the already-completed main pass.
    """
    try:
        for code in cfg.target_locales:
            root = cfg.dialogue_root(code)
            if not root.is_dir():
                _logger.debug("no dialogue directory for %s at %s", code, root)
                continue

            record, loaded = collect_dialogue_record(root, cfg, host, report)
            if not record:
                continue

            elements = host.dialogue_elements()
            if elements is None:
                raise DialoguePassFailure("host dialogue store is unavailable")

            stats = apply_dialogue_record(elements, record, code)
            stats.files_loaded = loaded
            report.dialogue[code] = stats
    except Exception as exc:
        _logger.exception("dialogue pass aborted")
        report.dialogue_error = str(exc) or type(exc).__name__
        host.log.error(f"{_TAG} processing failed: {report.dialogue_error}")
