"""
locale_overlay.api
==================

Programmatic entrypoints for hosts and tooling.

Goals:
  - No argparse / CLI dependencies
  - Plain in-memory tables in, ``OverlayReport`` out

Non-goals:
  - Owning persistence: the host owns every table that gets mutated

Usage::

    from locale_overlay.api import overlay_tables

    locales = {"en": en_table, "ch": ch_table}
    report = overlay_tables("user/mods/my-translation", locales)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, MutableMapping

from locale_overlay.core.config import OverlayConfig
from locale_overlay.core.host import LogSink, OverlayHost
from locale_overlay.core.runner import run_overlay
from locale_overlay.model import MergeStrategy
from locale_overlay.model.dialogue import DialogueElement
from locale_overlay.model.run_result import OverlayReport


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


# ── overlay_tables ──────────────────────────────────────────────────


def overlay_tables(
    mod_root: str | Path,
    locales: MutableMapping[str, MutableMapping[str, str]],
    dialogue: list[DialogueElement] | None = None,
    *,
    target_locales: tuple[str, ...] | None = None,
    reference_locale: str | None = None,
    strategy: MergeStrategy | str | None = None,
    log: LogSink | None = None,
) -> OverlayReport:
    """Run the full overlay against ``{code: table}`` *locales* in memory.

    Unset keyword options fall back to ``OverlayConfig.from_env``.
    """
    overrides: dict[str, Any] = {}
    if target_locales is not None:
        overrides["target_locales"] = tuple(target_locales)
    if reference_locale is not None:
        overrides["reference_locale"] = reference_locale
    if strategy is not None:
        overrides["merge_strategy"] = MergeStrategy(strategy)

    cfg = OverlayConfig.from_env(_to_path(mod_root), **overrides)
    host = OverlayHost.from_tables(locales, dialogue, log=log)
    return run_overlay(cfg, host)


# ── file-backed host tables ─────────────────────────────────────────


def load_table(path: str | Path) -> dict[str, str]:
    """Load a host locale table dumped as a flat JSON object."""
    data = json.loads(_to_path(path).read_text(encoding="utf-8-sig"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return {str(k): v for k, v in data.items()}


def load_dialogue_elements(path: str | Path) -> list[DialogueElement]:
    """Load dialogue elements from JSON.

    Accepts either ``{element_id: {code: {text_id: text}}}`` or a list of
    ``{"id": ..., "localization": {...}}`` objects.
    """
    data = json.loads(_to_path(path).read_text(encoding="utf-8-sig"))
    if isinstance(data, dict):
        return [
            DialogueElement(element_id=str(eid), localization=loc)
            for eid, loc in data.items()
        ]
    if isinstance(data, list):
        return [
            DialogueElement(
                element_id=str(item.get("id", item.get("_id", i))),
                localization=item.get("localization"),
            )
            for i, item in enumerate(data)
        ]
    raise ValueError(f"{path}: expected a JSON object or array")
