"""Parsers turn raw translation files into flat ``{key: text}`` records.

Three dialects are recognised by file extension:

    - ``.json`` : strict JSON
    - ``.json5``: relaxed JSON5 (via the ``json5`` package)
    - ``.jsonc``: JSON with comments and trailing commas
"""

from __future__ import annotations

from locale_overlay.parsers.comments import strip_json_comments, strip_trailing_commas
from locale_overlay.parsers.records import LocaleRecord, parse_file, parse_text

__all__ = [
    "LocaleRecord",
    "parse_file",
    "parse_text",
    "strip_json_comments",
    "strip_trailing_commas",
]
