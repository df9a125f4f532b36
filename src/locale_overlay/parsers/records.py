"""Dialect-aware parsing of translation files into flat locale records."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import json5
import jsonschema

from locale_overlay.contracts.load import validate_instance
from locale_overlay.errors import ParseFailure
from locale_overlay.model import Dialect
from locale_overlay.model.source_file import SourceFile
from locale_overlay.parsers.comments import strip_json_comments, strip_trailing_commas

_logger = logging.getLogger(__name__)

LocaleRecord = dict[str, str]

_RECORD_SCHEMA = "locale_record.schema.json"


def _decode_json(text: str) -> Any:
    return json.loads(text)


def _decode_json5(text: str) -> Any:
    return json5.loads(text)


def _decode_jsonc(text: str) -> Any:
    return json.loads(strip_trailing_commas(strip_json_comments(text)))


_DECODERS = {
    Dialect.JSON: _decode_json,
    Dialect.JSON5: _decode_json5,
    Dialect.JSONC: _decode_jsonc,
}


def _check_record(data: Any, path: Path | str | None) -> LocaleRecord:
    """Enforce the flat ``{str: str}`` contract; non-strings are never coerced."""
    if not isinstance(data, dict):
        raise ParseFailure(
            path, f"top-level value must be an object, got {type(data).__name__}"
        )
    try:
        validate_instance(data, _RECORD_SCHEMA)
    except jsonschema.ValidationError as exc:
        key = exc.path[0] if exc.path else "?"
        got = type(data.get(key)).__name__ if key in data else "unknown"
        raise ParseFailure(
            path, f"value for key {key!r} must be a string, got {got}"
        ) from exc
    return data


def parse_text(
    text: str, dialect: Dialect, *, path: Path | str | None = None
) -> LocaleRecord:
    """Parse *text* written in *dialect* into a flat locale record.

    Raises ``ParseFailure`` on any grammar violation, a non-object top
    level, or a non-string value.  Duplicate keys resolve last-wins.
    """
    try:
        data = _DECODERS[dialect](text)
    except (ValueError, RecursionError) as exc:
        raise ParseFailure(path, f"invalid {dialect.value}: {exc}") from exc
    return _check_record(data, path)


def parse_file(source: SourceFile) -> LocaleRecord:
    """Read *source* completely, then parse it according to its dialect."""
    try:
        with open(source.path, encoding="utf-8-sig") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseFailure(source.path, f"cannot read file: {exc}") from exc

    record = parse_text(text, source.dialect, path=source.path)
    _logger.debug("parsed %s (%s): %d keys", source.path, source.dialect.value, len(record))
    return record
