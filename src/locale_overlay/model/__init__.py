"""Enums shared across the parser, engine and report layers."""

from __future__ import annotations

from enum import Enum


class Dialect(str, Enum):
    """Text dialect of a translation file, keyed by its extension."""

    JSON = "json"
    JSON5 = "json5"
    JSONC = "jsonc"

    @classmethod
    def from_suffix(cls, suffix: str) -> "Dialect | None":
        """Map ``.JSONC`` / ``.json5`` / ``json`` to a dialect, case-insensitively."""
        name = suffix.lower().lstrip(".")
        for member in cls:
            if member.value == name:
                return member
        return None


class CoverageBucket(str, Enum):
    """How much of a file's key set the reference locale knows about."""

    FULLY_COVERED = "fully_covered"
    PARTIALLY_COVERED = "partially_covered"
    NON_COVERED = "non_covered"


class MergeStrategy(str, Enum):
    """When covered keys land in the target container."""

    EAGER = "eager"
    DEFERRED = "deferred"
    AUTO = "auto"
