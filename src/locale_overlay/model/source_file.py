"""SourceFile: one candidate translation file found by the walker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from . import Dialect


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A discovered file and the dialect its extension declares."""

    path: Path
    dialect: Dialect

    @property
    def name(self) -> str:
        return self.path.name
