from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class RecordingSink:
    """Log sink that keeps every line for assertions."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.lines.append(("info", message))

    def warning(self, message: str) -> None:
        self.lines.append(("warning", message))

    def error(self, message: str) -> None:
        self.lines.append(("error", message))

    def log_with_color(self, message: str, color) -> None:
        self.lines.append((f"color:{getattr(color, 'value', color)}", message))

    def text(self, level: str | None = None) -> str:
        return "\n".join(m for lvl, m in self.lines if level is None or lvl == level)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def sample_mod() -> Path:
    return FIXTURES / "mods" / "sample_mod"


def write_locale_file(root: Path, rel: str, content: str) -> Path:
    """Create ``root/rel`` (with parents) holding *content*."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def write_file():
    return write_locale_file
