"""Host seam: the accessors and log sink the overlay engine runs against.

The host owns the locale tables and the dialogue store; the engine only
reads the reference locale and mutates the target locale and dialogue
elements through the callables held by ``OverlayHost``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Mapping, MutableMapping, Protocol

from locale_overlay.model.dialogue import DialogueElement


class LogColor(str, Enum):
    """Highlight colours for report section headers."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class LogSink(Protocol):
    """Where user-facing report lines go.  No behavioural coupling."""

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def log_with_color(self, message: str, color: LogColor) -> None: ...


class LoggingSink:
    """Default sink: forwards to a stdlib logger.

    The colour travels as ``extra={"color": ...}`` so a host formatter can
    render it; plain handlers simply ignore it.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("locale_overlay.report")

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def log_with_color(self, message: str, color: LogColor) -> None:
        self.logger.info(message, extra={"color": LogColor(color).value})


ReferenceAccessor = Callable[[str], "Mapping[str, str] | None"]
TargetAccessor = Callable[[str], "MutableMapping[str, str] | None"]
DialogueAccessor = Callable[[], "Iterable[DialogueElement] | None"]


def _no_dialogue() -> None:
    return None


@dataclass
class OverlayHost:
    """Plain bundle of host accessors passed to ``run_overlay``.

    ``target_locale`` may return ``None`` or raise ``KeyError`` /
    ``MissingTargetLocale`` for an unknown code; that code is then skipped.
    """

    reference_locale: ReferenceAccessor
    target_locale: TargetAccessor
    dialogue_elements: DialogueAccessor = _no_dialogue
    log: LogSink = field(default_factory=LoggingSink)

    @classmethod
    def from_tables(
        cls,
        locales: Mapping[str, MutableMapping[str, str]],
        dialogue: list[DialogueElement] | None = None,
        *,
        log: LogSink | None = None,
    ) -> "OverlayHost":
        """Wrap in-memory ``{code: table}`` locales and a dialogue list."""
        return cls(
            reference_locale=locales.get,
            target_locale=locales.get,
            dialogue_elements=lambda: dialogue,
            log=log or LoggingSink(),
        )
