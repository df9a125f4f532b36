"""Error taxonomy for the overlay run.

None of these is fatal to a run: the runner catches each one at the
scope it names (file, locale, or dialogue pass) and keeps going.
"""

from __future__ import annotations

from pathlib import Path


class OverlayError(Exception):
    """Base class for every condition the overlay engine reports."""


class MissingLocaleRoot(OverlayError):
    """The directory for a configured locale code does not exist."""

    def __init__(self, code: str, root: Path) -> None:
        super().__init__(f"locale directory not found for {code!r}: {root}")
        self.code = code
        self.root = root


class ParseFailure(OverlayError):
    """A file's content is malformed for its declared dialect."""

    def __init__(self, path: Path | str | None, message: str) -> None:
        where = str(path) if path is not None else "<text>"
        super().__init__(f"{where}: {message}")
        self.path = path
        self.message = message


class MissingReferenceLocale(OverlayError):
    """The host has no container for the reference locale."""

    def __init__(self, code: str) -> None:
        super().__init__(f"reference locale {code!r} is not available on the host")
        self.code = code


class MissingTargetLocale(OverlayError):
    """The host has no usable container for a configured target code."""

    def __init__(self, code: str, detail: str = "") -> None:
        msg = f"target locale {code!r} does not exist on the host"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
        self.code = code


class DialoguePassFailure(OverlayError):
    """Anything that went wrong inside the dialogue overlay pass."""
