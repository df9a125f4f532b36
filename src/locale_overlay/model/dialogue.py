"""DialogueElement: host entity carrying per-locale dialogue text."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class DialogueElement:
    """One dialogue template element.

    ``localization`` maps a locale code to a ``{text_id: text}`` map.  Hosts
    may hand in their own objects instead; the resolver only relies on a
    writable ``localization`` attribute.
    """

    element_id: str
    localization: dict[str, dict[str, str]] | None = field(default_factory=dict)
