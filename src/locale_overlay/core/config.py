"""Overlay configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from locale_overlay.core.discover import DEFAULT_EXTENSIONS
from locale_overlay.model import MergeStrategy

_ENV_PREFIX = "LOCALE_OVERLAY_"


@dataclass(frozen=True)
class OverlayConfig:
    """Immutable run configuration.

    Translation files live under ``<mod_root>/<locales_dir>/<code>/``;
    ``<code>/<dialogue_dir>/`` belongs to the dialogue pass.
    """

    mod_root: Path
    locales_dir: Path = Path("db") / "locales"
    target_locales: tuple[str, ...] = ("ch",)
    reference_locale: str = "en"
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    dialogue_dir: str = "dialogue"
    exclude_dialogue_from_main: bool = True
    merge_strategy: MergeStrategy = MergeStrategy.AUTO
    follow_symlinks: bool = False

    def locale_root(self, code: str) -> Path:
        return self.mod_root / self.locales_dir / code

    def dialogue_root(self, code: str) -> Path:
        return self.locale_root(code) / self.dialogue_dir

    @classmethod
    def from_env(cls, mod_root: Path, **overrides: object) -> "OverlayConfig":
        """Build a config, letting ``LOCALE_OVERLAY_*`` env vars override defaults.

        Explicit keyword *overrides* win over the environment.
        """
        values: dict[str, object] = {}

        targets = os.getenv(_ENV_PREFIX + "TARGETS")
        if targets:
            values["target_locales"] = tuple(
                code.strip() for code in targets.split(",") if code.strip()
            )
        reference = os.getenv(_ENV_PREFIX + "REFERENCE")
        if reference:
            values["reference_locale"] = reference.strip()
        strategy = os.getenv(_ENV_PREFIX + "STRATEGY")
        if strategy:
            values["merge_strategy"] = MergeStrategy(strategy.strip().lower())
        include_dialogue = os.getenv(_ENV_PREFIX + "INCLUDE_DIALOGUE")
        if include_dialogue is not None:
            values["exclude_dialogue_from_main"] = include_dialogue.lower() not in (
                "true",
                "1",
                "yes",
            )

        values.update(overrides)
        return cls(mod_root=Path(mod_root), **values)  # type: ignore[arg-type]
