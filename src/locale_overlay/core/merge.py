"""Merge applicator: writes reference-gated keys into the target locale.

Two application strategies produce the same final state:

*  **eager**: ``target[k] = v`` immediately, file by file.
*  **deferred**: one transformer per file is registered on a container
   that supports it (``LazyLocaleTable``) and runs, in registration
   order, no later than the next read of that container.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Mapping, MutableMapping

from locale_overlay.errors import MissingTargetLocale
from locale_overlay.model import MergeStrategy

_logger = logging.getLogger(__name__)

Transformer = Callable[["dict[str, str] | None"], "dict[str, str]"]


class LazyLocaleTable(MutableMapping[str, str]):
    """A locale table that loads on first access and supports transformers.

    Transformers registered with ``add_transformer`` are applied in
    registration order before the first read that follows them.  After
    ``reset()`` the table reloads from *loader* and every registered
    transformer is applied again, so overlays survive reinitialisation.
    """

    def __init__(self, loader: Callable[[], "dict[str, str] | None"]) -> None:
        self._loader = loader
        self._data: dict[str, str] | None = None
        self._loaded = False
        self._transformers: list[Transformer] = []
        self._applied = 0

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def pending(self) -> int:
        """Transformers registered but not yet applied."""
        return len(self._transformers) - self._applied

    def add_transformer(self, transformer: Transformer) -> None:
        self._transformers.append(transformer)

    def reset(self) -> None:
        self._data = None
        self._loaded = False
        self._applied = 0

    def _materialize(self) -> dict[str, str]:
        if not self._loaded:
            self._data = self._loader()
            self._loaded = True
        while self._applied < len(self._transformers):
            self._data = self._transformers[self._applied](self._data)
            self._applied += 1
        if self._data is None:
            self._data = {}
        return self._data

    def __getitem__(self, key: str) -> str:
        return self._materialize()[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._materialize()[key] = value

    def __delitem__(self, key: str) -> None:
        del self._materialize()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._materialize())

    def __len__(self) -> int:
        return len(self._materialize())

    def __repr__(self) -> str:
        state = "loaded" if self._loaded else "unloaded"
        return f"<LazyLocaleTable {state}, {self.pending} pending>"


def _supports_transformers(target: object) -> bool:
    return callable(getattr(target, "add_transformer", None))


def _overlay_transformer(covered: dict[str, str]) -> Transformer:
    def transform(table: dict[str, str] | None) -> dict[str, str]:
        if table is None:
            table = {}
        table.update(covered)
        return table

    return transform


class MergeApplicator:
    """Applies parsed records to one target container, gated by *reference*."""

    def __init__(
        self,
        target: MutableMapping[str, str],
        reference: Mapping[str, str],
        strategy: MergeStrategy = MergeStrategy.AUTO,
        *,
        code: str = "",
    ) -> None:
        deferrable = _supports_transformers(target)
        if strategy is MergeStrategy.AUTO:
            strategy = MergeStrategy.DEFERRED if deferrable else MergeStrategy.EAGER
        elif strategy is MergeStrategy.DEFERRED and not deferrable:
            raise MissingTargetLocale(
                code, "container does not accept deferred transformers"
            )
        self.target = target
        self.reference = reference
        self.strategy = strategy
        self.code = code

    def covered_subset(self, record: Mapping[str, str]) -> dict[str, str]:
        """Keys of *record* known to the reference locale, in record order."""
        return {k: v for k, v in record.items() if k in self.reference}

    def apply(self, record: Mapping[str, str]) -> dict[str, str]:
        """Write (or schedule) the covered part of *record*; return it.

        Keys missing from the reference are dropped silently.
        """
        covered = self.covered_subset(record)
        if not covered:
            return covered
        if self.strategy is MergeStrategy.DEFERRED:
            self.target.add_transformer(_overlay_transformer(covered))  # type: ignore[attr-defined]
        else:
            self.target.update(covered)
        _logger.debug(
            "%s: %d keys %s",
            self.code or "target",
            len(covered),
            "scheduled" if self.strategy is MergeStrategy.DEFERRED else "written",
        )
        return covered
