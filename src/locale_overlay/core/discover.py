"""File discovery: lazily find translation files under a locale root."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from locale_overlay.model import Dialect
from locale_overlay.model.source_file import SourceFile

_logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".json", ".json5", ".jsonc")


@dataclass(frozen=True)
class DiscoverConfig:
    """Configuration for one walk.

    ``exclude_dirs`` holds exact directory paths that are never entered;
    a directory elsewhere in the tree with the same name is still walked.
    ``follow_symlinks`` only controls descent into symlinked directories.
    Symlinked files are always yielded.
    """

    root: Path
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude_dirs: frozenset[Path] = field(default_factory=frozenset)
    follow_symlinks: bool = False


def _path_key(path: str | Path) -> str:
    return os.path.normcase(os.path.abspath(path))


def _list_dir(path: str) -> list[os.DirEntry[str]]:
    """Snapshot one directory's entries in filesystem enumeration order."""
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as exc:
        _logger.warning("cannot list directory %s: %s", path, exc)
        return []


def iter_locale_files(cfg: DiscoverConfig) -> Iterator[SourceFile]:
    """Yield ``SourceFile`` descriptors under *cfg.root*, depth-first.

    Subdirectories are visited at the point they are enumerated, so the
    order matches a recursive walk; no sorting is applied.  A missing
    root yields nothing.
    """
    if not cfg.root.is_dir():
        return

    wanted = {e.lower() for e in cfg.extensions}
    excluded = {_path_key(p) for p in cfg.exclude_dirs}
    stack: list[Iterator[os.DirEntry[str]]] = [iter(_list_dir(str(cfg.root)))]

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        try:
            if entry.is_dir(follow_symlinks=cfg.follow_symlinks):
                if _path_key(entry.path) in excluded:
                    _logger.debug("excluded directory %s, skipped", entry.path)
                else:
                    stack.append(iter(_list_dir(entry.path)))
                continue
            if not entry.is_file():
                continue
        except OSError:
            continue

        suffix = os.path.splitext(entry.name)[1].lower()
        if suffix not in wanted:
            continue
        dialect = Dialect.from_suffix(suffix)
        if dialect is None:
            _logger.debug("no parser for %s, skipped", entry.path)
            continue
        yield SourceFile(path=Path(entry.path), dialect=dialect)
