"""Tests for lazy locale-file discovery."""

from __future__ import annotations

import types
from pathlib import Path

import pytest

from locale_overlay.core.discover import DiscoverConfig, iter_locale_files
from locale_overlay.model import Dialect


def _names(cfg: DiscoverConfig) -> set[str]:
    return {sf.path.relative_to(cfg.root).as_posix() for sf in iter_locale_files(cfg)}


class TestIterLocaleFiles:
    def test_missing_root_yields_nothing(self, tmp_path: Path):
        assert list(iter_locale_files(DiscoverConfig(root=tmp_path / "nope"))) == []

    def test_root_that_is_a_file_yields_nothing(self, tmp_path: Path):
        f = tmp_path / "a.json"
        f.write_text("{}")
        assert list(iter_locale_files(DiscoverConfig(root=f))) == []

    def test_returns_lazy_iterator(self, tmp_path: Path):
        it = iter_locale_files(DiscoverConfig(root=tmp_path))
        assert isinstance(it, types.GeneratorType)

    def test_filters_extensions_case_insensitively(self, tmp_path: Path, write_file):
        for name in ("a.json", "B.JSON5", "c.JsonC", "d.txt", "e.json.bak", "f"):
            write_file(tmp_path, name, "{}")
        found = {sf.path.name: sf.dialect for sf in iter_locale_files(DiscoverConfig(root=tmp_path))}
        assert found == {
            "a.json": Dialect.JSON,
            "B.JSON5": Dialect.JSON5,
            "c.JsonC": Dialect.JSONC,
        }

    def test_recurses_into_subdirectories(self, tmp_path: Path, write_file):
        write_file(tmp_path, "top.json", "{}")
        write_file(tmp_path, "a/mid.jsonc", "{}")
        write_file(tmp_path, "a/b/c/deep.json5", "{}")
        assert _names(DiscoverConfig(root=tmp_path)) == {
            "top.json",
            "a/mid.jsonc",
            "a/b/c/deep.json5",
        }

    def test_excluded_dir_matches_exact_path_only(self, tmp_path: Path, write_file):
        write_file(tmp_path, "keep.json", "{}")
        write_file(tmp_path, "dialogue/skip.json", "{}")
        write_file(tmp_path, "nested/dialogue/keep2.json", "{}")
        cfg = DiscoverConfig(root=tmp_path, exclude_dirs=frozenset({tmp_path / "dialogue"}))
        assert _names(cfg) == {"keep.json", "nested/dialogue/keep2.json"}

    def test_directory_named_like_a_file_is_not_yielded(self, tmp_path: Path, write_file):
        write_file(tmp_path, "odd.json/inner.json", "{}")
        assert _names(DiscoverConfig(root=tmp_path)) == {"odd.json/inner.json"}

    def test_subtree_files_are_contiguous(self, tmp_path: Path, write_file):
        """Depth-first: a directory's files are yielded together."""
        write_file(tmp_path, "x/1.json", "{}")
        write_file(tmp_path, "x/2.json", "{}")
        write_file(tmp_path, "y/1.json", "{}")
        write_file(tmp_path, "y/2.json", "{}")
        parents = [sf.path.parent.name for sf in iter_locale_files(DiscoverConfig(root=tmp_path))]
        assert len(parents) == 4
        assert parents[0] == parents[1]
        assert parents[2] == parents[3]
        assert parents[0] != parents[2]

    def test_custom_extension_set(self, tmp_path: Path, write_file):
        write_file(tmp_path, "a.json", "{}")
        write_file(tmp_path, "b.jsonc", "{}")
        cfg = DiscoverConfig(root=tmp_path, extensions=(".JSONC",))
        assert _names(cfg) == {"b.jsonc"}


def _symlink(link: Path, target: Path, *, is_dir: bool = False) -> None:
    try:
        link.symlink_to(target, target_is_directory=is_dir)
    except (OSError, NotImplementedError) as exc:
        pytest.skip(f"symlinks unavailable: {exc}")


class TestSymlinks:
    def test_symlinked_file_is_yielded(self, tmp_path: Path, write_file):
        target = write_file(tmp_path, "store/a.json", '{"greeting": "hi"}')
        root = tmp_path / "ch"
        root.mkdir()
        _symlink(root / "a.json", target)

        found = list(iter_locale_files(DiscoverConfig(root=root)))

        assert [sf.path.name for sf in found] == ["a.json"]
        assert found[0].dialect is Dialect.JSON

    def test_dangling_symlink_is_skipped(self, tmp_path: Path):
        root = tmp_path / "ch"
        root.mkdir()
        _symlink(root / "gone.json", tmp_path / "missing.json")
        assert list(iter_locale_files(DiscoverConfig(root=root))) == []

    def test_symlinked_dir_entered_only_when_following(self, tmp_path: Path, write_file):
        write_file(tmp_path, "shared/s.json", "{}")
        root = tmp_path / "ch"
        root.mkdir()
        _symlink(root / "linked", tmp_path / "shared", is_dir=True)

        assert _names(DiscoverConfig(root=root)) == set()
        assert _names(DiscoverConfig(root=root, follow_symlinks=True)) == {"linked/s.json"}
