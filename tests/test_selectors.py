# tests/test_selectors.py

import tempfile
from pathlib import Path

import pytest

from vfsreplicator.interfaces import FileSelectInfo, FileSelector
from vfsreplicator.local import LocalFile
from vfsreplicator.selectors import DepthSelector, PatternSelector, SelectAll, SelectFiles, SelectSelf


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tree(temp_dir):
    root = temp_dir / "root"
    (root / "pkg" / "sub").mkdir(parents=True)
    (root / "a.jar").write_bytes(b"a")
    (root / "readme.txt").write_bytes(b"r")
    (root / "pkg" / "b.jar").write_bytes(b"b")
    (root / "pkg" / "sub" / "c.jar").write_bytes(b"c")
    return root


def _selected(root: Path, selector) -> set[str]:
    return {"/".join(parts) for parts, _ in LocalFile(root).find_files(selector)}


class TestStockSelectors:
    def test_protocol_conformance(self):
        for sel in (SelectAll(), SelectSelf(), SelectFiles(), DepthSelector(), PatternSelector(["*"])):
            assert isinstance(sel, FileSelector)

    def test_select_all(self, tree):
        assert _selected(tree, SelectAll()) == {
            "",
            "a.jar",
            "readme.txt",
            "pkg",
            "pkg/b.jar",
            "pkg/sub",
            "pkg/sub/c.jar",
        }

    def test_select_self(self, tree):
        assert _selected(tree, SelectSelf()) == {""}

    def test_select_files(self, tree):
        assert _selected(tree, SelectFiles()) == {"a.jar", "readme.txt", "pkg/b.jar", "pkg/sub/c.jar"}

    def test_depth_selector(self, tree):
        assert _selected(tree, DepthSelector(1, 1)) == {"a.jar", "readme.txt", "pkg"}
        assert _selected(tree, DepthSelector(2)) == {"pkg/b.jar", "pkg/sub", "pkg/sub/c.jar"}

    def test_depth_selector_validation(self):
        with pytest.raises(ValueError, match="min_depth"):
            DepthSelector(-1)
        with pytest.raises(ValueError, match="below min_depth"):
            DepthSelector(2, 1)

    def test_depth_is_relative_parts_length(self, tree):
        root = LocalFile(tree)
        info = FileSelectInfo(file=root, base_folder=root, relative_parts=("pkg", "b.jar"))
        assert info.depth == 2


class TestPatternSelector:
    def test_recursive_pattern_matches_top_level_too(self, tree):
        selected = _selected(tree, PatternSelector(["**/*.jar"]))
        assert {"a.jar", "pkg/b.jar", "pkg/sub/c.jar"} <= selected
        assert "readme.txt" not in selected

    def test_folders_always_included(self, tree):
        selected = _selected(tree, PatternSelector(["*.txt"]))
        assert {"", "pkg", "pkg/sub"} <= selected

    def test_single_file_root_matches_on_base_name(self, tree):
        assert _selected(tree / "a.jar", PatternSelector(["*.jar"])) == {""}
        assert _selected(tree / "readme.txt", PatternSelector(["*.jar"])) == set()

    def test_needs_pattern(self):
        with pytest.raises(ValueError, match="at least one pattern"):
            PatternSelector([])
