# src/vfsreplicator/selectors.py
"""Stock file selectors."""

from __future__ import annotations

from collections.abc import Iterable
from fnmatch import fnmatch

from .interfaces import FileSelectInfo


class SelectAll:
    def include_file(self, info: FileSelectInfo) -> bool:
        return True

    def traverse_descendants(self, info: FileSelectInfo) -> bool:
        return True


class SelectSelf:
    def include_file(self, info: FileSelectInfo) -> bool:
        return info.depth == 0

    def traverse_descendants(self, info: FileSelectInfo) -> bool:
        return info.depth == 0


class SelectFiles:
    def include_file(self, info: FileSelectInfo) -> bool:
        return info.file.is_file()

    def traverse_descendants(self, info: FileSelectInfo) -> bool:
        return True


class DepthSelector:
    def __init__(self, min_depth: int = 0, max_depth: int | None = None) -> None:
        if min_depth < 0:
            raise ValueError(f"min_depth must be >= 0, got {min_depth}")
        if max_depth is not None and max_depth < min_depth:
            raise ValueError(f"max_depth ({max_depth}) is below min_depth ({min_depth})")
        self.min_depth = min_depth
        self.max_depth = max_depth

    def include_file(self, info: FileSelectInfo) -> bool:
        if info.depth < self.min_depth:
            return False
        return self.max_depth is None or info.depth <= self.max_depth

    def traverse_descendants(self, info: FileSelectInfo) -> bool:
        return self.max_depth is None or info.depth < self.max_depth


class PatternSelector:
    """
    Select files whose path relative to the copy root matches any glob pattern.

    Folders are always traversed and always included so matched files have a
    parent to land in. A single-file source is its own root and matches on its
    base name. '**/' in a pattern also matches zero directories, so '**/*.py'
    selects 'a.py' as well as 'pkg/a.py'.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns = tuple(patterns)
        if not self.patterns:
            raise ValueError("PatternSelector needs at least one pattern")

    def include_file(self, info: FileSelectInfo) -> bool:
        if info.file.is_dir():
            return True
        rel = _relative_name(info)
        return any(_glob_match(rel, p) for p in self.patterns)

    def traverse_descendants(self, info: FileSelectInfo) -> bool:
        return True


def _relative_name(info: FileSelectInfo) -> str:
    if not info.relative_parts:
        return info.file.base_name
    return "/".join(info.relative_parts)


def _glob_match(rel: str, pattern: str) -> bool:
    if fnmatch(rel, pattern):
        return True
    while pattern.startswith("**/"):
        pattern = pattern[3:]
        if fnmatch(rel, pattern):
            return True
    return False
