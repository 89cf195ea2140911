# src/vfsreplicator/local.py
"""
Local filesystem implementation of the collaborator protocols.

``LocalFile.copy_from`` follows virtual-filesystem copy semantics: the selected
entries of the source subtree are visited depth first and recreated under the
destination, files by streaming their bytes and folders as directories. An
existing destination entry of the other kind is removed first, which is how a
replicated folder replaces the empty temp file created for it.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterator
from pathlib import Path
from typing import IO

from .interfaces import FileSelectInfo, FileSelector, SourceFile

COPY_BUFFER_SIZE = 64 * 1024


class LocalFile:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"LocalFile({str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LocalFile) and other.path == self.path

    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def base_name(self) -> str:
        return self.path.name

    def exists(self) -> bool:
        return self.path.exists()

    def is_file(self) -> bool:
        return self.path.is_file()

    def is_dir(self) -> bool:
        return self.path.is_dir()

    def open(self) -> IO[bytes]:
        return self.path.open("rb")

    def children(self) -> list[LocalFile]:
        if not self.path.is_dir():
            return []
        return [LocalFile(p) for p in sorted(self.path.iterdir())]

    def find_files(self, selector: FileSelector) -> Iterator[tuple[tuple[str, ...], SourceFile]]:
        yield from _walk(self, self, (), selector)

    def copy_from(self, source: SourceFile, selector: FileSelector) -> None:
        if not source.exists():
            raise FileNotFoundError(f"Source does not exist: {source!r}")

        for rel_parts, entry in list(source.find_files(selector)):
            self._make_parents(rel_parts)
            target = self.path.joinpath(*rel_parts)
            if entry.is_dir():
                if target.exists() and not target.is_dir():
                    target.unlink()
                if not target.is_dir():
                    target.mkdir()
            else:
                if target.is_dir():
                    shutil.rmtree(target)
                with entry.open() as src, target.open("wb") as dst:
                    shutil.copyfileobj(src, dst, COPY_BUFFER_SIZE)

    def _make_parents(self, rel_parts: tuple[str, ...]) -> None:
        # Never creates the destination's own parent.
        for i in range(len(rel_parts)):
            folder = self.path.joinpath(*rel_parts[:i])
            if folder.is_dir():
                continue
            if folder.exists():
                folder.unlink()
            folder.mkdir()


def _walk(
    base: SourceFile, current: SourceFile, rel_parts: tuple[str, ...], selector: FileSelector
) -> Iterator[tuple[tuple[str, ...], SourceFile]]:
    info = FileSelectInfo(file=current, base_folder=base, relative_parts=rel_parts)

    if selector.include_file(info):
        yield (rel_parts, current)

    if current.is_dir() and selector.traverse_descendants(info):
        for child in current.children():
            yield from _walk(base, child, rel_parts + (child.base_name,), selector)


class LocalContext:
    def resolve(self, path: Path) -> LocalFile:
        return LocalFile(path)
