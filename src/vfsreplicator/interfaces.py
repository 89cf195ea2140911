# src/vfsreplicator/interfaces.py
"""Collaborator protocols consumed by the replicator.

The replicator never touches source bytes itself. It asks a ``Context`` to turn
its freshly created temp path into a ``DestinationFile`` living in the same
namespace as the source, and lets that handle pull the content across.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Protocol, runtime_checkable


@runtime_checkable
class SourceFile(Protocol):
    """A readable file or folder, possibly remote or virtual."""

    @property
    def base_name(self) -> str:
        """Final segment of the file's name, untrusted."""
        ...

    def exists(self) -> bool: ...

    def is_file(self) -> bool: ...

    def is_dir(self) -> bool: ...

    def open(self) -> IO[bytes]: ...

    def children(self) -> list[SourceFile]: ...

    def find_files(self, selector: FileSelector) -> Iterator[tuple[tuple[str, ...], SourceFile]]:
        """Yield ``(relative_parts, file)`` for every selected entry, depth first.

        The root itself is yielded with empty ``relative_parts`` when selected.
        """
        ...


@dataclass(frozen=True, slots=True)
class FileSelectInfo:
    file: SourceFile
    base_folder: SourceFile
    relative_parts: tuple[str, ...]

    @property
    def depth(self) -> int:
        return len(self.relative_parts)


@runtime_checkable
class FileSelector(Protocol):
    """Filter restricting which entries of a subtree take part in a copy."""

    def include_file(self, info: FileSelectInfo) -> bool: ...

    def traverse_descendants(self, info: FileSelectInfo) -> bool: ...


@runtime_checkable
class DestinationFile(Protocol):
    @property
    def path(self) -> Path: ...

    def copy_from(self, source: SourceFile, selector: FileSelector) -> None: ...


@runtime_checkable
class Context(Protocol):
    def resolve(self, path: Path) -> DestinationFile:
        """Map a local path into the namespace the sources live in."""
        ...
