# src/vfsreplicator/replicator.py
"""
Unique file replicator.

Materializes a (possibly remote or virtual) file as a real local file inside an
owned temp directory, and deletes everything it created on close.
"""

from __future__ import annotations

import atexit
import logging
import os
import shutil
import tempfile
import threading
import weakref
from pathlib import Path

from .errors import (
    ContextNotSetError,
    CopyError,
    DirectoryMissingError,
    ReplicatorClosedError,
    TempFileCreationError,
)
from .interfaces import Context, FileSelector, SourceFile
from .naming import TEMP_PREFIX, temp_suffix

logger = logging.getLogger(__name__)

_exit_registry: weakref.WeakSet[UniqueFileReplicator] = weakref.WeakSet()


def _cleanup_open_replicators() -> None:
    # Safety net only; close() is the normal cleanup path.
    for replicator in list(_exit_registry):
        replicator._cleanup_at_exit()


atexit.register(_cleanup_open_replicators)


class UniqueFileReplicator:
    def __init__(self, temp_dir: Path | str, register_exit_hook: bool = True) -> None:
        self.temp_dir = Path(temp_dir)
        self._context: Context | None = None
        self._logger: logging.Logger | None = None
        self._tmp_files: set[Path] = set()
        self._lock = threading.Lock()
        self._closed = False

        try:
            self.temp_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # Surfaces as DirectoryMissingError on the first replicate_file().
            self.log.warning("Unexpected error creating directory %s: %s", self.temp_dir.absolute(), e)

        if register_exit_hook:
            _exit_registry.add(self)

    def __repr__(self) -> str:
        return f"UniqueFileReplicator({str(self.temp_dir)!r})"

    def __enter__(self) -> UniqueFileReplicator:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    @property
    def log(self) -> logging.Logger:
        return self._logger if self._logger is not None else logger

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def tracked_files(self) -> frozenset[Path]:
        with self._lock:
            return frozenset(self._tmp_files)

    def set_context(self, context: Context) -> None:
        self._context = context

    def set_logger(self, log: logging.Logger | None) -> None:
        self._logger = log

    def init(self) -> None:
        pass

    def replicate_file(self, source: SourceFile, selector: FileSelector) -> Path:
        """
        Copy ``source`` (restricted by ``selector``) into a new unique temp file.

        The file is named ``vfsr_<random>_<sanitized base name>`` and tracked for
        deletion on close. If the copy fails the file stays on disk, still
        tracked, and CopyError is raised. A close() that runs while the copy is in
        flight wins: the replica is removed and CopyError is raised.

        Raises:
            ContextNotSetError: set_context() was never called
            ReplicatorClosedError: close() already ran
            DirectoryMissingError: the temp directory is gone
            TempFileCreationError: the unique file could not be created
            CopyError: the content transfer failed
        """
        base_name = source.base_name

        context = self._context
        if context is None:
            raise ContextNotSetError()

        suffix = temp_suffix(base_name)

        with self._lock:
            if self._closed:
                raise ReplicatorClosedError(self.temp_dir)
            if not self.temp_dir.is_dir():
                raise DirectoryMissingError(self.temp_dir.absolute())
            try:
                fd, name = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=suffix, dir=self.temp_dir)
            except (OSError, ValueError) as e:
                raise TempFileCreationError(self.temp_dir) from e
            os.close(fd)
            path = Path(name)
            self._tmp_files.add(path)

        self.log.debug("Created %s for %r", path, base_name)

        try:
            destination = context.resolve(path)
            destination.copy_from(source, selector)
        except Exception as e:
            self._discard_if_closed(path)
            raise CopyError(base_name, path) from e

        if self._discard_if_closed(path):
            raise CopyError(base_name, path) from ReplicatorClosedError(self.temp_dir)

        return path

    def close(self) -> None:
        with self._lock:
            self._closed = True
            for tmp_file in self._tmp_files:
                self._delete(tmp_file)
            self._tmp_files.clear()

        self._remove_dir_if_empty()

        _exit_registry.discard(self)

    def _discard_if_closed(self, path: Path) -> bool:
        # A close() that ran during the copy no longer tracks this path.
        with self._lock:
            if not self._closed:
                return False
            self._delete(path)
        self._remove_dir_if_empty()
        return True

    def _delete(self, path: Path) -> None:
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except FileNotFoundError:
            self.log.debug("File does not exist: %s", path.absolute())
        except OSError as e:
            self.log.warning("Cannot delete %s: %s", path.absolute(), e)
        else:
            self.log.debug("Deleted %s", path)

    def _remove_dir_if_empty(self) -> None:
        try:
            if not self.temp_dir.is_dir() or any(self.temp_dir.iterdir()):
                return
            self.temp_dir.rmdir()
        except OSError as e:
            self.log.warning("Cannot delete empty directory %s: %s", self.temp_dir.absolute(), e)

    def _cleanup_at_exit(self) -> None:
        with self._lock:
            for tmp_file in self._tmp_files:
                self._delete(tmp_file)
            self._tmp_files.clear()
