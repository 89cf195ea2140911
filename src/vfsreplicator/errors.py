# src/vfsreplicator/errors.py
"""
Error taxonomy.

Every failure of ``UniqueFileReplicator.replicate_file`` is a ``ReplicationError``
whose ``stage`` says which step broke. The underlying cause is chained.
"""

from __future__ import annotations

from pathlib import Path

from .enums import Stage


class ReplicationError(Exception):
    stage: Stage

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DirectoryMissingError(ReplicationError):
    stage = Stage.directory

    def __init__(self, path: Path) -> None:
        super().__init__(f"Directory no longer exists: {path}", path)


class TempFileCreationError(ReplicationError):
    stage = Stage.create

    def __init__(self, path: Path) -> None:
        super().__init__(f"Error creating temp file in directory: {path}", path)


class CopyError(ReplicationError):
    stage = Stage.copy

    def __init__(self, source_name: str, path: Path) -> None:
        super().__init__(f"Error copying {source_name!r} to {path}", path)
        self.source_name = source_name


class ReplicatorStateError(RuntimeError):
    pass


class ContextNotSetError(ReplicatorStateError):
    def __init__(self) -> None:
        super().__init__("No context set; call set_context() before replicate_file()")


class ReplicatorClosedError(ReplicatorStateError):
    def __init__(self, temp_dir: Path) -> None:
        super().__init__(f"Replicator for {temp_dir} is closed")


class ConfigError(ValueError):
    pass
