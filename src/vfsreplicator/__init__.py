# src/vfsreplicator/__init__.py
"""Unique-name local replicas of virtual files, tracked for cleanup."""

from .enums import Stage
from .errors import (
    ConfigError,
    ContextNotSetError,
    CopyError,
    DirectoryMissingError,
    ReplicationError,
    ReplicatorClosedError,
    ReplicatorStateError,
    TempFileCreationError,
)
from .local import LocalContext, LocalFile
from .naming import safe_base_name
from .replicator import UniqueFileReplicator
from .selectors import DepthSelector, PatternSelector, SelectAll, SelectFiles, SelectSelf

__all__ = [
    "ConfigError",
    "ContextNotSetError",
    "CopyError",
    "DepthSelector",
    "DirectoryMissingError",
    "LocalContext",
    "LocalFile",
    "PatternSelector",
    "ReplicationError",
    "ReplicatorClosedError",
    "ReplicatorStateError",
    "SelectAll",
    "SelectFiles",
    "SelectSelf",
    "Stage",
    "TempFileCreationError",
    "UniqueFileReplicator",
    "safe_base_name",
]
