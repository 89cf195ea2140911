# src/vfsreplicator/enums.py
from enum import Enum


class Stage(str, Enum):
    directory = "directory"
    create = "create"
    copy = "copy"
