# src/vfsreplicator/naming.py
"""
Temp file naming.

Base names come from arbitrary, possibly remote, file references and are never
trusted as filesystem names. Reserved characters and the escape marker itself
are percent-encoded, then the escape marker is folded to '_', so the result has
no path separators and nothing left to escape:

    weird?name*.jar  ->  weird%3fname%2a.jar  ->  weird_3fname_2a.jar
    100%.txt         ->  100%25.txt           ->  100_25.txt
"""

from __future__ import annotations

TEMP_PREFIX = "vfsr_"
ESCAPE_CHAR = "%"
RESERVED_CHARS = frozenset("?/\\ &\"'*#;:<>|")


def encode_reserved(name: str, reserved: frozenset[str] = RESERVED_CHARS) -> str:
    return "".join(
        f"{ESCAPE_CHAR}{ord(ch):02x}" if ch == ESCAPE_CHAR or ch in reserved else ch for ch in name
    )


def safe_base_name(name: str) -> str:
    return encode_reserved(name).replace(ESCAPE_CHAR, "_")


def temp_suffix(name: str) -> str:
    return "_" + safe_base_name(name)
