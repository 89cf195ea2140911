# src/vfsreplicator/config.py
"""
Replicator settings.

A settings file is plain YAML:

    temp_dir: /var/tmp/vfsr
    patterns:
      - "**/*.jar"
    register_exit_hook: true
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .interfaces import FileSelector
from .local import LocalContext
from .replicator import UniqueFileReplicator
from .selectors import PatternSelector, SelectAll


def default_temp_dir() -> Path:
    return Path(tempfile.gettempdir()) / "vfsr"


class ReplicatorSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    temp_dir: Path = Field(default_factory=default_temp_dir)
    patterns: list[str] = Field(default_factory=lambda: ["**/*"])
    register_exit_hook: bool = True

    @field_validator("patterns")
    @classmethod
    def _patterns_not_blank(cls, v: list[str]) -> list[str]:
        cleaned = [p.strip() for p in v if p.strip()]
        if not cleaned:
            raise ValueError("at least one non-empty pattern is required")
        return cleaned

    def selector(self) -> FileSelector:
        if self.patterns == ["**/*"]:
            return SelectAll()
        return PatternSelector(self.patterns)

    def build(self) -> UniqueFileReplicator:
        replicator = UniqueFileReplicator(self.temp_dir, register_exit_hook=self.register_exit_hook)
        replicator.set_context(LocalContext())
        replicator.init()
        return replicator


def load_yaml_safe(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_settings(path: Path, **overrides: Any) -> ReplicatorSettings:
    """Load settings from a YAML file; non-None ``overrides`` win over file values."""
    try:
        data = load_yaml_safe(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ReplicatorSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}:\n{e}") from e
