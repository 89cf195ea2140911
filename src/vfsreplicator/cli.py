#!/usr/bin/env python3
# src/vfsreplicator/cli.py


from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from .config import ReplicatorSettings, default_temp_dir, load_settings
from .errors import ConfigError, ReplicationError
from .local import LocalFile
from .naming import safe_base_name

app = typer.Typer(
    name="vfsreplicator",
    help="Materialize files as uniquely-named local temp copies, cleaned up on exit.",
    add_completion=False,
)

_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def _verbosity_callback(value: int):
    return max(0, min(value, 2))


def _configure_logging(verbose: int) -> None:
    logging.basicConfig(
        level=_LEVELS.get(verbose, logging.DEBUG),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command()
def replicate(
    sources: list[Path] = typer.Argument(..., help="Files or directories to replicate"),
    temp_dir: Path | None = typer.Option(None, "--temp-dir", help="Directory for replicas (default: <tmp>/vfsr)"),
    pattern: list[str] | None = typer.Option(
        None, "--pattern", help="Glob of files to include when replicating a directory (repeatable)"
    ),
    config: Path | None = typer.Option(None, "--config", exists=True, dir_okay=False, help="YAML settings file"),
    keep: bool = typer.Option(False, "--keep", help="Leave replicas on disk instead of cleaning up"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, callback=_verbosity_callback),
) -> None:
    _configure_logging(verbose)

    overrides = {"temp_dir": temp_dir, "patterns": pattern or None}
    if keep:
        overrides["register_exit_hook"] = False

    try:
        if config is not None:
            settings = load_settings(config, **overrides)
        else:
            settings = ReplicatorSettings(**{k: v for k, v in overrides.items() if v is not None})
    except (ConfigError, ValueError) as e:
        print(f"❌ {e}")
        raise typer.Exit(1) from e

    replicator = settings.build()
    selector = settings.selector()
    failed = False

    try:
        for src in sources:
            try:
                replica = replicator.replicate_file(LocalFile(src), selector)
            except ReplicationError as e:
                cause = f": {e.__cause__}" if e.__cause__ else ""
                print(f"❌ [{e.stage.value}] {e}{cause}")
                failed = True
                continue
            print(replica)
    finally:
        if not keep:
            replicator.close()

    if failed:
        raise typer.Exit(1)


@app.command()
def sanitize(names: list[str] = typer.Argument(..., help="Base names to sanitize")) -> None:
    for name in names:
        print(safe_base_name(name))


@app.command()
def diagnose() -> None:
    print("vfsreplicator Environment Check\n")

    deps = {
        "yaml": "PyYAML",
        "pydantic": "Pydantic",
        "typer": "Typer",
    }

    print("Dependencies")
    print("-" * 50)
    print(f"{'Package':<30} {'Status':<10} {'Version'}")
    print("-" * 50)

    for module, name in deps.items():
        try:
            m = __import__(module)
            version = getattr(m, "__version__", "unknown")
            print(f"{name:<30} {'[OK]':<10} {version}")
        except ImportError:
            print(f"{name:<30} {'[MISSING]':<10} {'not installed'}")

    print(f"\nDefault temp dir: {default_temp_dir()}")
    print(f"Python: {sys.version}")


if __name__ == "__main__":
    app()
