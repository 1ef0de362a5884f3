"""Regenerate SeaORM entity sources: delete generated files in the entity dir, then run sea-orm-cli there."""

from __future__ import annotations

import fnmatch
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from las_tooling.config import resolve_config
from las_tooling.helpers import run_command

log = logging.getLogger(__name__)


def remove_generated_files(src_dir: Path, pattern: str) -> list[Path]:
    """Delete entries directly inside src_dir matching pattern, the way rm -- <pattern> would.

    Hidden names only match a pattern that starts with ".". Files and symlinks
    (dangling ones included) are removed; a matching directory is not, and
    raises IsADirectoryError once the other matches are gone.
    Raises FileNotFoundError if nothing matches. OSError from unlink propagates.
    """
    matches = sorted(
        p
        for p in src_dir.iterdir()
        if fnmatch.fnmatchcase(p.name, pattern)
        and (pattern.startswith(".") or not p.name.startswith("."))
    )
    if not matches:
        msg = f"No files matching {pattern} in {src_dir}"
        raise FileNotFoundError(msg)
    removed: list[Path] = []
    directories: list[Path] = []
    for p in matches:
        if p.is_dir() and not p.is_symlink():
            directories.append(p)
            continue
        log.debug("Removing %s", p)
        p.unlink()
        removed.append(p)
    if directories:
        msg = f"Cannot remove directory: {directories[0]}"
        raise IsADirectoryError(msg)
    return removed


def call_sea_orm_generate(
    src_dir: Path,
    generator: Sequence[str],
    *,
    database_url: str | None = None,
) -> int:
    """Run the entity generator with cwd=src_dir. Returns its exit code.

    database_url, if given, is exported as DATABASE_URL for the generator.
    """
    env = None
    if database_url:
        env = {**os.environ, "DATABASE_URL": database_url}
    return run_command(list(generator), cwd=src_dir, env=env)


def run(
    project_root: Path,
    config: dict[str, Any] | None = None,
    *,
    database_url: str | None = None,
) -> int:
    """Delete generated entity files, then regenerate them. Returns 0 or the failing exit code.

    Files are deleted before the generator runs and are not backed up: if the
    generator fails the directory is left without entity sources.
    """
    cfg = config if config is not None else resolve_config(None)
    entity = cfg["entity"]
    src_dir = project_root / entity["dir"]

    if not src_dir.is_dir():
        print(f"[ERROR] Entity directory not found: {src_dir}", file=sys.stderr)
        return 1

    try:
        removed = remove_generated_files(src_dir, entity["pattern"])
    except OSError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    print(f"🗑️  Removed {len(removed)} generated file(s) from {src_dir}")

    rc = call_sea_orm_generate(src_dir, entity["generator"], database_url=database_url)
    if rc != 0:
        print(f"❌ Entity generation failed (exit {rc})", file=sys.stderr)
        return rc

    print(f"✅ Regenerated entities in {src_dir}")
    return 0
