"""Run the migration crate (cargo run --manifest-path crates/migration/Cargo.toml -- <action>)."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from las_tooling.config import resolve_config
from las_tooling.helpers import run_command

# Actions understood by the migration binary.
MIGRATION_ACTIONS = ("fresh", "refresh", "reset", "status")


def call_migration(
    project_root: Path,
    manifest: Path,
    action: str,
    *,
    database_url: str | None = None,
) -> int:
    """Run the migration binary via cargo with cwd=project_root. Returns cargo's exit code."""
    env = None
    if database_url:
        env = {**os.environ, "DATABASE_URL": database_url}
    cmd = ["cargo", "run", "--manifest-path", str(manifest), "--", action]
    return run_command(cmd, cwd=project_root, env=env)


def run(
    project_root: Path,
    action: str,
    config: dict[str, Any] | None = None,
    *,
    database_url: str | None = None,
) -> int:
    """Validate action, manifest and DATABASE_URL, then run the migration. Returns 0 or 1 / cargo's code."""
    if action not in MIGRATION_ACTIONS:
        print(
            f"[ERROR] Unknown migration action: {action} (expected one of: {', '.join(MIGRATION_ACTIONS)})",
            file=sys.stderr,
        )
        return 1
    cfg = config if config is not None else resolve_config(None)
    manifest = project_root / cfg["migration"]["manifest"]
    if not manifest.exists():
        print(f"[ERROR] Migration manifest not found: {manifest}", file=sys.stderr)
        return 1
    if not database_url and not os.environ.get("DATABASE_URL"):
        print("[ERROR] DATABASE_URL is not set (pass --database-url)", file=sys.stderr)
        return 1

    rc = call_migration(project_root, manifest, action, database_url=database_url)
    if rc != 0:
        print(f"❌ Migration '{action}' failed (exit {rc})", file=sys.stderr)
        return rc
    print(f"✅ Migration '{action}' complete")
    return 0
