"""Check that the external tools used by las_tooling are installed."""

from __future__ import annotations

import shutil
import sys
from collections.abc import Iterable
from typing import Any

from las_tooling.config import resolve_config


def required_tools(cfg: dict[str, Any] | None = None) -> list[str]:
    """Generator, cargo, tailscale, and sudo when the tunnel uses it."""
    cfg = cfg if cfg is not None else resolve_config(None)
    tools = [str(cfg["entity"]["generator"][0]), "cargo", str(cfg["tunnel"]["binary"])]
    if cfg["tunnel"]["sudo"]:
        tools.append("sudo")
    return tools


def missing_tools(tools: Iterable[str]) -> list[str]:
    return [t for t in tools if not shutil.which(t)]


def run(cfg: dict[str, Any] | None = None) -> int:
    """Print one line per tool. Returns 1 if any are missing, else 0."""
    tools = required_tools(cfg)
    missing = missing_tools(tools)
    for t in tools:
        if t in missing:
            print(f"❌ {t}: not found on PATH")
        else:
            print(f"✅ {t}")
    if missing:
        print(
            f"[ERROR] Missing tool(s): {', '.join(missing)}. Please install them first.",
            file=sys.stderr,
        )
        return 1
    return 0
