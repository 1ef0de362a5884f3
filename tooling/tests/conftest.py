"""Pytest fixtures for las_tooling tests."""

import stat
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def entity_project(tmp_path: Path) -> tuple[Path, Path]:
    """Project tree with crates/entity/src holding stale generated entities. Returns (root, src_dir)."""
    src = tmp_path / "crates" / "entity" / "src"
    src.mkdir(parents=True)
    for name in ("lib.rs", "prelude.rs", "video.rs", "subscription.rs"):
        (src / name).write_text(f"// stale {name}\n")
    return tmp_path, src


@pytest.fixture
def fake_tool(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write an executable /bin/sh script into tmp_path/bin. Returns its path."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(exist_ok=True)

    def make(name: str, body: str) -> Path:
        p = bin_dir / name
        p.write_text(f"#!/bin/sh\n{body}\n")
        p.chmod(p.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return p

    return make
