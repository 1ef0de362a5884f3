"""Shared helpers for las_tooling: command tracing and fail-fast command sequences.

Used by entity, tunnel and doctor modules.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

log = logging.getLogger(__name__)

# Shell conventions for commands that could not be started.
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


def format_command(cmd: Sequence[str]) -> str:
    """Render argv as a shell-quoted string (e.g. for tracing)."""
    return shlex.join(str(c) for c in cmd)


def run_command(
    cmd: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    """Trace cmd to stderr as '+ cmd', run it with inherited stdio, return its exit code.

    Returns 127 if the executable is missing, 126 if it cannot be executed,
    1 if cwd is not a directory, and 128+N if the command was killed by signal N.
    """
    print(f"+ {format_command(cmd)}", file=sys.stderr)
    log.debug("cwd=%s", cwd)
    if cwd is not None and not cwd.is_dir():
        print(f"[ERROR] Working directory not found: {cwd}", file=sys.stderr)
        return 1
    try:
        result = subprocess.run(
            [str(c) for c in cmd],
            check=False,  # Exit code is the caller's result
            cwd=str(cwd) if cwd is not None else None,
            env=dict(env) if env is not None else None,
        )
    except FileNotFoundError:
        print(f"[ERROR] {cmd[0]}: command not found", file=sys.stderr)
        return EXIT_NOT_FOUND
    except PermissionError:
        print(f"[ERROR] {cmd[0]}: permission denied", file=sys.stderr)
        return EXIT_NOT_EXECUTABLE
    rc = result.returncode
    # subprocess reports death by signal N as -N
    return 128 - rc if rc < 0 else rc


def run_steps(
    steps: Iterable[Sequence[str]],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run commands in order, stopping at the first non-zero exit code and returning it.

    Returns 0 only if every command succeeded.
    """
    for cmd in steps:
        rc = run_command(cmd, cwd=cwd, env=env)
        if rc != 0:
            log.debug("Aborting sequence: %s exited %d", format_command(cmd), rc)
            return rc
    return 0
