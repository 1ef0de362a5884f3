"""Shared CLI argument parsing: --project-root, --config, --verbose; config loading for commands."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from las_tooling.config import load_config

VERBOSE_FLAGS = ("-v", "--verbose")


def parse_flags(
    argv: list[str],
    *specs: tuple[str, str, Any, Callable[[str], Any] | None],
) -> tuple[dict[str, Any], list[str]]:
    """Parse optional --flag value pairs from argv in one pass.

    Each spec is (key, flag_str, default, converter); default may be a callable
    (e.g. Path.cwd). converter can be None for string values.
    Returns (dict of key -> value, remaining argv).
    """
    result: dict[str, Any] = {}
    for key, _flag, default, _converter in specs:
        result[key] = default() if callable(default) else default

    rest: list[str] = []
    i = 0
    while i < len(argv):
        for key, flag_str, _default, converter in specs:
            if argv[i] == flag_str and i + 1 < len(argv):
                result[key] = converter(argv[i + 1]) if converter else argv[i + 1]
                i += 2
                break
        else:
            rest.append(argv[i])
            i += 1
    return result, rest


def path_resolver(s: str) -> Path:
    """Resolve a path argument to an absolute Path."""
    return Path(s).resolve()


def pop_verbose(argv: list[str]) -> tuple[bool, list[str]]:
    """Strip -v/--verbose from argv. Returns (verbose, remaining argv)."""
    rest = [a for a in argv if a not in VERBOSE_FLAGS]
    return len(rest) != len(argv), rest


def parse_project_args(
    argv: list[str],
    usage: str,
    *extra: tuple[str, str, Any, Callable[[str], Any] | None],
) -> tuple[dict[str, Any], list[str]]:
    """Parse --project-root, --config and extra flags; exit 1 with usage on stray options."""
    parsed, rest = parse_flags(
        argv,
        ("project_root", "--project-root", Path.cwd, path_resolver),
        ("config_path", "--config", None, Path),
        *extra,
    )
    for a in rest:
        if a.startswith("-"):
            print(f"Error: Unknown argument: {a}", file=sys.stderr)
            print(f"Usage: {usage}", file=sys.stderr)
            sys.exit(1)
    return parsed, rest


def load_config_or_exit(project_root: Path, config_path: Path | None) -> dict[str, Any]:
    """load_config, exiting 1 with an [ERROR] line if the file is missing or invalid."""
    try:
        return load_config(project_root, config_path)
    except (FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
