"""Tooling configuration: defaults for entity, migration and tunnel commands; optional las-tooling.yaml overrides."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "las-tooling.yaml"

# Paths relative to project_root. Values mirror the scripts they replace.
DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "entity": {
        "dir": "crates/entity/src",
        "pattern": "*.rs",
        "generator": ["sea-orm-cli", "generate", "entity", "-l"],
    },
    "migration": {
        "manifest": "crates/migration/Cargo.toml",
    },
    "tunnel": {
        "binary": "tailscale",
        "sudo": True,
        "port": 8080,
        "serve_path": "/",
        "public_path": "/pubsub",
        "host": "localhost",
    },
}


def resolve_config(overrides: dict[str, Any] | None) -> dict[str, dict[str, Any]]:
    """Return config with defaults filled. Unknown sections and keys are ignored."""
    out = copy.deepcopy(DEFAULT_CONFIG)
    if not overrides:
        return out
    for section, values in overrides.items():
        if section not in out:
            log.debug("Ignoring unknown config section %r", section)
            continue
        if not isinstance(values, dict):
            msg = f"Config section {section!r} must be a mapping"
            raise ValueError(msg)
        for key, value in values.items():
            if key not in out[section]:
                log.debug("Ignoring unknown config key %s.%s", section, key)
                continue
            out[section][key] = value
    generator = out["entity"]["generator"]
    if isinstance(generator, str):
        out["entity"]["generator"] = generator.split()
    tunnel = out["tunnel"]
    if not isinstance(tunnel["sudo"], bool):
        msg = f"tunnel.sudo must be true or false, got {tunnel['sudo']!r}"
        raise ValueError(msg)
    port = tunnel["port"]
    try:
        if isinstance(port, bool):
            raise ValueError
        tunnel["port"] = int(port)
    except (TypeError, ValueError):
        msg = f"tunnel.port must be an integer, got {port!r}"
        raise ValueError(msg) from None
    return out


def load_config(project_root: Path, config_path: Path | None = None) -> dict[str, dict[str, Any]]:
    """Load las-tooling.yaml (or config_path) and merge it over the defaults.

    A missing default file means defaults; an explicit config_path must exist.
    Raises ValueError if the file is not a mapping.
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = project_root / CONFIG_FILE_NAME
    elif not config_path.is_absolute():
        config_path = project_root / config_path

    if not config_path.exists():
        if explicit:
            msg = f"Config file not found: {config_path}"
            raise FileNotFoundError(msg)
        return resolve_config(None)

    log.debug("Loading config from %s", config_path)
    with config_path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        return resolve_config(None)
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping: {config_path}"
        raise ValueError(msg)
    return resolve_config(data)
