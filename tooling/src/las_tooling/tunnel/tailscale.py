"""Expose the local web server through Tailscale: serve / on the tailnet, funnel the pubsub path publicly."""

from __future__ import annotations

import sys
from typing import Any

from las_tooling.config import resolve_config
from las_tooling.helpers import run_steps


def _tunnel(cfg: dict[str, Any] | None) -> dict[str, Any]:
    return (cfg if cfg is not None else resolve_config(None))["tunnel"]


def _base(tunnel: dict[str, Any]) -> list[str]:
    """sudo prefix (if enabled) plus the tailscale binary."""
    return (["sudo"] if tunnel["sudo"] else []) + [str(tunnel["binary"])]


def funnel_target(cfg: dict[str, Any] | None = None) -> str:
    """Local URL the public funnel forwards to (e.g. http://localhost:8080/pubsub)."""
    t = _tunnel(cfg)
    return f"http://{t['host']}:{t['port']}{t['public_path']}"


def serve_command(cfg: dict[str, Any] | None = None) -> list[str]:
    """tailscale serve --set-path=<serve_path> --bg <port>"""
    t = _tunnel(cfg)
    return [*_base(t), "serve", f"--set-path={t['serve_path']}", "--bg", str(t["port"])]


def funnel_command(cfg: dict[str, Any] | None = None) -> list[str]:
    """tailscale funnel --set-path=<public_path> --bg <funnel_target>"""
    t = _tunnel(cfg)
    return [*_base(t), "funnel", f"--set-path={t['public_path']}", "--bg", funnel_target(cfg)]


def status_command(cfg: dict[str, Any] | None = None) -> list[str]:
    return [*_base(_tunnel(cfg)), "funnel", "status"]


def reset_command(cfg: dict[str, Any] | None = None) -> list[str]:
    return [*_base(_tunnel(cfg)), "serve", "reset"]


def expose(cfg: dict[str, Any] | None = None) -> int:
    """Register serve and funnel in the background, then print funnel status.

    Stops at the first failing command and returns its exit code; returns 0 if all three succeed.
    """
    rc = run_steps([serve_command(cfg), funnel_command(cfg), status_command(cfg)])
    if rc != 0:
        print(f"❌ Tunnel setup failed (exit {rc})", file=sys.stderr)
    return rc


def status(cfg: dict[str, Any] | None = None) -> int:
    """Print funnel status. Returns tailscale's exit code."""
    return run_steps([status_command(cfg)])


def reset(cfg: dict[str, Any] | None = None) -> int:
    """Remove serve and funnel registrations. Returns tailscale's exit code."""
    rc = run_steps([reset_command(cfg)])
    if rc == 0:
        print("Tunnel reset complete!")
    return rc
