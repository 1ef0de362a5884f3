"""Tunnel: expose the local web server with tailscale serve/funnel, query status, reset."""

from las_tooling.tunnel.tailscale import (
    expose,
    funnel_command,
    funnel_target,
    reset,
    reset_command,
    serve_command,
    status,
    status_command,
)

__all__ = [
    "expose",
    "funnel_command",
    "funnel_target",
    "reset",
    "reset_command",
    "serve_command",
    "status",
    "status_command",
]
