"""CLI for tunnel: las tunnel expose | status | reset."""

from __future__ import annotations

import sys

from las_tooling.cli.parse_common import load_config_or_exit, parse_project_args
from las_tooling.tunnel import expose, reset, status


def run_tunnel_argv(argv: list[str]) -> None:
    """Dispatch las tunnel <subcommand>. argv excludes 'las tunnel'."""
    if not argv:
        print("Usage: las tunnel <subcommand> [options]", file=sys.stderr)
        print("Subcommands:", file=sys.stderr)
        print("  expose  - tailscale serve / and funnel /pubsub, then show status", file=sys.stderr)
        print("  status  - tailscale funnel status", file=sys.stderr)
        print("  reset   - Remove serve and funnel registrations", file=sys.stderr)
        sys.exit(1)

    sub = argv[0].lower()
    action = {"expose": expose, "status": status, "reset": reset}.get(sub)
    if action is None:
        print(f"Error: Unknown tunnel subcommand: {sub}", file=sys.stderr)
        sys.exit(1)

    usage = f"las tunnel {sub} [--project-root <path>] [--config <file>]"
    parsed, rest = parse_project_args(argv[1:], usage)
    if rest:
        print(f"Error: Unexpected argument: {rest[0]}", file=sys.stderr)
        print(f"Usage: {usage}", file=sys.stderr)
        sys.exit(1)
    cfg = load_config_or_exit(parsed["project_root"], parsed["config_path"])
    sys.exit(action(cfg))
